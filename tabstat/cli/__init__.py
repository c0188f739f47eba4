from pathlib import Path

import click

from .commands.describe import describe_command
from .commands.head import head_command
from .commands.quantile import quantile_command
from .options import CliState


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: ./tabstat.toml)",
)
@click.pass_context
def app(ctx: click.Context, verbose: int, config_file: Path | None) -> None:
    ctx.obj = CliState(verbose=verbose, config_file=config_file)


app.add_command(head_command, name="head")
app.add_command(describe_command, name="describe")
app.add_command(quantile_command, name="quantile")
__all__ = ["app"]
