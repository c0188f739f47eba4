"""Head command - print the first rows of a delimited file."""

from __future__ import annotations

from pathlib import Path

import click

from ...domain.exceptions import TabstatError
from ...infrastructure.container import DependencyContainer
from ..options import CliState, frame_options, resolve_config


@click.command()
@frame_options
@click.option(
    "-n",
    "--lines",
    "n_lines",
    type=click.IntRange(min=0),
    default=None,
    help="Number of rows to print (default: display.head_rows, 5)",
)
@click.pass_obj
def head_command(
    state: CliState | None,
    csv_file: Path,
    separator: str | None,
    header_skip: int | None,
    date_columns: tuple[str, ...],
    n_lines: int | None,
) -> None:
    """Print the header and first rows of CSV_FILE, aligned per column.

    Examples:

    \b
        tabstat head data.csv -n 10
        tabstat head data.tsv --sep '\\t' --date created=%Y-%m-%d
    """
    state = state or CliState()
    config = resolve_config(
        state,
        separator=separator,
        header_skip=header_skip,
        date_columns=date_columns,
    )
    container = DependencyContainer(verbose=state.verbose)
    try:
        frame = container.load_dataframe(csv_file, config)
        text = frame.head(n_lines)
    except TabstatError as e:
        raise click.ClickException(str(e)) from e
    click.echo(text, nl=False)
