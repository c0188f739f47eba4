"""Quantile command - a single quantile of one column."""

from __future__ import annotations

from pathlib import Path

import click

from ...domain.exceptions import TabstatError
from ...infrastructure.container import DependencyContainer
from ..options import CliState, frame_options, resolve_config


@click.command()
@frame_options
@click.argument("column")
@click.argument("level", type=float)
@click.pass_obj
def quantile_command(
    state: CliState | None,
    csv_file: Path,
    separator: str | None,
    header_skip: int | None,
    date_columns: tuple[str, ...],
    column: str,
    level: float,
) -> None:
    """Print the LEVEL quantile of COLUMN in CSV_FILE.

    Float columns interpolate between neighbouring values; integer columns
    return the nearest-rank value. LEVEL must be in [0, 1).
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
        value = frame.quantile(column, level)
    except TabstatError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(value))
