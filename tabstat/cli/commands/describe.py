"""Describe command - per-column type and descriptive statistics."""

from __future__ import annotations

from pathlib import Path

import click

from ...domain.exceptions import TabstatError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.logging.console_logger import ConsoleLogger
from ..options import CliState, frame_options, resolve_config
from ..presenters.summary import SummaryPresenter


@click.command()
@frame_options
@click.option(
    "-q",
    "--quantile",
    "quantiles",
    type=float,
    multiple=True,
    help="Quantile level in [0, 1) to report (repeatable; default: statistics.quantiles)",
)
@click.pass_obj
def describe_command(
    state: CliState | None,
    csv_file: Path,
    separator: str | None,
    header_skip: int | None,
    date_columns: tuple[str, ...],
    quantiles: tuple[float, ...],
) -> None:
    """Infer column types of CSV_FILE and print descriptive statistics.

    Numeric columns report mean, median, standard deviation and the
    requested quantiles. Text and datetime columns report their count only.
    """
    state = state or CliState()
    config = resolve_config(
        state,
        separator=separator,
        header_skip=header_skip,
        date_columns=date_columns,
    )
    container = DependencyContainer(verbose=state.verbose)
    logger = container.create_logger()
    try:
        frame = container.load_dataframe(csv_file, config)
        summaries = frame.describe(quantiles or config.describe_quantiles)
    except TabstatError as e:
        raise click.ClickException(str(e)) from e
    SummaryPresenter(container.console).present(summaries, title=csv_file.name)
    if isinstance(logger, ConsoleLogger):
        logger.log_final_stats()
