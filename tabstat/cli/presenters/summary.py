from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import ColumnSummary
    from ...domain.entities.data_value import DataValue

_MISSING = "-"


def format_value(value: DataValue | None) -> str:
    if value is None or value.value is None:
        return _MISSING
    if isinstance(value.value, float):
        return f"{value.value:,.4f}"
    if isinstance(value.value, int):
        return f"{value.value:,}"
    return str(value.value)


def format_quantile_label(q: float) -> str:
    return f"{q * 100:g}%"


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(
        self, summaries: Sequence[ColumnSummary], *, title: str | None = None
    ) -> None:
        self.console.print(self.build_table(summaries, title=title))

    def build_table(
        self, summaries: Sequence[ColumnSummary], *, title: str | None = None
    ) -> Table:
        levels = self._quantile_levels(summaries)
        table = Table(title=title or "Column Statistics")
        table.add_column("Column", style="cyan")
        table.add_column("Type")
        table.add_column("Count", justify="right")
        table.add_column("Mean", justify="right")
        table.add_column("Median", justify="right")
        table.add_column("Std Dev", justify="right")
        for q in levels:
            table.add_column(format_quantile_label(q), justify="right")
        for summary in summaries:
            quantiles = dict(summary.quantiles)
            table.add_row(
                summary.name,
                summary.kind,
                f"{summary.count:,}",
                format_value(summary.mean),
                format_value(summary.median),
                format_value(summary.stddev),
                *(format_value(quantiles.get(q)) for q in levels),
            )
        return table

    def _quantile_levels(self, summaries: Sequence[ColumnSummary]) -> list[float]:
        levels: list[float] = []
        for summary in summaries:
            for q, _ in summary.quantiles:
                if q not in levels:
                    levels.append(q)
        return levels
