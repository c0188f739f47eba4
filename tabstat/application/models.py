from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.entities.data_value import DataValue


@dataclass(frozen=True, slots=True)
class ColumnSummary:
    """Descriptive statistics for one column.

    Statistic fields stay ``None`` for non-numeric or empty columns, and
    ``stddev`` also stays ``None`` when there are too few values for it.
    """

    name: str
    kind: str
    count: int
    mean: DataValue | None = None
    median: DataValue | None = None
    stddev: DataValue | None = None
    quantiles: tuple[tuple[float, DataValue], ...] = ()

    @property
    def has_statistics(self) -> bool:
        return self.mean is not None
