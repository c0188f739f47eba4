from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...domain.entities.data_value import DataValue


class Metric(StrEnum):
    MEAN = "mean"
    MEDIAN = "median"
    STDDEV = "stddev"


@dataclass(slots=True)
class StatisticsEntry:
    mean: DataValue | None = None
    median: DataValue | None = None
    stddev: DataValue | None = None

    def get(self, metric: Metric) -> DataValue | None:
        return getattr(self, metric.value)

    def set(self, metric: Metric, value: DataValue) -> None:
        setattr(self, metric.value, value)


class StatisticsCache:
    """Per-column memo of parameterless statistics.

    Entries are keyed by column name. Columns never change after
    construction, so nothing is invalidated automatically; a caller that
    replaces a column must call ``invalidate``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, StatisticsEntry] = {}

    def get(self, name: str, metric: Metric) -> DataValue | None:
        entry = self._store.get(name)
        if entry is None:
            return None
        return entry.get(metric)

    def set(self, name: str, metric: Metric, value: DataValue) -> None:
        self._store.setdefault(name, StatisticsEntry()).set(metric, value)

    def get_or_compute(
        self, name: str, metric: Metric, compute: Callable[[], DataValue]
    ) -> DataValue:
        cached = self.get(name, metric)
        if cached is not None:
            return cached
        value = compute()
        self.set(name, metric, value)
        return value

    def invalidate(self, name: str) -> bool:
        if name in self._store:
            del self._store[name]
            return True
        return False

    def clear(self) -> None:
        self._store.clear()

    def has(self, name: str, metric: Metric) -> bool:
        return self.get(name, metric) is not None

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[str]:
        return list(self._store.keys())
