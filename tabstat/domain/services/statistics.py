"""Descriptive statistics for numeric columns.

Only ``Float`` and ``Integer`` columns support statistics. The two kinds
differ on purpose in how they answer a quantile:

- Float columns interpolate linearly between the two neighbouring ranks at
  position ``q * (n - 1)``.
- Integer columns use nearest rank, ``ceil(q * n) - 1``, and never return a
  value that is not in the column.

Quantile levels must satisfy ``0.0 <= q < 1.0``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Protocol, override, runtime_checkable

from ..entities.column import ColumnKind
from ..entities.data_value import DataValue
from ..exceptions import (
    EmptyColumnError,
    InsufficientDataError,
    InvalidMetricTypeError,
    InvalidQuantileError,
)
from .selection import quickselect, random_pivot

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..entities.column import Column, ColumnVariant
    from .selection import PivotSelector


@runtime_checkable
class Statistics(Protocol):
    pass

    def mean(self) -> DataValue: ...

    def median(self) -> DataValue: ...

    def quantile(self, q: float) -> DataValue: ...

    def stddev(self) -> DataValue: ...


def validate_quantile(q: float) -> None:
    if not 0.0 <= q < 1.0:
        raise InvalidQuantileError(q)


class _NumericStatistics:
    def __init__(
        self,
        column: Column[Any],
        *,
        ddof: int = 1,
        pivot_selector: PivotSelector = random_pivot,
    ) -> None:
        super().__init__()
        self._column = column
        self._ddof = ddof
        self._pivot_selector = pivot_selector

    def _require_values(self) -> Sequence[Any]:
        if self._column.count == 0:
            raise EmptyColumnError(self._column.name)
        return self._column.values

    def _wrap(self, value: Any) -> DataValue:
        raise NotImplementedError

    def _select_quantile(self, ordered: Sequence[Any], q: float) -> DataValue:
        raise NotImplementedError

    def mean(self) -> DataValue:
        values = self._require_values()
        return DataValue.float_(math.fsum(values) / len(values))

    def median(self) -> DataValue:
        values = self._require_values()
        n = len(values)
        upper = quickselect(values, n // 2, self._pivot_selector)
        if n % 2 == 1:
            return self._wrap(upper)
        lower = quickselect(values, n // 2 - 1, self._pivot_selector)
        return DataValue.float_((lower + upper) / 2)

    def quantile(self, q: float) -> DataValue:
        validate_quantile(q)
        self._require_values()
        return self._select_quantile(self._column.sorted_snapshot(), q)

    def stddev(self) -> DataValue:
        values = self._require_values()
        n = len(values)
        if n <= self._ddof:
            raise InsufficientDataError(self._column.name, self._ddof, n)
        mu = math.fsum(values) / n
        variance = math.fsum((x - mu) ** 2 for x in values) / (n - self._ddof)
        return DataValue.float_(math.sqrt(variance))


class FloatStatistics(_NumericStatistics):
    @override
    def _wrap(self, value: Any) -> DataValue:
        return DataValue.float_(value)

    @override
    def _select_quantile(self, ordered: Sequence[Any], q: float) -> DataValue:
        n = len(ordered)
        position = min(max(q * (n - 1), 0.0), float(n - 1))
        lower = math.floor(position)
        upper = lower + 1
        if upper >= n:
            return DataValue.float_(ordered[lower])
        fraction = position - lower
        if fraction == 0.0:
            return DataValue.float_(ordered[lower])
        value = ordered[lower] * (1.0 - fraction) + ordered[upper] * fraction
        return DataValue.float_(value)


class IntegerStatistics(_NumericStatistics):
    @override
    def _wrap(self, value: Any) -> DataValue:
        return DataValue.integer(value)

    @override
    def _select_quantile(self, ordered: Sequence[Any], q: float) -> DataValue:
        n = len(ordered)
        index = min(max(math.ceil(q * n) - 1, 0), n - 1)
        return DataValue.integer(ordered[index])


_STATISTICS: dict[ColumnKind, type[_NumericStatistics]] = {
    ColumnKind.FLOAT: FloatStatistics,
    ColumnKind.INTEGER: IntegerStatistics,
}


def statistics_for(
    variant: ColumnVariant,
    metric: str,
    *,
    ddof: int = 1,
    pivot_selector: PivotSelector = random_pivot,
) -> Statistics:
    """Return the statistics implementation for ``variant``.

    Raises:
        InvalidMetricTypeError: If the column is not numeric
    """
    factory = _STATISTICS.get(variant.kind)
    if factory is None:
        raise InvalidMetricTypeError(variant.name, metric)
    return factory(variant.column, ddof=ddof, pivot_selector=pivot_selector)
