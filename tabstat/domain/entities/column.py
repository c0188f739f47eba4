"""Typed column containers.

``Column[T]`` owns the parsed values of one input field. ``ColumnVariant``
is the closed set of concrete column kinds produced by type inference, so
callers can hold any column without knowing ``T``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidRangeError, OutOfRangeError
from .data_value import DataValue, ValueKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from datetime import datetime


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison that orders NaN after every other value."""
    left_nan = left != left
    right_nan = right != right
    if left_nan or right_nan:
        return int(left_nan) - int(right_nan)
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


class Column[T]:
    __slots__ = ("_name", "_sorted_cache", "_values")

    def __init__(self, name: str, values: Iterable[T]) -> None:
        super().__init__()
        self._name = name
        self._values: tuple[T, ...] = tuple(values)
        self._sorted_cache: tuple[tuple[T, ...], int] | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def values(self) -> tuple[T, ...]:
        return self._values

    @property
    def count(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Column(name={self._name!r}, count={self.count})"

    def get(self, index: int) -> T:
        if index < 0 or index >= self.count:
            raise OutOfRangeError(index, self.count)
        return self._values[index]

    def range_as_display(self, begin: int, end: int) -> tuple[list[str], int]:
        """Render ``values[begin:end]`` as text.

        Returns the rendered cells and the width of the widest one.
        """
        if end > self.count or begin > end or begin < 0:
            raise InvalidRangeError(begin, end, self.count)
        cells = [str(value) for value in self._values[begin:end]]
        max_width = max((len(cell) for cell in cells), default=0)
        return cells, max_width

    def sorted_snapshot(self) -> tuple[T, ...]:
        """Ascending copy of the values, memoized until ``count`` changes."""
        if self._sorted_cache is not None:
            snapshot, tag = self._sorted_cache
            if tag == self.count:
                return snapshot
        snapshot = tuple(sorted(self._values, key=cmp_to_key(compare_values)))
        self._sorted_cache = (snapshot, self.count)
        return snapshot


class ColumnKind(StrEnum):
    FLOAT = "float"
    INTEGER = "integer"
    STRING = "string"
    DATETIME = "datetime"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnKind.FLOAT, ColumnKind.INTEGER)


@dataclass(frozen=True, slots=True)
class ColumnVariant:
    kind: ColumnKind
    column: Column[Any]

    @classmethod
    def float_(cls, column: Column[float]) -> ColumnVariant:
        return cls(ColumnKind.FLOAT, column)

    @classmethod
    def integer(cls, column: Column[int]) -> ColumnVariant:
        return cls(ColumnKind.INTEGER, column)

    @classmethod
    def string(cls, column: Column[str]) -> ColumnVariant:
        return cls(ColumnKind.STRING, column)

    @classmethod
    def datetime_(cls, column: Column[datetime]) -> ColumnVariant:
        return cls(ColumnKind.DATETIME, column)

    @property
    def name(self) -> str:
        return self.column.name

    @property
    def count(self) -> int:
        return self.column.count

    def value_at(self, index: int) -> DataValue:
        return DataValue(ValueKind(self.kind.value), self.column.get(index))

    def range_as_display(self, begin: int, end: int) -> tuple[list[str], int]:
        return self.column.range_as_display(begin, end)

    def sorted_snapshot(self) -> tuple[Any, ...]:
        return self.column.sorted_snapshot()
