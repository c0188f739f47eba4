"""Uniform value type returned by every column accessor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ValueKind(StrEnum):
    FLOAT = "float"
    INTEGER = "integer"
    STRING = "string"
    DATETIME = "datetime"
    NULL = "null"


type Scalar = float | int | str | datetime | None


@dataclass(frozen=True, slots=True)
class DataValue:
    """A tagged scalar.

    Callers read ``kind`` and ``value`` instead of branching on the column
    variant the value came from.
    """

    kind: ValueKind
    value: Scalar = None

    @classmethod
    def float_(cls, value: float) -> DataValue:
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def integer(cls, value: int) -> DataValue:
        return cls(ValueKind.INTEGER, int(value))

    @classmethod
    def string(cls, value: str) -> DataValue:
        return cls(ValueKind.STRING, value)

    @classmethod
    def datetime_(cls, value: datetime) -> DataValue:
        return cls(ValueKind.DATETIME, value)

    @classmethod
    def null(cls) -> DataValue:
        return cls(ValueKind.NULL)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return str(self.value)
