from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ColumnConfig:
    forced_as_datetime: bool = False
    date_format: str | None = None

    @classmethod
    def as_datetime(cls, date_format: str | None = None) -> ColumnConfig:
        return cls(forced_as_datetime=True, date_format=date_format or None)
