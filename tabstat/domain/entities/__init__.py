"""Domain entities: typed columns and the values they expose."""

from .column import Column, ColumnKind, ColumnVariant
from .column_config import ColumnConfig
from .data_value import DataValue, ValueKind

__all__ = [
    "Column",
    "ColumnConfig",
    "ColumnKind",
    "ColumnVariant",
    "DataValue",
    "ValueKind",
]
