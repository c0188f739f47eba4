"""tabstat package.

Reads delimited text into typed, in-memory columns and computes descriptive
statistics over them.

Features:
- Per-column type inference (Integer, Float, String, forced Datetime)
- Mean, median, standard deviation and arbitrary quantiles
- Memoized statistics per column
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("tabstat")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from tabstat.config import ConfigLoader, TabstatConfig
from tabstat.dataframe import DataFrame
from tabstat.domain.entities import (
    Column,
    ColumnConfig,
    ColumnKind,
    ColumnVariant,
    DataValue,
    ValueKind,
)
from tabstat.domain.exceptions import (
    ColumnLengthMismatchError,
    EmptyColumnError,
    InsufficientDataError,
    InvalidColumnTypeError,
    InvalidMetricTypeError,
    InvalidQuantileError,
    InvalidRangeError,
    MissingColumnError,
    OutOfRangeError,
    TabstatError,
)
from tabstat.domain.services import TypeInferenceEngine, quickselect
from tabstat.infrastructure.io.exceptions import UnexpectedEndOfInputError

__all__ = [
    "__version__",
    # Frame
    "DataFrame",
    "TypeInferenceEngine",
    "quickselect",
    # Configuration
    "ConfigLoader",
    "TabstatConfig",
    "ColumnConfig",
    # Columns and values
    "Column",
    "ColumnKind",
    "ColumnVariant",
    "DataValue",
    "ValueKind",
    # Errors
    "ColumnLengthMismatchError",
    "EmptyColumnError",
    "InsufficientDataError",
    "InvalidColumnTypeError",
    "InvalidMetricTypeError",
    "InvalidQuantileError",
    "InvalidRangeError",
    "MissingColumnError",
    "OutOfRangeError",
    "TabstatError",
    "UnexpectedEndOfInputError",
]
