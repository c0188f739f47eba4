"""Domain services: type inference, selection and statistics."""

from .datetime_parsing import guess_datetime, parse_datetime
from .selection import first_pivot, middle_pivot, quickselect, random_pivot
from .statistics import (
    FloatStatistics,
    IntegerStatistics,
    Statistics,
    statistics_for,
    validate_quantile,
)
from .type_inference import (
    DEFAULT_CANDIDATES,
    CellParseError,
    TypeCandidate,
    TypeInferenceEngine,
)

__all__ = [
    "DEFAULT_CANDIDATES",
    "CellParseError",
    "FloatStatistics",
    "IntegerStatistics",
    "Statistics",
    "TypeCandidate",
    "TypeInferenceEngine",
    "first_pivot",
    "guess_datetime",
    "middle_pivot",
    "parse_datetime",
    "quickselect",
    "random_pivot",
    "statistics_for",
    "validate_quantile",
]
