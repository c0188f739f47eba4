"""Caching infrastructure.

This module provides the memo used for per-column statistics.
"""

from .statistics_cache import Metric, StatisticsCache, StatisticsEntry

__all__ = [
    "Metric",
    "StatisticsCache",
    "StatisticsEntry",
]
