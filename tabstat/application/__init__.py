"""Application layer: result models and the ports adapters implement."""

from .models import ColumnSummary
from .ports.services import LoggerPort

__all__ = ["ColumnSummary", "LoggerPort"]
