"""Ports implemented by the infrastructure layer."""

from .services import LoggerPort

__all__ = ["LoggerPort"]
