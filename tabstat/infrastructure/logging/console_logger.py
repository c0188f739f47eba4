from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    column: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "frames_loaded": 0,
        "columns_inferred": 0,
        "candidates_rejected": 0,
        "statistics_computed": 0,
        "cache_hits": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_frame_loaded(self, source: str, row_count: int, column_count: int) -> None:
        self.set_context(source=source)
        self._stats["frames_loaded"] += 1
        self.verbose(
            f"Loaded {row_count:,} rows x {column_count} columns from {escape(source)}"
        )

    @override
    def log_column_inferred(self, name: str, kind: str, row_count: int) -> None:
        self.set_context(column=name)
        self._stats["columns_inferred"] += 1
        self.verbose(
            f"Column {escape(repr(name))} inferred as {kind} ({row_count:,} values)"
        )

    @override
    def log_candidate_rejected(self, name: str, kind: str, reason: str) -> None:
        self._stats["candidates_rejected"] += 1
        self.debug(
            f"Column {escape(repr(name))} couldn't be parsed as {kind}. "
            f"Reason: {escape(reason)}"
        )

    @override
    def log_statistic_computed(self, name: str, metric: str, *, cached: bool) -> None:
        if cached:
            self._stats["cache_hits"] += 1
            self.debug(f"{metric} of {escape(repr(name))} served from cache")
        else:
            self._stats["statistics_computed"] += 1
            self.debug(f"{metric} of {escape(repr(name))} computed")

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Columns inferred: {self._stats['columns_inferred']}[/dim]"
            )
            self.console.print(
                f"[dim]  Statistics computed: {self._stats['statistics_computed']}[/dim]"
            )
            self.console.print(f"[dim]  Cache hits: {self._stats['cache_hits']}[/dim]")
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.source:
            parts.append(self._context.source)
        if self._context.column:
            parts.append(self._context.column)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
