from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_frame_loaded(self, source: str, row_count: int, column_count: int) -> None:
        return None

    @override
    def log_column_inferred(self, name: str, kind: str, row_count: int) -> None:
        return None

    @override
    def log_candidate_rejected(self, name: str, kind: str, reason: str) -> None:
        return None

    @override
    def log_statistic_computed(self, name: str, metric: str, *, cached: bool) -> None:
        return None
