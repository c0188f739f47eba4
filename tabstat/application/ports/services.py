from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_frame_loaded(
        self, source: str, row_count: int, column_count: int
    ) -> None: ...

    def log_column_inferred(self, name: str, kind: str, row_count: int) -> None: ...

    def log_candidate_rejected(self, name: str, kind: str, reason: str) -> None: ...

    def log_statistic_computed(
        self, name: str, metric: str, *, cached: bool
    ) -> None: ...
