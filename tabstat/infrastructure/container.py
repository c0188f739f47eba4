from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..dataframe import DataFrame
from ..domain.services.type_inference import TypeInferenceEngine
from .io.csv_reader import CSVReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.services import LoggerPort
    from ..config import TabstatConfig


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger: LoggerPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger is None:
            if self.use_null_logger:
                self._logger = NullLogger()
            else:
                self._logger = ConsoleLogger(self.console, self.verbose)
        return self._logger

    def create_reader(self) -> CSVReader:
        return CSVReader()

    def create_inference_engine(self) -> TypeInferenceEngine:
        return TypeInferenceEngine(logger=self.create_logger())

    def load_dataframe(self, path: Path, config: TabstatConfig) -> DataFrame:
        return DataFrame.from_csv(
            path,
            config,
            reader=self.create_reader(),
            engine=self.create_inference_engine(),
            logger=self.create_logger(),
        )
