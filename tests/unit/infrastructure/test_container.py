"""Tests for dependency injection container.

These tests verify the container correctly creates and wires up the
logger, reader and inference engine used to load a frame.
"""

from io import StringIO
from pathlib import Path

from rich.console import Console

from tabstat.application.ports import LoggerPort
from tabstat.config import TabstatConfig
from tabstat.dataframe import DataFrame
from tabstat.domain.services.type_inference import TypeInferenceEngine
from tabstat.infrastructure.container import DependencyContainer
from tabstat.infrastructure.io import CSVReader
from tabstat.infrastructure.logging import ConsoleLogger, NullLogger


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    def test_create_container_with_defaults(self):
        """Test creating container with default configuration."""
        container = DependencyContainer()

        assert container.verbose == 0
        assert container.console is not None
        assert container.use_null_logger is False

    def test_create_container_with_custom_console(self):
        console = Console(file=StringIO())

        container = DependencyContainer(console=console)

        assert container.console is console

    def test_create_logger_returns_console_logger(self):
        """Test that create_logger returns ConsoleLogger by default."""
        container = DependencyContainer()

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert isinstance(logger, LoggerPort)

    def test_create_logger_returns_null_logger_when_configured(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_create_logger_is_singleton(self):
        """Test that create_logger returns the same instance."""
        container = DependencyContainer()

        assert container.create_logger() is container.create_logger()

    def test_create_logger_respects_verbose_level(self):
        container = DependencyContainer(verbose=2)

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger.verbosity == 2

    def test_create_reader_returns_instance(self):
        assert isinstance(DependencyContainer().create_reader(), CSVReader)

    def test_create_inference_engine_shares_logger(self):
        container = DependencyContainer(use_null_logger=True)

        engine = container.create_inference_engine()

        assert isinstance(engine, TypeInferenceEngine)
        assert engine._logger is container.create_logger()

    def test_load_dataframe(self, tmp_path: Path):
        """Test that the container loads a typed frame and logs the load."""
        csv_file = tmp_path / "data.csv"
        csv_file.write_text("a,b\n1,x\n")
        container = DependencyContainer(console=Console(file=StringIO()))

        frame = container.load_dataframe(csv_file, TabstatConfig())

        assert isinstance(frame, DataFrame)
        assert frame.header == ["a", "b"]
        stats = container.create_logger().get_stats()
        assert stats["frames_loaded"] == 1
        assert stats["columns_inferred"] == 2
