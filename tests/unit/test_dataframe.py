"""Unit tests for DataFrame."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from tabstat import dataframe as dataframe_module
from tabstat.config import TabstatConfig
from tabstat.dataframe import DataFrame
from tabstat.domain.entities import (
    Column,
    ColumnConfig,
    ColumnKind,
    ColumnVariant,
    DataValue,
)
from tabstat.domain.exceptions import (
    ColumnLengthMismatchError,
    InvalidColumnTypeError,
    InvalidMetricTypeError,
    InvalidRangeError,
    MissingColumnError,
    OutOfRangeError,
)
from tabstat.domain.services.selection import first_pivot
from tabstat.infrastructure.io.exceptions import DataSourceNotFoundError


class RecordingLogger:
    def __init__(self):
        self.events = []

    def info(self, message):
        pass

    def success(self, message):
        pass

    def warning(self, message):
        pass

    def error(self, message):
        pass

    def debug(self, message):
        pass

    def verbose(self, message):
        pass

    def log_frame_loaded(self, source, row_count, column_count):
        self.events.append(("loaded", source, row_count, column_count))

    def log_column_inferred(self, name, kind, row_count):
        self.events.append(("inferred", name, kind, row_count))

    def log_candidate_rejected(self, name, kind, reason):
        self.events.append(("rejected", name, kind))

    def log_statistic_computed(self, name, metric, *, cached):
        self.events.append(("statistic", name, metric, cached))


@pytest.fixture
def frame():
    return DataFrame.from_columns(
        {
            "id": ["1", "2", "3", "4"],
            "score": ["1.5", "2.5", "3.5", "4.5"],
            "name": ["ann", "bob", "cy", "dee"],
        }
    )


@pytest.fixture
def count_statistics(monkeypatch):
    """Count how many times a statistics implementation is built."""
    calls = []
    original = dataframe_module.statistics_for

    def counting(variant, metric, **kwargs):
        calls.append((variant.name, metric))
        return original(variant, metric, **kwargs)

    monkeypatch.setattr(dataframe_module, "statistics_for", counting)
    return calls


class TestConstruction:
    """Tests for building frames from raw cells."""

    def test_infers_each_column(self, frame):
        """Each column gets the most specific kind its cells allow."""
        kinds = [column.kind for column in frame.columns]

        assert kinds == [ColumnKind.INTEGER, ColumnKind.FLOAT, ColumnKind.STRING]

    def test_one_float_cell_makes_float_column(self):
        frame = DataFrame.from_columns({"x": ["1", "2", "3.0"]})

        assert frame.get_column("x").kind is ColumnKind.FLOAT

    def test_one_text_cell_makes_string_column(self):
        frame = DataFrame.from_columns({"x": ["1", "2.5", "abc"]})

        assert frame.get_column("x").kind is ColumnKind.STRING

    def test_shape(self, frame):
        assert frame.row_count == 4
        assert len(frame) == 4
        assert frame.column_count == 3
        assert frame.header == ["id", "score", "name"]

    def test_header_is_a_copy(self, frame):
        frame.header.append("other")

        assert frame.header == ["id", "score", "name"]

    def test_contains_and_iter(self, frame):
        assert "score" in frame
        assert "missing" not in frame
        assert [column.name for column in frame] == ["id", "score", "name"]

    def test_empty_frame(self):
        frame = DataFrame([])

        assert frame.row_count == 0
        assert frame.column_count == 0
        assert frame.head(0) == "\n"

    def test_length_mismatch_rejected(self):
        columns = [
            ColumnVariant.integer(Column("a", [1, 2])),
            ColumnVariant.integer(Column("b", [1])),
        ]

        with pytest.raises(ColumnLengthMismatchError) as excinfo:
            DataFrame(columns)

        assert excinfo.value.name == "b"

    def test_pairs_keep_duplicate_names(self):
        frame = DataFrame.from_columns([("x", ["1", "2"]), ("x", ["a", "b"])])

        assert frame.header == ["x", "x"]
        assert frame.column_count == 2

    def test_forced_datetime_column(self):
        frame = DataFrame.from_columns(
            {"when": ["2024-01-02", "2024-02-03"]},
            {"when": ColumnConfig.as_datetime("%Y-%m-%d")},
        )

        assert frame.value_at("when", 1) == DataValue.datetime_(datetime(2024, 2, 3))

    def test_date_columns_from_config(self):
        config = TabstatConfig(date_columns={"when": None})

        frame = DataFrame.from_columns({"when": ["2024-01-02"]}, config=config)

        assert frame.get_column("when").kind is ColumnKind.DATETIME

    def test_forced_datetime_with_bad_cell(self):
        with pytest.raises(InvalidColumnTypeError, match="not-a-date"):
            DataFrame.from_columns(
                {"when": ["2024-01-02", "not-a-date"]},
                {"when": ColumnConfig.as_datetime()},
            )

    def test_logger_receives_inference_events(self):
        logger = RecordingLogger()

        DataFrame.from_columns({"s": ["a"]}, logger=logger)

        assert logger.events == [
            ("rejected", "s", "integer"),
            ("rejected", "s", "float"),
            ("inferred", "s", "string", 1),
        ]


class TestLookup:
    """Tests for column and cell access."""

    def test_value_at(self, frame):
        assert frame.value_at("id", 0) == DataValue.integer(1)
        assert frame.value_at("score", 3) == DataValue.float_(4.5)
        assert frame.value_at("name", 1) == DataValue.string("bob")

    def test_value_at_past_end(self, frame):
        with pytest.raises(OutOfRangeError):
            frame.value_at("id", 4)

    def test_missing_column(self, frame):
        with pytest.raises(MissingColumnError, match="Column `nope` not found"):
            frame.get_column("nope")

    def test_duplicate_name_resolves_to_first(self):
        frame = DataFrame.from_columns([("x", ["1", "2"]), ("x", ["a", "b"])])

        assert frame.get_column("x").kind is ColumnKind.INTEGER
        assert frame.value_at("x", 1) == DataValue.integer(2)
        assert frame.mean("x") == DataValue.float_(1.5)


class TestStatistics:
    """Tests for the statistics entry points and their caching."""

    def test_mean(self, frame):
        assert frame.mean("id") == DataValue.float_(2.5)
        assert frame.mean("score") == DataValue.float_(3.0)

    def test_median(self, frame):
        assert frame.median("id") == DataValue.float_(2.5)

    def test_stddev(self, frame):
        assert frame.stddev("score").value == pytest.approx(1.2909944)

    def test_quantile(self, frame):
        assert frame.quantile("id", 0.5) == DataValue.integer(2)
        assert frame.quantile("score", 0.5) == DataValue.float_(3.0)

    def test_string_column_has_no_statistics(self, frame):
        with pytest.raises(InvalidMetricTypeError):
            frame.mean("name")

    def test_mean_is_computed_once(self, frame, count_statistics):
        """A second call is answered from the cache."""
        first = frame.mean("score")
        second = frame.mean("score")

        assert first == second
        assert count_statistics == [("score", "mean")]

    def test_metrics_cached_independently(self, frame, count_statistics):
        frame.mean("id")
        frame.median("id")
        frame.median("id")
        frame.stddev("id")

        assert count_statistics == [("id", "mean"), ("id", "median"), ("id", "stddev")]

    def test_quantile_is_not_cached(self, frame, count_statistics):
        frame.quantile("score", 0.25)
        frame.quantile("score", 0.25)

        assert count_statistics == [("score", "quantile"), ("score", "quantile")]

    def test_failed_statistic_is_not_cached(self, frame, count_statistics):
        for _ in range(2):
            with pytest.raises(InvalidMetricTypeError):
                frame.mean("name")

        assert len(count_statistics) == 2

    def test_logger_reports_cache_hits(self):
        logger = RecordingLogger()
        frame = DataFrame.from_columns({"x": ["1", "2"]}, logger=logger)
        logger.events.clear()

        frame.mean("x")
        frame.mean("x")

        assert logger.events == [
            ("statistic", "x", "mean", False),
            ("statistic", "x", "mean", True),
        ]

    def test_stddev_ddof_from_config(self):
        config = TabstatConfig(stddev_ddof=0)

        frame = DataFrame.from_columns({"x": ["2", "4"]}, config=config)

        assert frame.stddev("x") == DataValue.float_(1.0)

    def test_from_columns_forwards_pivot_selector(self):
        calls = []

        def recording_pivot(values):
            calls.append(len(values))
            return 0

        frame = DataFrame.from_columns(
            {"x": ["9", "1", "5"]}, pivot_selector=recording_pivot
        )

        assert frame.median("x") == DataValue.integer(5)
        assert calls

    def test_from_csv_forwards_pivot_selector(self, tmp_path: Path):
        csv_file = tmp_path / "data.csv"
        csv_file.write_text("x\n3\n1\n2\n")
        calls = []

        def recording_pivot(values):
            calls.append(len(values))
            return 0

        frame = DataFrame.from_csv(csv_file, pivot_selector=recording_pivot)

        assert frame.median("x") == DataValue.integer(2)
        assert calls

    def test_pivot_selector(self):
        frame = DataFrame(
            [ColumnVariant.integer(Column("x", [9, 1, 5]))], pivot_selector=first_pivot
        )

        assert frame.median("x") == DataValue.integer(5)


class TestDisplay:
    """Tests for head and range rendering."""

    def test_head_pads_each_column(self, frame):
        assert frame.head(2) == (
            "id, score, name\n"
            "1 , 1.5  , ann \n"
            "2 , 2.5  , bob \n"
        )

    def test_head_defaults_to_head_rows(self):
        config = TabstatConfig(head_rows=1)
        frame = DataFrame.from_columns({"a": ["x", "y"]}, config=config)

        assert frame.head() == "a\nx\n"

    def test_head_zero_rows(self, frame):
        assert frame.head(0) == "id, score, name\n"

    def test_head_all_rows(self, frame):
        assert frame.head(4).count("\n") == 5

    def test_head_past_end(self, frame):
        with pytest.raises(OutOfRangeError):
            frame.head(5)

    def test_wide_cells_widen_column(self):
        frame = DataFrame.from_columns({"a": ["long value", "x"], "b": ["1", "2"]})

        assert frame.head(2) == "a         , b\nlong value, 1\nx         , 2\n"

    def test_render_rows_window(self, frame):
        assert frame.render_rows(2, 3) == "id, score, name\n3 , 3.5  , cy  \n"

    def test_display_range(self, frame):
        ranges = frame.display_range(1, 3)

        assert ranges == [(["2", "3"], 1), (["2.5", "3.5"], 3), (["bob", "cy"], 3)]

    def test_display_range_invalid(self, frame):
        with pytest.raises(InvalidRangeError):
            frame.display_range(3, 1)


class TestDescribe:
    """Tests for DataFrame.describe."""

    def test_numeric_and_text_columns(self, frame):
        summaries = frame.describe(quantiles=[0.5])

        id_summary, score_summary, name_summary = summaries
        assert id_summary.kind == "integer"
        assert id_summary.mean == DataValue.float_(2.5)
        assert id_summary.median == DataValue.float_(2.5)
        assert id_summary.quantiles == ((0.5, DataValue.integer(2)),)
        assert score_summary.quantiles == ((0.5, DataValue.float_(3.0)),)
        assert name_summary.count == 4
        assert not name_summary.has_statistics

    def test_default_quantiles(self, frame):
        summary = frame.describe()[0]

        assert [q for q, _ in summary.quantiles] == [0.25, 0.5, 0.75]

    def test_single_value_has_no_stddev(self):
        frame = DataFrame.from_columns({"x": ["3"]})

        summary = frame.describe()[0]

        assert summary.mean == DataValue.float_(3.0)
        assert summary.stddev is None

    def test_empty_numeric_column(self):
        frame = DataFrame.from_columns({"x": []})

        summary = frame.describe()[0]

        assert summary.count == 0
        assert not summary.has_statistics

    def test_describe_fills_cache(self, frame, count_statistics):
        frame.describe(quantiles=[])
        count_statistics.clear()

        frame.mean("id")

        assert count_statistics == []

    def test_shadowed_duplicate_uses_own_values(self):
        frame = DataFrame.from_columns([("x", ["1", "3"]), ("x", ["10", "30"])])

        first, second = frame.describe(quantiles=[])

        assert first.mean == DataValue.float_(2.0)
        assert second.mean == DataValue.float_(20.0)
        assert frame.mean("x") == DataValue.float_(2.0)


class TestFromCsv:
    """Tests for DataFrame.from_csv."""

    def test_reads_file(self, tmp_path: Path):
        csv_file = tmp_path / "data.csv"
        csv_file.write_text("a,b\n1,x\n2,y\n")

        frame = DataFrame.from_csv(csv_file)

        assert frame.header == ["a", "b"]
        assert frame.mean("a") == DataValue.float_(1.5)
        assert frame.get_column("b").kind is ColumnKind.STRING

    def test_separator_and_skip(self, tmp_path: Path):
        csv_file = tmp_path / "data.tsv"
        csv_file.write_text("# exported\na\tb\n1\t2.5\n")
        config = TabstatConfig(separator="\t", header_skip=1)

        frame = DataFrame.from_csv(csv_file, config)

        assert frame.value_at("b", 0) == DataValue.float_(2.5)

    def test_logs_frame_loaded(self, tmp_path: Path):
        csv_file = tmp_path / "data.csv"
        csv_file.write_text("a\n1\n")
        logger = RecordingLogger()

        DataFrame.from_csv(csv_file, logger=logger)

        assert logger.events[-1] == ("loaded", str(csv_file), 1, 1)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DataSourceNotFoundError):
            DataFrame.from_csv(tmp_path / "missing.csv")
