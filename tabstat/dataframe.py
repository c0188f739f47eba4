"""In-memory columnar frame with type inference and cached statistics."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from .application.models import ColumnSummary
from .config import TabstatConfig
from .constants import Defaults
from .domain.exceptions import (
    ColumnLengthMismatchError,
    InsufficientDataError,
    MissingColumnError,
    OutOfRangeError,
)
from .domain.services.selection import random_pivot
from .domain.services.statistics import statistics_for
from .domain.services.type_inference import TypeInferenceEngine
from .infrastructure.caching.statistics_cache import Metric, StatisticsCache
from .infrastructure.io.csv_reader import CSVReader, CSVReadOptions

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from .application.ports.services import LoggerPort
    from .domain.entities.column import ColumnVariant
    from .domain.entities.column_config import ColumnConfig
    from .domain.entities.data_value import DataValue
    from .domain.services.selection import PivotSelector
    from .domain.services.statistics import Statistics

type RawColumns = Mapping[str, Sequence[str]] | Iterable[tuple[str, Sequence[str]]]


class DataFrame:
    """Ordered typed columns sharing one row count.

    Columns are inferred once at construction and never change afterwards.
    ``mean``, ``median`` and ``stddev`` are memoized per column name;
    ``quantile`` is recomputed on every call. Column names may repeat, and
    every name-based lookup resolves to the first column with that name.
    """

    def __init__(
        self,
        columns: Iterable[ColumnVariant],
        *,
        logger: LoggerPort | None = None,
        stddev_ddof: int = Defaults.STDDEV_DDOF,
        head_rows: int = Defaults.HEAD_ROWS,
        pivot_selector: PivotSelector = random_pivot,
    ) -> None:
        super().__init__()
        self._columns: tuple[ColumnVariant, ...] = tuple(columns)
        self._row_count = self._columns[0].count if self._columns else 0
        for column in self._columns:
            if column.count != self._row_count:
                raise ColumnLengthMismatchError(
                    column.name, self._row_count, column.count
                )
        self._header = [column.name for column in self._columns]
        self._cache = StatisticsCache()
        self._logger = logger
        self._stddev_ddof = stddev_ddof
        self._head_rows = head_rows
        self._pivot_selector = pivot_selector

    @classmethod
    def from_columns(
        cls,
        columns: RawColumns,
        per_column_config: Mapping[str, ColumnConfig] | None = None,
        *,
        config: TabstatConfig | None = None,
        engine: TypeInferenceEngine | None = None,
        logger: LoggerPort | None = None,
        pivot_selector: PivotSelector = random_pivot,
    ) -> DataFrame:
        """Infer a typed frame from raw text columns.

        Args:
            columns: Column name to raw cells, as a mapping or as ordered
                ``(name, cells)`` pairs (pairs keep duplicate names)
            per_column_config: Per-column parsing options; defaults to the
                date columns declared in ``config``
            config: Frame options
            engine: Type inference engine
            logger: Optional logger
            pivot_selector: Pivot strategy for median selection

        Raises:
            InvalidColumnTypeError: If a forced datetime column fails to parse
            ColumnLengthMismatchError: If the columns differ in length
        """
        if config is None:
            config = TabstatConfig()
        if engine is None:
            engine = TypeInferenceEngine(logger=logger)
        if per_column_config is None:
            per_column_config = config.column_configs()
        pairs = columns.items() if isinstance(columns, Mapping) else columns
        variants = [
            engine.infer(cells, name, per_column_config.get(name))
            for name, cells in pairs
        ]
        return cls(
            variants,
            logger=logger,
            stddev_ddof=config.stddev_ddof,
            head_rows=config.head_rows,
            pivot_selector=pivot_selector,
        )

    @classmethod
    def from_csv(
        cls,
        path: Path | str,
        config: TabstatConfig | None = None,
        *,
        reader: CSVReader | None = None,
        engine: TypeInferenceEngine | None = None,
        logger: LoggerPort | None = None,
        pivot_selector: PivotSelector = random_pivot,
    ) -> DataFrame:
        """Read a delimited file and infer a typed frame from it.

        Raises:
            DataSourceNotFoundError: If the file does not exist
            UnexpectedEndOfInputError: If the file has no header line
            DataParseError: If a line has a different number of fields
        """
        if config is None:
            config = TabstatConfig()
        if reader is None:
            reader = CSVReader()
        options = CSVReadOptions(
            separator=config.separator,
            header_skip=config.header_skip,
            encoding=config.encoding,
        )
        raw = reader.read(Path(path), options)
        frame = cls.from_columns(
            raw.items(),
            config=config,
            engine=engine,
            logger=logger,
            pivot_selector=pivot_selector,
        )
        if logger:
            logger.log_frame_loaded(str(path), frame.row_count, frame.column_count)
        return frame

    @property
    def columns(self) -> tuple[ColumnVariant, ...]:
        return self._columns

    @property
    def header(self) -> list[str]:
        return list(self._header)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return self._row_count

    def __len__(self) -> int:
        return self._row_count

    def __iter__(self) -> Iterator[ColumnVariant]:
        return iter(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._header

    def __repr__(self) -> str:
        return f"DataFrame(rows={self._row_count}, columns={self._header!r})"

    def get_column(self, name: str) -> ColumnVariant:
        for column in self._columns:
            if column.name == name:
                return column
        raise MissingColumnError(name)

    def value_at(self, name: str, row: int) -> DataValue:
        return self.get_column(name).value_at(row)

    def mean(self, name: str) -> DataValue:
        return self._cached_metric(self.get_column(name), Metric.MEAN)

    def median(self, name: str) -> DataValue:
        return self._cached_metric(self.get_column(name), Metric.MEDIAN)

    def stddev(self, name: str) -> DataValue:
        return self._cached_metric(self.get_column(name), Metric.STDDEV)

    def quantile(self, name: str, q: float) -> DataValue:
        column = self.get_column(name)
        return self._statistics(column, "quantile").quantile(q)

    def display_range(self, begin: int, end: int) -> list[tuple[list[str], int]]:
        """Rendered cells and widest cell width for every column."""
        return [column.range_as_display(begin, end) for column in self._columns]

    def head(self, n: int | None = None) -> str:
        """Render the header and the first ``n`` rows as aligned text.

        Raises:
            OutOfRangeError: If ``n`` exceeds the row count
        """
        if n is None:
            n = self._head_rows
        if n > self._row_count:
            raise OutOfRangeError(n, self._row_count)
        return self.render_rows(0, n)

    def render_rows(self, begin: int, end: int) -> str:
        ranges = self.display_range(begin, end)
        widths = [
            max(width, len(name))
            for (_, width), name in zip(ranges, self._header, strict=True)
        ]
        separator = Defaults.DISPLAY_SEPARATOR
        lines = [
            separator.join(
                f"{name:<{width}}"
                for name, width in zip(self._header, widths, strict=True)
            )
        ]
        for row in range(end - begin):
            lines.append(
                separator.join(
                    f"{cells[row]:<{width}}"
                    for (cells, _), width in zip(ranges, widths, strict=True)
                )
            )
        return "\n".join(lines) + "\n"

    def describe(self, quantiles: Sequence[float] | None = None) -> list[ColumnSummary]:
        if quantiles is None:
            quantiles = Defaults.DESCRIBE_QUANTILES
        summaries = []
        for column in self._columns:
            if not column.kind.is_numeric or column.count == 0:
                summaries.append(
                    ColumnSummary(column.name, column.kind.value, column.count)
                )
                continue
            stats = self._statistics(column, "describe")
            try:
                stddev = self._summary_metric(column, Metric.STDDEV)
            except InsufficientDataError:
                stddev = None
            summaries.append(
                ColumnSummary(
                    name=column.name,
                    kind=column.kind.value,
                    count=column.count,
                    mean=self._summary_metric(column, Metric.MEAN),
                    median=self._summary_metric(column, Metric.MEDIAN),
                    stddev=stddev,
                    quantiles=tuple((q, stats.quantile(q)) for q in quantiles),
                )
            )
        return summaries

    def _statistics(self, column: ColumnVariant, metric: str) -> Statistics:
        return statistics_for(
            column,
            metric,
            ddof=self._stddev_ddof,
            pivot_selector=self._pivot_selector,
        )

    def _summary_metric(self, column: ColumnVariant, metric: Metric) -> DataValue:
        # Shadowed duplicates must not read or fill the first column's entry.
        if self.get_column(column.name) is column:
            return self._cached_metric(column, metric)
        return self._compute(column, metric)

    def _cached_metric(self, column: ColumnVariant, metric: Metric) -> DataValue:
        cached = self._cache.has(column.name, metric)
        value = self._cache.get_or_compute(
            column.name, metric, lambda: self._compute(column, metric)
        )
        if self._logger:
            self._logger.log_statistic_computed(
                column.name, metric.value, cached=cached
            )
        return value

    def _compute(self, column: ColumnVariant, metric: Metric) -> DataValue:
        stats = self._statistics(column, metric.value)
        match metric:
            case Metric.MEAN:
                return stats.mean()
            case Metric.MEDIAN:
                return stats.median()
            case Metric.STDDEV:
                return stats.stddev()
        raise ValueError(f"Unsupported metric: {metric}")
