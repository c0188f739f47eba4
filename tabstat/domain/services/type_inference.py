"""Type inference for raw text columns.

Each column is parsed against a fixed, ordered list of candidate types. The
first candidate that accepts every cell wins:

    Integer -> Float -> String

Integers are preferred over floats so exact values are never silently
widened, and String accepts anything, so the cascade always terminates.
A column configured as datetime skips the cascade and must parse entirely
as datetimes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Any

from ...constants import Limits, Patterns
from ..entities.column import Column, ColumnKind, ColumnVariant
from ..exceptions import InvalidColumnTypeError
from .datetime_parsing import parse_datetime

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...application.ports.services import LoggerPort
    from ..entities.column_config import ColumnConfig

_INTEGER_RE = re.compile(Patterns.INTEGER)


class CellParseError(ValueError):
    def __init__(self, cell: str, kind: ColumnKind, detail: str = "") -> None:
        message = (
            f"Error parsing value `{cell}` as {kind.value}. "
            "String couldn't be converted safely."
        )
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.cell = cell
        self.kind = kind


def parse_integer(cell: str) -> int:
    if not _INTEGER_RE.fullmatch(cell):
        raise CellParseError(cell, ColumnKind.INTEGER)
    value = int(cell)
    if not Limits.INT64_MIN <= value <= Limits.INT64_MAX:
        raise CellParseError(cell, ColumnKind.INTEGER, "Value overflows 64 bits.")
    return value


def parse_float(cell: str) -> float:
    # float() tolerates padding, digit separators and non-ASCII digits;
    # cells must not carry them.
    if not cell or not cell.isascii() or cell != cell.strip() or "_" in cell:
        raise CellParseError(cell, ColumnKind.FLOAT)
    try:
        return float(cell)
    except ValueError as e:
        raise CellParseError(cell, ColumnKind.FLOAT) from e


def parse_string(cell: str) -> str:
    return cell


@dataclass(frozen=True, slots=True)
class TypeCandidate:
    kind: ColumnKind
    parse: Callable[[str], Any]


DEFAULT_CANDIDATES: tuple[TypeCandidate, ...] = (
    TypeCandidate(ColumnKind.INTEGER, parse_integer),
    TypeCandidate(ColumnKind.FLOAT, parse_float),
    TypeCandidate(ColumnKind.STRING, parse_string),
)


class TypeInferenceEngine:
    """Turns one raw text column into one typed ``ColumnVariant``."""

    def __init__(
        self,
        logger: LoggerPort | None = None,
        candidates: Sequence[TypeCandidate] = DEFAULT_CANDIDATES,
    ) -> None:
        """Initialize the engine.

        Args:
            logger: Optional logger for rejected candidates. If None, logging
                is silently skipped.
            candidates: Candidate types in priority order.
        """
        super().__init__()
        self._logger = logger
        self._candidates = tuple(candidates)

    def infer(
        self,
        cells: Sequence[str],
        name: str,
        config: ColumnConfig | None = None,
    ) -> ColumnVariant:
        """Build the most specific column the cells allow.

        Args:
            cells: Raw text cells in row order
            name: Column name
            config: Optional per-column configuration

        Returns:
            The typed column

        Raises:
            InvalidColumnTypeError: If a forced datetime column has an
                unparsable cell, or no candidate accepts the cells
        """
        if config is not None and config.forced_as_datetime:
            variant = self._infer_datetime(cells, name, config.date_format)
            self._log_inferred(variant)
            return variant

        for candidate in self._candidates:
            try:
                values = [candidate.parse(cell) for cell in cells]
            except ValueError as e:
                if self._logger:
                    self._logger.log_candidate_rejected(
                        name, candidate.kind.value, str(e)
                    )
                continue
            variant = ColumnVariant(candidate.kind, Column(name, values))
            self._log_inferred(variant)
            return variant

        raise InvalidColumnTypeError(name)

    def _infer_datetime(
        self, cells: Sequence[str], name: str, date_format: str | None
    ) -> ColumnVariant:
        values = []
        for cell in cells:
            parsed = parse_datetime(cell, date_format)
            if parsed is None:
                layout = f"format `{date_format}`" if date_format else "any known layout"
                raise InvalidColumnTypeError(
                    name,
                    f"Error parsing value `{cell}` as datetime with {layout}.",
                )
            values.append(parsed)
        return ColumnVariant.datetime_(Column(name, values))

    def _log_inferred(self, variant: ColumnVariant) -> None:
        if self._logger:
            self._logger.log_column_inferred(
                variant.name, variant.kind.value, variant.count
            )
