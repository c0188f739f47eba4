from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

from ...constants import Defaults
from .exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    UnexpectedEndOfInputError,
)

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class CSVReadOptions:
    separator: str = Defaults.SEPARATOR
    header_skip: int = Defaults.HEADER_SKIP
    encoding: str = Defaults.ENCODING
    normalize_headers: bool = True


@dataclass(frozen=True, slots=True)
class RawTable:
    """Header names and raw text cells, one list per column.

    Duplicate header names are kept in their original positions.
    """

    header: list[str]
    columns: list[list[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    @property
    def column_count(self) -> int:
        return len(self.header)

    def items(self) -> list[tuple[str, list[str]]]:
        return list(zip(self.header, self.columns, strict=True))


class CSVReader:
    pass

    def read(self, path: Path, options: CSVReadOptions | None = None) -> RawTable:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            df = pd.read_csv(
                path,
                sep=options.separator,
                header=None,
                dtype=str,
                keep_default_na=False,
                skiprows=options.header_skip,
                encoding=options.encoding,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.EmptyDataError as e:
            raise UnexpectedEndOfInputError(f"Csv unexpectedly ended: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        if df.empty:
            raise UnexpectedEndOfInputError(f"Csv unexpectedly ended: {path}")
        header = self._build_header(df.iloc[0].tolist(), options)
        body = df.iloc[1:]
        self._check_complete_rows(body, path, options)
        columns = [body.iloc[:, i].tolist() for i in range(body.shape[1])]
        return RawTable(header=header, columns=columns)

    def _build_header(self, cells: list[object], options: CSVReadOptions) -> list[str]:
        header: list[str] = []
        for i, cell in enumerate(cells):
            name = "" if pd.isna(cell) else str(cell)
            if options.normalize_headers:
                name = name.strip()
            header.append(name or f"Unnamed: {i}")
        return header

    def _check_complete_rows(
        self, body: pd.DataFrame, path: Path, options: CSVReadOptions
    ) -> None:
        # Only fields missing from a short line are NA; empty cells stay "".
        incomplete = body.isna().any(axis=1)
        if incomplete.any():
            position = int(incomplete.to_numpy().argmax())
            line = options.header_skip + position + 2
            raise DataParseError(
                f"Line {line} of {path} has fewer fields than the header"
            )
