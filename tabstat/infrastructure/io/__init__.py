from .csv_reader import CSVReader, CSVReadOptions, RawTable
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    TabstatInfrastructureError,
    UnexpectedEndOfInputError,
)

__all__ = [
    "CSVReadOptions",
    "CSVReader",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "RawTable",
    "TabstatInfrastructureError",
    "UnexpectedEndOfInputError",
]
