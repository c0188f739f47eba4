from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars
from .domain.entities.column_config import ColumnConfig


@dataclass(frozen=True, slots=True)
class TabstatConfig:
    separator: str = Defaults.SEPARATOR
    header_skip: int = Defaults.HEADER_SKIP
    encoding: str = Defaults.ENCODING
    head_rows: int = Defaults.HEAD_ROWS
    stddev_ddof: int = Defaults.STDDEV_DDOF
    describe_quantiles: tuple[float, ...] = Defaults.DESCRIBE_QUANTILES
    date_columns: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )
        if self.header_skip < 0:
            raise ValueError(
                f"header_skip must be non-negative, got {self.header_skip}"
            )
        if self.head_rows < 1:
            raise ValueError(f"head_rows must be positive, got {self.head_rows}")
        if self.stddev_ddof not in (0, 1):
            raise ValueError(f"stddev_ddof must be 0 or 1, got {self.stddev_ddof}")
        for q in self.describe_quantiles:
            if not 0.0 <= q < 1.0:
                raise ValueError(f"quantiles must be in the range [0, 1), got {q}")

    def column_configs(self) -> dict[str, ColumnConfig]:
        return {
            name: ColumnConfig.as_datetime(date_format)
            for name, date_format in self.date_columns.items()
        }

    @classmethod
    def from_env(cls) -> TabstatConfig:
        return cls(
            separator=os.getenv(EnvVars.SEPARATOR, Defaults.SEPARATOR),
            header_skip=int(os.getenv(EnvVars.HEADER_SKIP, str(Defaults.HEADER_SKIP))),
            head_rows=int(os.getenv(EnvVars.HEAD_ROWS, str(Defaults.HEAD_ROWS))),
            stddev_ddof=int(
                os.getenv(EnvVars.STDDEV_DDOF, str(Defaults.STDDEV_DDOF))
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TabstatConfig:
        config = TabstatConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TabstatConfig
    ) -> TabstatConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        reader = _get_table(data, "reader")
        statistics = _get_table(data, "statistics")
        display = _get_table(data, "display")
        dates = _get_table(data, "dates")
        separator = base_config.separator
        if (value := reader.get("separator")) is not None:
            separator = str(value)
        header_skip = base_config.header_skip
        if (value := reader.get("header_skip")) is not None:
            header_skip = _coerce_int(value, key="reader.header_skip")
        encoding = base_config.encoding
        if value := reader.get("encoding"):
            encoding = str(value)
        stddev_ddof = base_config.stddev_ddof
        if (value := statistics.get("stddev_ddof")) is not None:
            stddev_ddof = _coerce_int(value, key="statistics.stddev_ddof")
        quantiles = base_config.describe_quantiles
        if (value := statistics.get("quantiles")) is not None:
            quantiles = _coerce_quantiles(value, key="statistics.quantiles")
        head_rows = base_config.head_rows
        if (value := display.get("head_rows")) is not None:
            head_rows = _coerce_int(value, key="display.head_rows")
        date_columns = dict(base_config.date_columns)
        for name, fmt in dates.items():
            cleaned = str(fmt).strip() if fmt is not None else ""
            date_columns[name] = cleaned or None
        return TabstatConfig(
            separator=separator,
            header_skip=header_skip,
            encoding=encoding,
            head_rows=head_rows,
            stddev_ddof=stddev_ddof,
            describe_quantiles=quantiles,
            date_columns=date_columns,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_quantiles(value: object, *, key: str) -> tuple[float, ...]:
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list, got {type(value).__name__}")
    items = cast("list[object]", value)
    return tuple(_coerce_float(item, key=key) for item in items)
