from typing import ClassVar


class Defaults:
    SEPARATOR = ","
    HEADER_SKIP = 0
    ENCODING = "utf-8"
    HEAD_ROWS = 5
    STDDEV_DDOF = 1
    DESCRIBE_QUANTILES = (0.25, 0.5, 0.75)
    CONFIG_FILE = "tabstat.toml"
    DISPLAY_SEPARATOR = ", "


class Limits:
    INT64_MIN = -(2**63)
    INT64_MAX = 2**63 - 1


class Patterns:
    INTEGER = "^[+-]?[0-9]+$"


class DateLayouts:
    # Tried in order by the datetime guesser; first match wins.
    GUESS: ClassVar[tuple[str, ...]] = (
        "%Y-%m-%d",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M:%S.%f",
        "%Y-%m-%dT%H:%M",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d %H:%M:%S.%f",
        "%Y-%m-%d %H:%M",
        "%Y/%m/%d",
        "%Y/%m/%d %H:%M:%S",
        "%d/%m/%Y",
        "%m/%d/%Y",
        "%d-%m-%Y",
        "%d.%m.%Y",
        "%Y%m%d",
        "%b %d, %Y",
        "%d %b %Y",
    )


class EnvVars:
    SEPARATOR = "TABSTAT_SEPARATOR"
    HEADER_SKIP = "TABSTAT_HEADER_SKIP"
    HEAD_ROWS = "TABSTAT_HEAD_ROWS"
    STDDEV_DDOF = "TABSTAT_STDDEV_DDOF"
