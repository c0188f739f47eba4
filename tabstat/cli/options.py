"""Shared option handling for the frame-loading commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import click

from ..config import ConfigLoader, TabstatConfig


@dataclass(slots=True)
class CliState:
    verbose: int = 0
    config_file: Path | None = None


def frame_options[F: Callable[..., Any]](func: F) -> F:
    func = click.option(
        "--date",
        "date_columns",
        multiple=True,
        metavar="COLUMN[=FORMAT]",
        help="Parse COLUMN as datetime, with an optional strptime FORMAT (repeatable)",
    )(func)
    func = click.option(
        "--skip",
        "header_skip",
        type=click.IntRange(min=0),
        default=None,
        help="Lines to skip before the header line",
    )(func)
    func = click.option(
        "--sep",
        "separator",
        default=None,
        help="Field separator (default: ,)",
    )(func)
    return click.argument(
        "csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
    )(func)


def parse_date_columns(entries: tuple[str, ...]) -> dict[str, str | None]:
    date_columns: dict[str, str | None] = {}
    for entry in entries:
        name, _, date_format = entry.partition("=")
        if not name:
            raise click.BadParameter(f"missing column name in {entry!r}", param_hint="--date")
        date_columns[name] = date_format or None
    return date_columns


def resolve_config(
    state: CliState,
    *,
    separator: str | None,
    header_skip: int | None,
    date_columns: tuple[str, ...],
) -> TabstatConfig:
    base = ConfigLoader.load(state.config_file)
    overrides: dict[str, Any] = {}
    if separator is not None:
        overrides["separator"] = "\t" if separator == "\\t" else separator
    if header_skip is not None:
        overrides["header_skip"] = header_skip
    if date_columns:
        overrides["date_columns"] = {
            **base.date_columns,
            **parse_date_columns(date_columns),
        }
    try:
        return replace(base, **overrides)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
