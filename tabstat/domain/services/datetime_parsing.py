from datetime import datetime

from ...constants import DateLayouts


def guess_datetime(text: str) -> datetime | None:
    candidate = text.strip()
    if not candidate:
        return None
    for layout in DateLayouts.GUESS:
        try:
            return datetime.strptime(candidate, layout)
        except ValueError:
            continue
    return None


def parse_datetime(text: str, date_format: str | None = None) -> datetime | None:
    """Parse one cell as a datetime.

    With ``date_format`` the cell must match that layout exactly; without it
    the fixed guess layouts are tried in order. Returns ``None`` when the
    cell cannot be parsed.
    """
    if date_format is None:
        return guess_datetime(text)
    try:
        return datetime.strptime(text, date_format)
    except ValueError:
        return None
