"""
Date helpers.

The search endpoint speaks YYYY-MM-DD in both directions; the table shows
dates as "02 Jan 2006".
"""

from __future__ import annotations

import re
from datetime import date, datetime

from retreat.errors import DateParseError

DATE_FORMAT = "%Y-%m-%d"
DISPLAY_FORMAT = "%d %b %Y"
# strptime alone accepts "2026-3-5"
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(text: str) -> date:
    """
    Parse a YYYY-MM-DD string.

    Raises DateParseError for anything else (including an empty string).
    """
    if not isinstance(text, str) or not _DATE_SHAPE.fullmatch(text):
        raise DateParseError(f"invalid date {text!r}, expected YYYY-MM-DD")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(f"invalid date {text!r}, expected YYYY-MM-DD") from exc


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def add_one_year(d: date) -> date:
    """
    Same day one calendar year later.

    29 February has no counterpart in a common year and rolls over to 1 March.
    """
    try:
        return d.replace(year=d.year + 1)
    except ValueError:
        return date(d.year + 1, 3, 1)


def beautify(yyyy_mm_dd: str) -> str:
    """Convert '2026-01-02' to '02 Jan 2026'."""
    return parse_date(yyyy_mm_dd).strftime(DISPLAY_FORMAT)
