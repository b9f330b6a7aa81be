"""
Query builder.

Turns a SearchConfig and a page index into the form fields posted to the
search endpoint.
"""

from __future__ import annotations

from retreat.config import (
    DATE_FORMAT_FIELD,
    LANGUAGE,
    SORT_COLUMN,
    SORT_DIRECTION,
    SearchConfig,
)
from retreat.dates import format_date
from retreat.errors import UnsupportedParameter

FormData = list[tuple[str, str]]


def daterange(config: SearchConfig) -> str:
    """Window as the endpoint expects it: '2026-01-01 - 2027-01-01'."""
    return f"{format_date(config.date_from)} - {format_date(config.date_to)}"


def build_payload(config: SearchConfig, page: int) -> FormData:
    """
    Return the form fields for page number `page` (1-based).

    Every field appears exactly once.
    """
    if page < 1:
        raise UnsupportedParameter(f"page index must be >= 1, got {page}")

    return [
        ("current_state", config.student.value),
        ("regions[]", config.region),
        ("languages[]", LANGUAGE),
        ("course_types[]", config.course_type),
        ("sort_column", SORT_COLUMN),
        ("sort_direction", SORT_DIRECTION),
        ("date_format", DATE_FORMAT_FIELD),
        ("daterange", daterange(config)),
        ("page", str(page)),
    ]
