"""
Table output.

Prints courses as borderless, column-aligned text:

    Starts         Opens          City        Country     URL
    02 Jan 2026    01 Oct 2025    Dhamma      Germany     https://...
"""

from __future__ import annotations

from typing import Optional

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from retreat.dates import beautify
from retreat.model import Course

HEADERS = ("Starts", "Opens", "City", "Country", "URL")
COLUMN_GAP = 5
MIN_WIDTH = 80


def _rows(courses: list[Course]) -> list[tuple[str, ...]]:
    # beautify raises DateParseError before anything is printed
    return [
        (
            beautify(c.course_start_date),
            beautify(c.enrollment_open_date),
            c.location.city,
            c.location.country,
            c.location.website_url,
        )
        for c in courses
    ]


def _table_width(rows: list[tuple[str, ...]]) -> int:
    widths = [cell_len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, cell_len(cell)) for w, cell in zip(widths, row)]
    return sum(widths) + COLUMN_GAP * (len(widths) - 1)


def build_table(rows: list[tuple[str, ...]]) -> Table:
    table = Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        padding=(0, COLUMN_GAP, 0, 0),
        header_style="",
    )
    for header in HEADERS:
        table.add_column(header, no_wrap=True)
    for row in rows:
        # Text() so that brackets in names are not read as console markup
        table.add_row(*(Text(cell) for cell in row))
    return table


def print_courses(courses: list[Course], console: Optional[Console] = None) -> None:
    """
    Print the course table to stdout (or to `console`).

    The default console is made wide enough that no column gets cut.
    """
    rows = _rows(courses)
    if console is None:
        console = Console(highlight=False, width=max(_table_width(rows) + COLUMN_GAP, MIN_WIDTH))
    console.print(build_table(rows))
