"""
Search configuration.

The lookup tables below are the only values the search endpoint understands.
build_config() validates user input against them once, at startup, and returns
an immutable SearchConfig that every page request is built from. This keeps
the date window identical across all pages of one run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from retreat.dates import add_one_year
from retreat.errors import UnsupportedParameter


# ---------------------------------------------------------------------------
# Endpoint & fixed request values
# ---------------------------------------------------------------------------

ENDPOINT = "https://www.dhamma.org/en-US/courses/do_search"
REQUEST_TIMEOUT = 30.0  # seconds

LANGUAGE = "en"
SORT_COLUMN = "dates"
SORT_DIRECTION = "up"
DATE_FORMAT_FIELD = "YYYY-MM-DD"


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------


class StudentCategory(Enum):
    OLD = "OldStudent"
    NEW = "NewStudent"

    @property
    def cli_name(self) -> str:
        return self.name.lower()


DEFAULT_REGION = "Europe"
REGIONS: dict[str, str] = {
    "Europe": "region_117",
}
_REGION_TOKEN = re.compile(r"^region_\d+$")

DEFAULT_DAYS = 10
# course length in days -> dhamma.org course type code
COURSE_TYPES: dict[int, str] = {
    1: "5",
    2: "19",
    3: "9",
    10: "3",
    20: "4",
    30: "11",
    45: "12",
    60: "23",
}


def supported_days() -> list[int]:
    return sorted(COURSE_TYPES)


def region_token(region: str) -> str:
    """
    Map a friendly region name (case-insensitive) to its token.

    A raw token such as 'region_117' is passed through unchanged.
    """
    name = region.strip()
    for known, token in REGIONS.items():
        if known.lower() == name.lower():
            return token
    if _REGION_TOKEN.match(name):
        return name
    known_names = ", ".join(sorted(REGIONS))
    raise UnsupportedParameter(f"region {region!r} not found (known: {known_names}, or region_<n>)")


def course_type_code(days: int) -> str:
    try:
        return COURSE_TYPES[days]
    except KeyError:
        lengths = ", ".join(str(d) for d in supported_days()[:-1])
        raise UnsupportedParameter(
            f"can only search for courses of length {lengths} and {supported_days()[-1]} days"
        ) from None


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchConfig:
    """
    Everything one run needs to build its page requests.

    date_from is both the start of the search window and the reference date
    for the eligibility filter.
    """

    student: StudentCategory
    region: str
    course_type: str
    date_from: date
    date_to: date
    endpoint: str = ENDPOINT
    timeout: float = REQUEST_TIMEOUT

    @property
    def reference_date(self) -> date:
        return self.date_from


def build_config(
    *,
    today: date,
    student: StudentCategory = StudentCategory.OLD,
    region: str = DEFAULT_REGION,
    days: int = DEFAULT_DAYS,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    endpoint: str = ENDPOINT,
    timeout: float = REQUEST_TIMEOUT,
) -> SearchConfig:
    """
    Validate user-level parameters and resolve the date window.

    today is the process-start date; it is only used when date_from is not
    given. date_to defaults to date_from plus one year. timeout must be
    positive.
    """
    token = region_token(region)
    code = course_type_code(days)

    start = date_from if date_from is not None else today
    end = date_to if date_to is not None else add_one_year(start)
    if end <= start:
        raise UnsupportedParameter(f"end date {end.isoformat()} must be after start date {start.isoformat()}")
    if not timeout > 0:
        raise UnsupportedParameter(f"timeout must be a positive number of seconds, got {timeout}")

    return SearchConfig(
        student=student,
        region=token,
        course_type=code,
        date_from=start,
        date_to=end,
        endpoint=endpoint,
        timeout=timeout,
    )
