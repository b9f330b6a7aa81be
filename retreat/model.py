"""
Central data model definitions.

Course and Location mirror one entry of the "courses" list returned by the
dhamma.org search endpoint. Dates are kept as the raw YYYY-MM-DD strings the
server sends; they are parsed on demand so that a malformed value surfaces as
a DateParseError where it is actually used.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from retreat.dates import parse_date
from retreat.errors import DecodeError


def _str_field(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Location:
    """
    Where a course takes place.
    """

    city: str
    country: str
    website_url: str

    @classmethod
    def from_dict(cls, raw: Any) -> "Location":
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise DecodeError("field 'location' must be an object")
        return cls(
            city=_str_field(raw, "city"),
            country=_str_field(raw, "country"),
            website_url=_str_field(raw, "website_url"),
        )


@dataclass(frozen=True)
class Course:
    """
    Represents one listed course as returned by the search endpoint.
    """

    id: int
    course_type: str
    location: Location
    course_start_date: str
    enrollment_open_date: str

    @classmethod
    def from_dict(cls, raw: Any) -> "Course":
        """
        Build a Course from one decoded JSON object.

        Raises DecodeError if the entry is not shaped like a course.
        """
        if not isinstance(raw, dict):
            raise DecodeError(f"course entry must be an object, got {type(raw).__name__}")

        course_id = raw.get("id", 0)
        if isinstance(course_id, bool) or not isinstance(course_id, int):
            raise DecodeError(f"field 'id' must be an integer, got {course_id!r}")

        return cls(
            id=course_id,
            course_type=_str_field(raw, "course_type"),
            location=Location.from_dict(raw.get("location")),
            course_start_date=_str_field(raw, "course_start_date"),
            enrollment_open_date=_str_field(raw, "enrollment_open_date"),
        )

    def starts_on(self) -> date:
        return parse_date(self.course_start_date)

    def opens_on(self) -> date:
        return parse_date(self.enrollment_open_date)


@dataclass(frozen=True)
class SearchResponse:
    """
    One decoded result page.

    pages is the total page count for the whole query, not for this page.
    """

    courses: tuple[Course, ...]
    pages: int
