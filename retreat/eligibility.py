"""
Eligibility filter.

A course is eligible when its enrollment opens strictly after the reference
date, i.e. registration is not possible yet on that day.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from retreat.model import Course

CourseFilter = Callable[[list[Course]], list[Course]]


def not_yet_open(courses: list[Course], reference: date) -> list[Course]:
    """
    Return the courses whose enrollment-open date is after `reference`.

    Every date is parsed before anything is returned: one malformed date
    raises DateParseError and no partial list comes back.
    """
    opens = [c.opens_on() for c in courses]
    return [c for c, opened in zip(courses, opens) if opened > reference]


def all_courses(courses: list[Course]) -> list[Course]:
    return courses


def select_filter(enabled: bool, reference: date) -> CourseFilter:
    if not enabled:
        return all_courses
    return lambda courses: not_yet_open(courses, reference)
