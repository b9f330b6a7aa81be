"""
Aggregation across result pages.

Page 1 is always fetched first; its page count bounds the loop. The remaining
pages are fetched one after another, in order.
"""

from __future__ import annotations

import logging
from typing import Callable

from retreat.model import Course, SearchResponse

logger = logging.getLogger(__name__)

PageFetch = Callable[[int], SearchResponse]


def collect_courses(fetch: PageFetch) -> list[Course]:
    """
    Fetch every page and concatenate the courses in page order.

    Page counts reported by pages after the first are ignored. A reported
    count of 0 behaves like 1: page 1's courses are still kept. Errors from
    `fetch` propagate unchanged.
    """
    first = fetch(1)
    courses: list[Course] = list(first.courses)

    total_pages = first.pages
    logger.debug("server reports %d page(s)", total_pages)

    for n in range(2, total_pages + 1):
        courses.extend(fetch(n).courses)

    logger.info("found %d course(s) on %d page(s)", len(courses), max(total_pages, 1))
    return courses
