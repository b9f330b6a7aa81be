"""
Page fetcher.

Posts one search request and decodes the {"courses": [...], "pages": n}
envelope. Any failure is raised as TransportError or DecodeError; there is no
retry, because a missing page would silently corrupt the aggregated result.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from retreat.config import SearchConfig
from retreat.errors import DecodeError, TransportError
from retreat.model import Course, SearchResponse
from retreat.query import build_payload

logger = logging.getLogger(__name__)


def decode_envelope(data: Any) -> SearchResponse:
    """
    Validate a decoded JSON body and turn it into a SearchResponse.
    """
    if not isinstance(data, dict):
        raise DecodeError("response is not a JSON object")

    if "courses" not in data:
        raise DecodeError("response has no 'courses' field")
    raw_courses = data["courses"]
    if not isinstance(raw_courses, list):
        raise DecodeError("'courses' is not a list")

    if "pages" not in data:
        raise DecodeError("response has no 'pages' field")
    pages = data["pages"]
    # bool is an int subclass; true/false is not a page count
    if isinstance(pages, bool) or not isinstance(pages, int):
        raise DecodeError(f"'pages' is not an integer: {pages!r}")

    courses = tuple(Course.from_dict(c) for c in raw_courses)
    return SearchResponse(courses=courses, pages=pages)


def fetch_page(config: SearchConfig, page: int, session: requests.Session) -> SearchResponse:
    """
    Fetch and decode result page number `page`.
    """
    payload = build_payload(config, page)

    try:
        with session.post(config.endpoint, data=payload, timeout=config.timeout) as resp:
            resp.raise_for_status()
            try:
                data = resp.json()
            except ValueError as exc:
                raise DecodeError(f"page {page}: response is not valid JSON") from exc
    except requests.RequestException as exc:
        raise TransportError(f"page {page}: {exc}") from exc

    try:
        result = decode_envelope(data)
    except DecodeError as exc:
        raise DecodeError(f"page {page}: {exc}") from exc

    logger.debug("page %d: %d courses (server reports %d pages)", page, len(result.courses), result.pages)
    return result
