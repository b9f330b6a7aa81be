"""
Error types.

Every failure in the search pipeline is fatal for the run. The core modules
raise one of the errors below; only the CLI decides to stop the process.
"""

from __future__ import annotations


class RetreatError(Exception):
    """Base class for all errors raised by retreat."""


class UnsupportedParameter(RetreatError):
    """A region, duration or date window that the search endpoint does not support."""


class TransportError(RetreatError):
    """The request for a page could not be completed."""


class DecodeError(RetreatError):
    """The response body is not the JSON envelope we expect."""


class DateParseError(RetreatError):
    """A date string is not in YYYY-MM-DD format."""
