"""
CLI (Command Line Interface).

    retreat [--student old|new] [--region Europe] [--days 10]
            [--from YYYY-MM-DD] [--to YYYY-MM-DD] [--all]

Searches dhamma.org for courses and prints the ones whose enrollment has not
opened yet as of --from (default: today). With --all, every course found in
the window is printed.

This is the only place that turns errors into an exit status: any RetreatError
prints a one-line diagnostic to stderr and exits with 1, without printing a
table.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from functools import partial
from typing import Optional

import requests
from rich.console import Console

from retreat.aggregate import collect_courses
from retreat.config import (
    DEFAULT_DAYS,
    DEFAULT_REGION,
    REQUEST_TIMEOUT,
    StudentCategory,
    build_config,
    supported_days,
)
from retreat.dates import parse_date
from retreat.eligibility import select_filter
from retreat.errors import DateParseError, RetreatError
from retreat.fetch import fetch_page
from retreat.present import print_courses

logger = logging.getLogger("retreat")


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("retreat: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def _date_arg(text: str) -> date:
    try:
        return parse_date(text)
    except DateParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(
        prog="retreat",
        description="List dhamma.org meditation courses whose enrollment has not opened yet",
    )
    parser.add_argument(
        "--student",
        choices=[s.cli_name for s in StudentCategory],
        default=StudentCategory.OLD.cli_name,
        help="Student category (default: old)",
    )
    parser.add_argument("--region", type=str, default=DEFAULT_REGION, help=f"Region (default: {DEFAULT_REGION})")
    parser.add_argument(
        "--days",
        type=int,
        default=DEFAULT_DAYS,
        help="Course length in days, one of " + ", ".join(str(d) for d in supported_days()),
    )
    parser.add_argument(
        "--from",
        dest="date_from",
        type=_date_arg,
        default=None,
        help="Start date YYYY-MM-DD, also the date enrollment must not have opened by (default: today)",
    )
    parser.add_argument(
        "--to", dest="date_to", type=_date_arg, default=None, help="End date YYYY-MM-DD (default: start + 1 year)"
    )
    parser.add_argument("--all", action="store_true", help="If set, results are unfiltered")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every page request")
    return parser


def run(args: argparse.Namespace, today: date, console: Optional[Console] = None) -> int:
    """
    Build the config, fetch all pages, filter and print.

    Raises RetreatError on any failure; nothing is printed in that case.
    """
    config = build_config(
        today=today,
        student=StudentCategory[args.student.upper()],
        region=args.region,
        days=args.days,
        date_from=args.date_from,
        date_to=args.date_to,
        timeout=args.timeout,
    )
    logger.debug(
        "searching %s, course type %s, %s to %s",
        config.region,
        config.course_type,
        config.date_from.isoformat(),
        config.date_to.isoformat(),
    )

    with requests.Session() as session:
        courses = collect_courses(partial(fetch_page, config, session=session))

    keep = select_filter(not args.all, config.reference_date)
    shown = keep(courses)
    logger.debug("%d of %d course(s) pass the filter", len(shown), len(courses))

    print_courses(shown, console)
    return 0


def main(argv: list[str] | None = None, console: Optional[Console] = None) -> None:
    """
    CLI entry point. Parses args, runs the search and exits via SystemExit
    with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # computed once so every page request uses the same window
    today = date.today()

    try:
        code = run(args, today, console)
    except RetreatError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    raise SystemExit(code)
