"""
End-to-end tests for the CLI against a stubbed search endpoint.

These tests focus on:
- only courses not yet open as of --from are printed
- every page reported by page 1 is fetched, in order
- any failure exits nonzero, logs one line and prints no table
"""

import io
import unittest
from contextlib import redirect_stderr
from unittest import mock
from urllib.parse import parse_qs

import requests
import responses
from rich.console import Console

from retreat.cli import main
from retreat.config import ENDPOINT


def course(course_id: int, city: str, opens: str, starts: str = "2026-09-01") -> dict:
    return {
        "id": course_id,
        "course_type": "3",
        "location": {"city": city, "country": "Germany", "website_url": f"https://{city.lower()}.example"},
        "course_start_date": starts,
        "enrollment_open_date": opens,
    }


def page(pages: int, *courses: dict) -> dict:
    return {"pages": pages, "courses": list(courses)}


def requested_pages() -> list[str]:
    return [parse_qs(call.request.body)["page"][0] for call in responses.calls]


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.console = Console(file=self.out, width=200, highlight=False, color_system=None)

    def run_cli(self, argv: list[str]) -> int:
        with redirect_stderr(self.err):
            with self.assertRaises(SystemExit) as ctx:
                main(argv, console=self.console)
        return ctx.exception.code

    @responses.activate
    def test_only_not_yet_open_is_printed(self) -> None:
        responses.add(
            responses.POST,
            ENDPOINT,
            json=page(
                1,
                course(1, "Yesterday", "2026-03-09"),
                course(2, "Today", "2026-03-10"),
                course(3, "Tomorrow", "2026-03-11"),
            ),
        )

        code = self.run_cli(["--from", "2026-03-10"])

        self.assertEqual(code, 0)
        output = self.out.getvalue()
        self.assertIn("Tomorrow", output)
        self.assertIn("11 Mar 2026", output)
        self.assertNotIn("Yesterday", output)
        self.assertNotIn("Today", output)
        self.assertEqual(len(output.strip().splitlines()), 2)

    @responses.activate
    def test_all_pages_fetched_in_order(self) -> None:
        responses.add(responses.POST, ENDPOINT, json=page(3, course(1, "A", "2026-04-01"), course(2, "B", "2026-04-02")))
        responses.add(responses.POST, ENDPOINT, json=page(3, course(3, "C", "2026-04-03")))
        responses.add(responses.POST, ENDPOINT, json=page(3, course(4, "D", "2026-04-04"), course(5, "E", "2026-04-05")))

        code = self.run_cli(["--from", "2026-03-10", "--all"])

        self.assertEqual(code, 0)
        self.assertEqual(requested_pages(), ["1", "2", "3"])
        rows = self.out.getvalue().strip().splitlines()[1:]
        self.assertEqual(len(rows), 5)
        self.assertEqual([r.split()[6] for r in rows], ["A", "B", "C", "D", "E"])

    @responses.activate
    def test_window_is_the_same_for_every_page(self) -> None:
        responses.add(responses.POST, ENDPOINT, json=page(2))
        responses.add(responses.POST, ENDPOINT, json=page(2))

        self.assertEqual(self.run_cli(["--from", "2026-03-10", "--days", "20", "--student", "new"]), 0)

        bodies = [parse_qs(call.request.body) for call in responses.calls]
        self.assertEqual(len(bodies), 2)
        for body in bodies:
            self.assertEqual(body["daterange"], ["2026-03-10 - 2027-03-10"])
            self.assertEqual(body["course_types[]"], ["4"])
            self.assertEqual(body["current_state"], ["NewStudent"])

    @responses.activate
    def test_transport_error_on_page_two(self) -> None:
        responses.add(responses.POST, ENDPOINT, json=page(3, course(1, "A", "2026-04-01")))
        responses.add(responses.POST, ENDPOINT, body=requests.exceptions.ConnectionError("connection reset"))

        with mock.patch("retreat.cli.print_courses") as printer:
            code = self.run_cli(["--from", "2026-03-10"])

        self.assertNotEqual(code, 0)
        printer.assert_not_called()
        self.assertEqual(requested_pages(), ["1", "2"])
        self.assertEqual(self.out.getvalue(), "")
        diagnostic = self.err.getvalue().strip().splitlines()
        self.assertEqual(len(diagnostic), 1)
        self.assertTrue(diagnostic[0].startswith("retreat: page 2"))

    @responses.activate
    def test_unsupported_region_makes_no_request(self) -> None:
        code = self.run_cli(["--region", "Atlantis"])

        self.assertNotEqual(code, 0)
        self.assertEqual(len(responses.calls), 0)
        self.assertIn("region 'Atlantis' not found", self.err.getvalue())

    @responses.activate
    def test_unsupported_days_makes_no_request(self) -> None:
        code = self.run_cli(["--days", "7"])

        self.assertNotEqual(code, 0)
        self.assertEqual(len(responses.calls), 0)

    @responses.activate
    def test_non_positive_timeout_makes_no_request(self) -> None:
        code = self.run_cli(["--timeout", "0"])

        self.assertEqual(code, 1)
        self.assertEqual(len(responses.calls), 0)
        self.assertEqual(self.out.getvalue(), "")
        diagnostic = self.err.getvalue().strip().splitlines()
        self.assertEqual(diagnostic, ["retreat: timeout must be a positive number of seconds, got 0.0"])

    @responses.activate
    def test_from_date_without_leading_zeros_is_a_usage_error(self) -> None:
        code = self.run_cli(["--from", "2026-3-10"])

        self.assertEqual(code, 2)
        self.assertEqual(len(responses.calls), 0)

    @responses.activate
    def test_malformed_date_prints_no_table(self) -> None:
        responses.add(responses.POST, ENDPOINT, json=page(1, course(1, "A", "1 April")))

        code = self.run_cli(["--from", "2026-03-10"])

        self.assertEqual(code, 1)
        self.assertEqual(self.out.getvalue(), "")

    def test_bad_from_date_is_a_usage_error(self) -> None:
        code = self.run_cli(["--from", "10.03.2026"])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
