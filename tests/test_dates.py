"""
Unit tests for date helpers.

Contract:
- YYYY-MM-DD is the only accepted format
- the request's daterange field parses back to the same dates
- one year after 29 February is 1 March
"""

import unittest
from datetime import date

from retreat.config import build_config
from retreat.dates import add_one_year, beautify, format_date, parse_date
from retreat.errors import DateParseError
from retreat.query import daterange


class TestParseDate(unittest.TestCase):
    def test_valid_date(self) -> None:
        self.assertEqual(parse_date("2024-02-29"), date(2024, 2, 29))

    def test_invalid_dates_raise(self) -> None:
        bad = [
            "",
            "2024-13-01",
            "2023-02-29",
            "01.02.2024",
            "2024/01/01",
            "tomorrow",
            "2026-3-5",
            "2026-03-5",
            "2026-3-11",
            " 2026-03-05",
            "2026-03-05\n",
        ]
        for text in bad:
            with self.subTest(text=text):
                with self.assertRaises(DateParseError):
                    parse_date(text)

    def test_daterange_parses_back(self) -> None:
        for d in [date(2024, 1, 1), date(2024, 12, 31), date(2024, 2, 29)]:
            with self.subTest(d=d):
                config = build_config(today=d)
                start, end = daterange(config).split(" - ")
                self.assertEqual(parse_date(start), d)
                self.assertEqual(parse_date(end), config.date_to)
                self.assertEqual(format_date(parse_date(start)), start)


class TestAddOneYear(unittest.TestCase):
    def test_regular_day(self) -> None:
        self.assertEqual(add_one_year(date(2024, 12, 31)), date(2025, 12, 31))

    def test_leap_day_rolls_to_march(self) -> None:
        self.assertEqual(add_one_year(date(2024, 2, 29)), date(2025, 3, 1))


class TestBeautify(unittest.TestCase):
    def test_human_readable(self) -> None:
        self.assertEqual(beautify("2026-01-02"), "02 Jan 2026")

    def test_malformed(self) -> None:
        with self.assertRaises(DateParseError):
            beautify("2026-1-2x")

    def test_missing_leading_zero(self) -> None:
        with self.assertRaises(DateParseError):
            beautify("2026-1-02")


if __name__ == "__main__":
    unittest.main()
