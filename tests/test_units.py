"""
Tests for date component parsing and calendar validation.
"""

from datetime import date

import pytest

from dwc.temporal import Unit, is_valid, is_valid_date, parse_day, parse_month, parse_unit, parse_year
from dwc.temporal import Date, DateTime, Year, YearMonth
from dwc.temporal.units import is_numeric, parse_time
from dwc.temporal.validation import days_in_month


class TestParseUnit:
    """Tests for single component parsing."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing(self, raw):
        """Missing and blank values give None."""
        assert parse_unit(raw, Unit.YEAR) is None

    def test_year(self):
        assert parse_year("1999") == 1999
        assert parse_year(" 1999 ") == 1999

    def test_year_outside_window(self):
        """Years before 1000 or after the current year are rejected."""
        assert parse_year("999") is None
        assert parse_year(str(date.today().year + 1)) is None

    def test_year_too_long(self):
        """Digit runs longer than four are rejected before conversion."""
        assert parse_year("01999") is None
        assert parse_year("9" * 5000) is None

    @pytest.mark.parametrize(
        "raw, expected",
        [("4", 4), ("04", 4), ("12", 12), ("April", 4), ("apr", 4), ("SEPT", 9), ("dec", 12)],
    )
    def test_month(self, raw, expected):
        assert parse_month(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "13", "-1", "apr.", "Aprill", "4.0"])
    def test_bad_month(self, raw):
        assert parse_month(raw) is None

    def test_day_bounds(self):
        """Day is checked against 1..31 only; month lengths are checked later."""
        assert parse_day("31") == 31
        assert parse_day("0") is None
        assert parse_day("32") is None

    def test_non_ascii_digits(self):
        """Full-width digits are not numbers here."""
        assert parse_year("１９９９") is None
        assert not is_numeric("１９９９")

    def test_hour_and_minute_bounds(self):
        assert parse_unit("23", Unit.HOUR) == 23
        assert parse_unit("24", Unit.HOUR) is None
        assert parse_unit("59", Unit.MINUTE) == 59
        assert parse_unit("60", Unit.SECOND) is None


class TestParseTime:
    """Tests for time of day parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("9:30", (9, 30, 0)),
            ("09:26Z", (9, 26, 0)),
            ("12:52:17Z", (12, 52, 17)),
            ("14:07-0600", (14, 7, 0)),
            ("06:00-00:00", (6, 0, 0)),
            ("00:05:00+14", (0, 5, 0)),
            ("00:00:00.0000000", (0, 0, 0)),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_time(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "25:00", "12:60", "1230", "12:3"])
    def test_invalid(self, raw):
        assert parse_time(raw) is None


class TestValidation:
    """Tests for calendar validation."""

    def test_leap_years(self):
        assert is_valid_date(2012, 2, 29)
        assert not is_valid_date(2013, 2, 29)
        assert not is_valid_date(1900, 2, 29)
        assert is_valid_date(2000, 2, 29)

    def test_month_lengths(self):
        assert is_valid_date(2013, 10, 31)
        assert not is_valid_date(2013, 11, 31)

    def test_year_zero(self):
        """Year 0 is a leap year of the proleptic calendar; plausibility is checked elsewhere."""
        assert is_valid_date(0)
        assert is_valid_date(0, 2, 29)
        assert not is_valid_date(-1)

    @pytest.mark.parametrize(
        "year, month, expected",
        [(2013, 2, 28), (2012, 2, 29), (1900, 2, 28), (2000, 2, 29), (1999, 4, 30), (1999, 12, 31)],
    )
    def test_days_in_month(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize(
        "args",
        [(1999, 0, 1), (1999, 13, 1), (1999, 1, 0), (1999, 1, 1, 24), (1999, 1, 1, 0, 60), (1999, 1, 1, 0, 0, 60)],
    )
    def test_out_of_bounds(self, args):
        assert not is_valid_date(*args)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Year(1999), True),
            (YearMonth(1999, 13), False),
            (Date(2013, 2, 29), False),
            (DateTime(1999, 4, 1, 23, 59, 59), True),
            (DateTime(1999, 4, 1, 24, 0, 0), False),
        ],
    )
    def test_fuzzy_dates(self, value, expected):
        assert is_valid(value) is expected
