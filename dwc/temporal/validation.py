from __future__ import annotations

import calendar

from .types import FuzzyDate

# Days per month in a common year; February gains a day in leap years.
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def is_valid_date(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> bool:
    """Return True when the components name a real calendar instant.

    The proleptic Gregorian calendar is used from year 0 onwards, so 29
    February is only valid when ``year`` is a leap year.  Plausibility of
    the year itself is left to the caller.
    """

    if year < 0 or not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(year, month):
        return False
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def is_valid(value: FuzzyDate) -> bool:
    """Validate every populated field of a fuzzy date."""

    return is_valid_date(*value.fields())


__all__ = ["days_in_month", "is_valid", "is_valid_date"]
