"""Parsing of single date components.

Every parser returns ``None`` for missing, malformed or out-of-range input;
nothing here raises.
"""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Optional, Tuple

MIN_YEAR = 1000

# Longer numeric strings are rejected before conversion.
MAX_DIGITS = 4

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# "Z", "+14", "-0600" or "+05:30"; read and thrown away
ZONE_PATTERN = r"(?:Z|[+-]\d{2}(?::?\d{2})?)"

# Short or zero padded hour, optional seconds with a truncated fraction
TIME_PATTERN = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,]\d+)?)?"
    + ZONE_PATTERN
    + "?"
)

_TIME_RE = re.compile(TIME_PATTERN, re.IGNORECASE)


class Unit(Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


def current_year() -> int:
    return date.today().year


def is_numeric(raw: Optional[str]) -> bool:
    """Return True when ``raw`` is a non-empty run of ASCII digits."""

    return bool(raw) and raw.isascii() and raw.isdigit()


def _bounds(kind: Unit) -> tuple[int, int]:
    if kind is Unit.YEAR:
        return MIN_YEAR, current_year()
    if kind is Unit.MONTH:
        return 1, 12
    if kind is Unit.DAY:
        return 1, 31
    if kind is Unit.HOUR:
        return 0, 23
    return 0, 59


def _parse_month_name(raw: str) -> Optional[int]:
    token = raw.lower()
    for number, name in enumerate(MONTH_NAMES, start=1):
        if name.startswith(token):
            return number
    return None


def parse_unit(raw: Optional[str], kind: Unit) -> Optional[int]:
    """Parse ``raw`` as a date component of type ``kind``.

    Month accepts a case-insensitive prefix of an English month name as well
    as a number; all other units are numeric only.
    """

    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    if not is_numeric(raw):
        if kind is Unit.MONTH and raw.isalpha():
            return _parse_month_name(raw)
        return None
    if len(raw) > MAX_DIGITS:
        return None
    value = int(raw)
    low, high = _bounds(kind)
    if value < low or value > high:
        return None
    return value


def parse_year(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.YEAR)


def parse_month(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.MONTH)


def parse_day(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.DAY)


def parse_hour(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.HOUR)


def parse_minute(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.MINUTE)


def parse_second(raw: Optional[str]) -> Optional[int]:
    return parse_unit(raw, Unit.SECOND)


def parse_time(raw: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Parse a time of day such as ``9:30``, ``12:52:17Z`` or ``14:07-0600``.

    Returns ``(hour, minute, second)``.  Fractional seconds are truncated and
    any zone offset is discarded without shifting the wall-clock value.
    """

    if not raw:
        return None
    match = _TIME_RE.fullmatch(raw.strip())
    if not match:
        return None
    hour = parse_hour(match.group("hour"))
    minute = parse_minute(match.group("minute"))
    second = parse_second(match.group("second") or "0")
    if hour is None or minute is None or second is None:
        return None
    return hour, minute, second


__all__ = [
    "MIN_YEAR",
    "MONTH_NAMES",
    "TIME_PATTERN",
    "ZONE_PATTERN",
    "Unit",
    "current_year",
    "is_numeric",
    "parse_unit",
    "parse_year",
    "parse_month",
    "parse_day",
    "parse_hour",
    "parse_minute",
    "parse_second",
    "parse_time",
]
