"""Grammars recognising free-text ``eventDate`` values.

:data:`GRAMMARS` is tried in order and the first grammar returning a
calendar-valid value wins.  The order is the tie-break policy for strings
several grammars could read, so changing it changes interpretation results.

1. ``period``: ``A/B`` with a complete first endpoint
2. ``iso``: ISO 8601 date or date-time, offsets discarded
3. ``numeric``: slash, dash or dot delimited numbers with a 4-digit year
4. ``named_month``: English month names or abbreviations
5. ``date_time``: a date, whitespace, then a time of day
6. ``compact``: ``yyyymmdd``
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Callable, Optional, Sequence, Tuple

from .period import parse_abbreviation, resolve_period
from .types import Date, DateTime, FuzzyDate, Granularity, TemporalRange, from_fields
from .units import TIME_PATTERN, parse_month, parse_time
from .validation import is_valid

logger = logging.getLogger(__name__)

_ISO_RE = re.compile(
    r"(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<time>" + TIME_PATTERN + r"))?"
    r")?)?",
    re.IGNORECASE,
)

_NUMERIC_RE = re.compile(r"\d{1,4}(?P<sep>[/.-])\d{1,4}(?:(?P=sep)\d{1,4})?")

_COMPACT_RE = re.compile(r"(\d{4})(\d{2})(\d{2})")

_MONTH = r"(?P<month>[a-z]{3,})\.?"
_DAY = r"(?P<day>\d{1,2})(?:st|nd|rd|th)?\.?"
_YEAR = r"(?P<year>\d{4})"

# (pattern, has day) in the order they are tried
_NAMED_MONTH_PATTERNS: Tuple[Tuple[re.Pattern, bool], ...] = (
    (re.compile(_DAY + r"[\s-]+" + _MONTH + r"[\s,-]+" + _YEAR, re.IGNORECASE), True),
    (re.compile(_MONTH + r"[\s-]+" + _DAY + r",?[\s-]+" + _YEAR, re.IGNORECASE), True),
    (re.compile(_YEAR + r"[\s-]+" + _MONTH + r"[\s-]+" + _DAY, re.IGNORECASE), True),
    (re.compile(_MONTH + r"[\s,-]+" + _YEAR, re.IGNORECASE), False),
)

# Component order for three numeric parts as (year, month, day) indexes
_NUMERIC_ORDERS = ((0, 1, 2), (2, 1, 0), (2, 0, 1))

# Component order for two numeric parts as (year, month) indexes
_YEAR_MONTH_ORDERS = ((0, 1), (1, 0))


def _valid(value: FuzzyDate) -> Optional[FuzzyDate]:
    return value if is_valid(value) else None


def parse_iso(text: str) -> Optional[FuzzyDate]:
    match = _ISO_RE.fullmatch(text)
    if not match:
        return None
    values = [int(match.group("year"))]
    for name in ("month", "day"):
        if match.group(name) is not None:
            values.append(int(match.group(name)))
    if match.group("time") is not None:
        values.append(int(match.group("hour")))
        values.append(int(match.group("minute")))
        values.append(int(match.group("second") or 0))
    return _valid(from_fields(*values))


def parse_numeric(text: str) -> Optional[FuzzyDate]:
    """Read delimited numbers, picking the first calendar-valid order.

    Three parts are tried year-month-day, day-month-year, then
    month-day-year; two parts year-month, then month-year.  The year must
    be written with four digits and the other parts with at most two.
    """

    if not _NUMERIC_RE.fullmatch(text):
        return None
    parts = re.split(r"[/.-]", text)
    if len(parts) == 3:
        for y, m, d in _NUMERIC_ORDERS:
            if len(parts[y]) != 4 or len(parts[m]) > 2 or len(parts[d]) > 2:
                continue
            candidate = _valid(Date(int(parts[y]), int(parts[m]), int(parts[d])))
            if candidate is not None:
                return candidate
        return None
    for y, m in _YEAR_MONTH_ORDERS:
        if len(parts[y]) != 4 or len(parts[m]) > 2:
            continue
        candidate = _valid(from_fields(int(parts[y]), int(parts[m])))
        if candidate is not None:
            return candidate
    return None


def parse_named_month(text: str) -> Optional[FuzzyDate]:
    for pattern, has_day in _NAMED_MONTH_PATTERNS:
        match = pattern.fullmatch(text)
        if not match:
            continue
        month = parse_month(match.group("month"))
        if month is None:
            continue
        year = int(match.group("year"))
        if has_day:
            candidate = _valid(Date(year, month, int(match.group("day"))))
        else:
            candidate = _valid(from_fields(year, month))
        if candidate is not None:
            return candidate
    return None


def parse_date_time(text: str) -> Optional[FuzzyDate]:
    """Read ``<date> <time>``, e.g. ``2009-02-13 15:20`` or ``1958-05-05 9:00``."""

    date_text, _, time_text = text.rpartition(" ")
    if not date_text:
        return None
    time = parse_time(time_text)
    if time is None:
        return None
    for grammar in (parse_iso, parse_numeric, parse_named_month):
        day = grammar(date_text)
        if day is not None and day.granularity is Granularity.DATE:
            return _valid(DateTime(*day.fields(), *time))
    return None


def parse_compact(text: str) -> Optional[FuzzyDate]:
    match = _COMPACT_RE.fullmatch(text)
    if not match:
        return None
    return _valid(Date(*(int(g) for g in match.groups())))


INSTANT_GRAMMARS: Sequence[Tuple[str, Callable[[str], Optional[FuzzyDate]]]] = (
    ("iso", parse_iso),
    ("numeric", parse_numeric),
    ("named_month", parse_named_month),
    ("date_time", parse_date_time),
    ("compact", parse_compact),
)


def parse_instant(text: str) -> Optional[FuzzyDate]:
    """Parse ``text`` as one fuzzy date using the single-instant grammars."""

    for _, grammar in INSTANT_GRAMMARS:
        value = grammar(text)
        if value is not None:
            return value
    return None


def parse_period(text: str) -> Optional[TemporalRange]:
    if text.count("/") != 1:
        return None
    first_text, second_text = (part.strip() for part in text.split("/"))
    first = parse_instant(first_text)
    if first is None:
        return None
    second = parse_instant(second_text)
    if second is None:
        second = parse_abbreviation(second_text)
    if second is None:
        return None
    return resolve_period(first, second)


def _single(grammar: Callable[[str], Optional[FuzzyDate]]) -> Callable[[str], Optional[TemporalRange]]:
    def parse(text: str) -> Optional[TemporalRange]:
        value = grammar(text)
        return TemporalRange(from_date=value) if value is not None else None

    return parse


GRAMMARS: Sequence[Tuple[str, Callable[[str], Optional[TemporalRange]]]] = (
    ("period", parse_period),
) + tuple((name, _single(grammar)) for name, grammar in INSTANT_GRAMMARS)


@lru_cache(maxsize=4096)
def parse_event_date(text: str) -> Optional[TemporalRange]:
    """Parse a normalised ``eventDate`` into a range, or ``None``.

    The result is memoised; values are immutable so sharing them between
    callers is safe.
    """

    if not text:
        return None
    for name, grammar in GRAMMARS:
        result = grammar(text)
        if result is not None:
            logger.debug("eventDate %r matched grammar %s", text, name)
            return result
    logger.debug("eventDate %r matched no grammar", text)
    return None


__all__ = [
    "GRAMMARS",
    "INSTANT_GRAMMARS",
    "parse_compact",
    "parse_date_time",
    "parse_event_date",
    "parse_instant",
    "parse_iso",
    "parse_named_month",
    "parse_numeric",
    "parse_period",
]
