"""Completion and ordering of ``A/B`` event date periods.

The second endpoint of a period is often abbreviated to the fields that
change: ``1999-04-01/11`` ends on the 11th, ``2011-09-21/10-05`` on
5 October and ``1999-04-17T12:26Z/12:52:17Z`` later the same day.  The
missing leading fields are inherited from the first endpoint.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .types import DateTime, FuzzyDate, Granularity, TemporalRange, from_fields, sort_key
from .units import parse_time
from .validation import is_valid

logger = logging.getLogger(__name__)

_NUMERIC_ABBREVIATION_RE = re.compile(r"(\d{1,2})(?:-(\d{1,2}))?")


@dataclass(frozen=True)
class Abbreviation:
    """Trailing fields of an abbreviated period endpoint.

    Exactly one of ``date_fields`` (one or two trailing date fields, e.g.
    ``(month, day)``) and ``time`` (``(hour, minute, second)``) is set.
    """

    date_fields: Tuple[int, ...] = ()
    time: Optional[Tuple[int, int, int]] = None


def parse_abbreviation(text: str) -> Optional[Abbreviation]:
    """Recognise an abbreviated second endpoint, or return ``None``."""

    time = parse_time(text)
    if time is not None:
        return Abbreviation(time=time)
    match = _NUMERIC_ABBREVIATION_RE.fullmatch(text)
    if not match:
        return None
    return Abbreviation(date_fields=tuple(int(g) for g in match.groups() if g is not None))


def complete(first: FuzzyDate, abbreviation: Abbreviation) -> Optional[FuzzyDate]:
    """Fill the fields ``abbreviation`` leaves out from ``first``."""

    date_part = first.fields()[:3]
    if abbreviation.time is not None:
        if first.granularity < Granularity.DATE:
            return None
        candidate: FuzzyDate = DateTime(*date_part, *abbreviation.time)
    else:
        count = len(abbreviation.date_fields)
        # The abbreviation has to leave at least the year to inherit.
        if count >= len(date_part):
            return None
        candidate = from_fields(*date_part[:-count], *abbreviation.date_fields)
    return candidate if is_valid(candidate) else None


def resolve_period(
    first: FuzzyDate, second: Union[FuzzyDate, Abbreviation]
) -> Optional[TemporalRange]:
    """Return the ascending range spanned by ``first`` and ``second``.

    ``None`` is returned when ``second`` cannot be completed into a
    calendar-valid date.  Endpoints written in descending order are swapped.
    """

    if isinstance(second, Abbreviation):
        resolved = complete(first, second)
        if resolved is None:
            return None
        second = resolved
    elif not is_valid(second):
        return None
    if sort_key(first) > sort_key(second):
        logger.debug("Swapping descending period %s/%s", first.isoformat(), second.isoformat())
        first, second = second, first
    return TemporalRange(from_date=first, to_date=second)


__all__ = ["Abbreviation", "complete", "parse_abbreviation", "resolve_period"]
