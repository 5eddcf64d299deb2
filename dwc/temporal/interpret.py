"""Reconciliation of explicit ``year``/``month``/``day`` with ``eventDate``.

:func:`interpret` is the single entry point.  Decisions are taken in this
order:

1. parse the explicit fields and the normalised ``eventDate``;
2. any implausible year (outside ``MIN_YEAR`` to the current year) ends
   interpretation with ``DATE_UNLIKELY`` and nothing else;
3. without a usable ``eventDate`` the explicit fields alone form the date;
4. otherwise the parsed range is adopted and compared with the explicit
   fields, raising ``DATE_MISMATCH`` when they disagree.

Calendar validation happens where values are built: the grammars and
:func:`~dwc.temporal.period.resolve_period` only return valid dates and
:func:`_explicit_base` drops an invalid explicit date, so a rejected
candidate reaches step 3 as an unparsed ``eventDate``.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..normalize import normalize_event_date
from .grammar import parse_event_date
from .types import (
    Date,
    FuzzyDate,
    Granularity,
    Issue,
    ParsedTemporal,
    TemporalRange,
    TemporalState,
    Year,
    YearMonth,
)
from .units import MIN_YEAR, current_year, is_numeric, parse_day, parse_month, parse_year
from .validation import is_valid

logger = logging.getLogger(__name__)


def _supplied(raw: Optional[str]) -> bool:
    return raw is not None and bool(raw.strip())


def _field(value: FuzzyDate, index: int) -> Optional[int]:
    fields = value.fields()
    return fields[index] if len(fields) > index else None


def _plausible(year: int) -> bool:
    return MIN_YEAR <= year <= current_year()


def _is_unlikely(raw_year: Optional[str], year: Optional[int], parsed: Optional[TemporalRange]) -> bool:
    if year is None and raw_year is not None and is_numeric(raw_year.strip()):
        return True
    if parsed is None:
        return False
    endpoints = (parsed.from_date, parsed.to_date)
    return any(end is not None and not _plausible(end.year) for end in endpoints)


def _explicit_base(year: Optional[int], month: Optional[int], day: Optional[int]) -> Optional[FuzzyDate]:
    """Build the finest date the explicit fields allow.

    A day without a month is ignored.  A calendar-invalid day makes the
    whole explicit date unusable.
    """

    if year is None:
        return None
    if month is None:
        return Year(year)
    if day is None:
        return YearMonth(year, month)
    candidate = Date(year, month, day)
    return candidate if is_valid(candidate) else None


def _select_endpoint(parsed: TemporalRange, year: Optional[int]) -> FuzzyDate:
    """Return the endpoint whose year is ``year``, preferring ``from_date``."""

    if year is not None:
        for endpoint in (parsed.from_date, parsed.to_date):
            if endpoint is not None and endpoint.year == year:
                return endpoint
    return parsed.from_date


def _explicit_only(base: Optional[FuzzyDate], supplied: bool) -> ParsedTemporal:
    if base is None:
        if supplied:
            return ParsedTemporal(issues=frozenset({Issue.DATE_INVALID}), state=TemporalState.INVALID)
        return ParsedTemporal()
    return ParsedTemporal(
        range=TemporalRange(from_date=base),
        year=base.year,
        month=_field(base, 1),
        day=_field(base, 2),
        state=TemporalState.EXPLICIT_ONLY,
    )


def _combine(
    parsed: TemporalRange,
    base: Optional[FuzzyDate],
    year: Optional[int],
    month: Optional[int],
    day: Optional[int],
) -> ParsedTemporal:
    endpoint = _select_endpoint(parsed, year)

    mismatch = year is not None and year != parsed.from_date.year
    if month is not None and endpoint.granularity >= Granularity.YEAR_MONTH:
        mismatch = mismatch or month != _field(endpoint, 1)
    if day is not None and endpoint.granularity >= Granularity.DATE:
        mismatch = mismatch or day != _field(endpoint, 2)

    if not mismatch and base is not None and base.granularity > parsed.from_date.granularity:
        if parsed.is_period:
            # A period endpoint cannot take on finer explicit fields.
            mismatch = True
        else:
            parsed = TemporalRange(from_date=base)
            endpoint = base

    if year is None and month is None and day is None:
        state = TemporalState.EVENT_DATE_ONLY
    else:
        state = TemporalState.COMBINED

    if mismatch:
        return ParsedTemporal(
            range=parsed,
            year=year,
            month=month,
            day=day,
            issues=frozenset({Issue.DATE_MISMATCH}),
            state=state,
        )
    return ParsedTemporal(
        range=parsed,
        year=year if year is not None else endpoint.year,
        month=month if month is not None else _field(endpoint, 1),
        day=day if day is not None else _field(endpoint, 2),
        state=state,
    )


def interpret(
    year: Optional[str] = None,
    month: Optional[str] = None,
    day: Optional[str] = None,
    event_date: Optional[str] = None,
) -> ParsedTemporal:
    """Interpret the date of an occurrence record.

    Parameters
    ----------
    year, month, day:
        Verbatim Darwin Core ``year``, ``month`` and ``day`` values.
    event_date:
        Verbatim ``eventDate``: a single date or an ``A/B`` period at any
        precision.

    Returns
    -------
    ParsedTemporal
        The reconciled range, the reported year, month and day, and the set
        of issues.  Malformed input never raises; it is reported through
        ``issues``.
    """

    parsed_year = parse_year(year)
    parsed_month = parse_month(month)
    parsed_day = parse_day(day) if parsed_month is not None else None

    text = normalize_event_date(event_date)
    parsed = parse_event_date(text) if text else None

    if _is_unlikely(year, parsed_year, parsed):
        logger.debug("Implausible year in year=%r eventDate=%r", year, event_date)
        return ParsedTemporal(issues=frozenset({Issue.DATE_UNLIKELY}), state=TemporalState.UNLIKELY)

    base = _explicit_base(parsed_year, parsed_month, parsed_day)
    if base is None and parsed_year is not None:
        logger.debug("Discarding calendar-invalid explicit date %r-%r-%r", year, month, day)
        parsed_year = parsed_month = parsed_day = None

    if parsed is not None:
        return _combine(parsed, base, parsed_year, parsed_month, parsed_day)

    supplied = any(_supplied(raw) for raw in (year, month, day, event_date))
    return _explicit_only(base, supplied)


__all__ = ["interpret"]
