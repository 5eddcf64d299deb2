"""Interpretation of occurrence record dates.

Usage::

    from dwc.temporal import interpret

    result = interpret("1999", "04", None, "1999-04-01/11")
    result.range.isoformat()  # "1999-04-01/1999-04-11"
"""

from .grammar import GRAMMARS, parse_event_date
from .interpret import interpret
from .period import resolve_period
from .types import (
    Date,
    DateTime,
    FuzzyDate,
    Granularity,
    Issue,
    ParsedTemporal,
    TemporalRange,
    TemporalState,
    Year,
    YearMonth,
)
from .units import parse_day, parse_month, parse_unit, parse_year, Unit
from .validation import is_valid, is_valid_date

__all__ = [
    "interpret",
    "parse_event_date",
    "resolve_period",
    "GRAMMARS",
    "Date",
    "DateTime",
    "FuzzyDate",
    "Granularity",
    "Issue",
    "ParsedTemporal",
    "TemporalRange",
    "TemporalState",
    "Year",
    "YearMonth",
    "Unit",
    "parse_unit",
    "parse_year",
    "parse_month",
    "parse_day",
    "is_valid",
    "is_valid_date",
]
