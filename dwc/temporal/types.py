"""Value types for interpreted occurrence dates.

A :data:`FuzzyDate` is one of four frozen dataclasses, each standing for the
whole span of instants it could represent: ``Year(1999)`` covers every
moment of 1999, ``Date(1999, 4, 1)`` covers that whole day.  Ordering
compares the earliest covered instant, so ``Year(1999) == Date(1999, 1, 1)``
under :func:`sort_key` even though the values differ.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple, Union


class Granularity(IntEnum):
    """Precision of a fuzzy date, coarsest first."""

    YEAR = 1
    YEAR_MONTH = 2
    DATE = 3
    DATE_TIME = 4


class Issue(str, Enum):
    """Data-quality issues raised while interpreting dates."""

    DATE_INVALID = "DATE_INVALID"
    DATE_MISMATCH = "DATE_MISMATCH"
    DATE_UNLIKELY = "DATE_UNLIKELY"


class TemporalState(str, Enum):
    """Which inputs produced a :class:`ParsedTemporal`."""

    NO_INPUT = "no_input"
    EXPLICIT_ONLY = "explicit_only"
    EVENT_DATE_ONLY = "event_date_only"
    COMBINED = "combined"
    UNLIKELY = "unlikely"
    INVALID = "invalid"


@dataclass(frozen=True)
class Year:
    year: int

    granularity = Granularity.YEAR

    def fields(self) -> Tuple[int, ...]:
        return (self.year,)

    def earliest(self) -> datetime:
        return datetime(self.year, 1, 1)

    def latest(self) -> datetime:
        return datetime(self.year, 12, 31, 23, 59, 59)

    def isoformat(self) -> str:
        return f"{self.year:04d}"


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int

    granularity = Granularity.YEAR_MONTH

    def fields(self) -> Tuple[int, ...]:
        return (self.year, self.month)

    def earliest(self) -> datetime:
        return datetime(self.year, self.month, 1)

    def latest(self) -> datetime:
        last_day = calendar.monthrange(self.year, self.month)[1]
        return datetime(self.year, self.month, last_day, 23, 59, 59)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Date:
    year: int
    month: int
    day: int

    granularity = Granularity.DATE

    def fields(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day)

    def earliest(self) -> datetime:
        return datetime(self.year, self.month, self.day)

    def latest(self) -> datetime:
        return datetime(self.year, self.month, self.day, 23, 59, 59)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class DateTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0

    granularity = Granularity.DATE_TIME

    def fields(self) -> Tuple[int, ...]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def earliest(self) -> datetime:
        return datetime(*self.fields())

    def latest(self) -> datetime:
        return self.earliest()

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


FuzzyDate = Union[Year, YearMonth, Date, DateTime]

# Variant to build for a given number of populated fields.
_BY_FIELD_COUNT = {1: Year, 2: YearMonth, 3: Date, 6: DateTime}


def from_fields(*values: int) -> FuzzyDate:
    """Build the variant matching the number of ``values`` supplied.

    Five values (a date plus hour and minute) produce a ``DateTime`` with
    zero seconds.
    """

    if len(values) == 5:
        values = values + (0,)
    return _BY_FIELD_COUNT[len(values)](*values)


def sort_key(value: FuzzyDate) -> Tuple[int, ...]:
    """Key ordering fuzzy dates by their earliest covered instant."""

    padded = value.fields() + (1, 1, 0, 0, 0)[len(value.fields()) - 1 :]
    return padded[:6]


@dataclass(frozen=True)
class TemporalRange:
    """A single fuzzy date or an ascending period."""

    from_date: FuzzyDate
    to_date: Optional[FuzzyDate] = None

    @property
    def is_period(self) -> bool:
        return self.to_date is not None

    def isoformat(self) -> str:
        if self.to_date is None:
            return self.from_date.isoformat()
        return f"{self.from_date.isoformat()}/{self.to_date.isoformat()}"

    def start_day_of_year(self) -> int:
        return self.from_date.earliest().timetuple().tm_yday

    def end_day_of_year(self) -> int:
        end = self.to_date if self.to_date is not None else self.from_date
        return end.latest().timetuple().tm_yday


@dataclass(frozen=True)
class ParsedTemporal:
    """Outcome of reconciling explicit date fields with ``eventDate``."""

    range: Optional[TemporalRange] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    issues: frozenset = field(default_factory=frozenset)
    state: TemporalState = TemporalState.NO_INPUT

    @property
    def from_date(self) -> Optional[FuzzyDate]:
        return self.range.from_date if self.range else None

    @property
    def to_date(self) -> Optional[FuzzyDate]:
        return self.range.to_date if self.range else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON friendly dictionary."""
        return {
            "eventDate": self.range.isoformat() if self.range else None,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "startDayOfYear": self.range.start_day_of_year() if self.range else None,
            "endDayOfYear": self.range.end_day_of_year() if self.range else None,
            "issues": sorted(issue.value for issue in self.issues),
            "state": self.state.value,
        }


__all__ = [
    "Granularity",
    "Issue",
    "TemporalState",
    "Year",
    "YearMonth",
    "Date",
    "DateTime",
    "FuzzyDate",
    "TemporalRange",
    "ParsedTemporal",
    "from_fields",
    "sort_key",
]
