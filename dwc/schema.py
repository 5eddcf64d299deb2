from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

# Verbatim terms read from an occurrence record
TEMPORAL_TERMS: List[str] = [
    "occurrenceID",
    "year",
    "month",
    "day",
    "eventDate",
]

# Terms written for each interpreted record, in output column order
INTERPRETED_TERMS: List[str] = [
    "occurrenceID",
    "verbatimEventDate",
    "eventDate",
    "year",
    "month",
    "day",
    "startDayOfYear",
    "endDayOfYear",
    "issues",
    "state",
]


def resolve_term(term: str) -> str:
    """Return the local Darwin Core term from a URI or prefixed name."""

    if term.startswith("http://") or term.startswith("https://"):
        term = term.rstrip("/").split("/")[-1]
    if ":" in term:
        term = term.split(":", 1)[1]
    return term


class OccurrenceRecord(BaseModel):
    """Pydantic model of the date-related terms of an occurrence record.

    All fields are optional strings; numbers found in JSON input are kept as
    their string form so that ``"04"`` and ``4`` interpret alike.  Other terms
    are preserved as extra fields.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    occurrenceID: Optional[str] = None
    year: Optional[str] = None
    month: Optional[str] = None
    day: Optional[str] = None
    eventDate: Optional[str] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "OccurrenceRecord":
        """Build a record from raw keys, which may be prefixed or full URIs."""

        data: Dict[str, Any] = {}
        for raw_key, value in record.items():
            term = resolve_term(str(raw_key))
            if value is None or value == "":
                continue
            data[term] = value
        return cls(**data)

    def to_dict(self) -> Dict[str, str]:
        """Return the temporal terms with ``None`` rendered as empty strings."""

        return {term: getattr(self, term) or "" for term in TEMPORAL_TERMS}


__all__ = [
    "INTERPRETED_TERMS",
    "TEMPORAL_TERMS",
    "OccurrenceRecord",
    "resolve_term",
]
