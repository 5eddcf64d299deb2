from __future__ import annotations

from typing import Iterable, List, Optional

from .schema import OccurrenceRecord
from .temporal import ParsedTemporal, interpret


def validate_minimal_fields(record: OccurrenceRecord, minimal_fields: Iterable[str]) -> List[str]:
    """Return a list of required fields missing from ``record``."""

    missing = [field for field in minimal_fields if not getattr(record, field, None)]
    return missing


def validate_event_date(
    record: OccurrenceRecord, parsed: Optional[ParsedTemporal] = None
) -> List[str]:
    """Return ``temporal:<ISSUE>`` flags for the record's date terms.

    ``parsed`` may be passed when the record has already been interpreted.
    """

    if parsed is None:
        parsed = interpret(record.year, record.month, record.day, record.eventDate)
    return [f"temporal:{issue.value}" for issue in sorted(parsed.issues, key=lambda i: i.value)]


def validate(record: OccurrenceRecord, minimal_fields: Iterable[str] = ()) -> List[str]:
    """Validate ``record`` returning a list of flag strings.

    Flags are simple text markers describing which checks failed: missing
    required fields and every issue raised while interpreting the date.
    """

    flags: List[str] = []
    missing = validate_minimal_fields(record, minimal_fields)
    if missing:
        flags.append("missing:" + ",".join(missing))
    flags.extend(validate_event_date(record))
    return flags


__all__ = ["validate", "validate_event_date", "validate_minimal_fields"]
