from .schema import (
    OccurrenceRecord,
    INTERPRETED_TERMS,
    TEMPORAL_TERMS,
    resolve_term,
)
from .mapper import interpret_record, interpret_records
from .normalize import normalize_event_date
from .validators import (
    validate,
    validate_minimal_fields,
    validate_event_date,
)
from .temporal import Issue, ParsedTemporal, TemporalRange, interpret

__all__ = [
    "OccurrenceRecord",
    "INTERPRETED_TERMS",
    "TEMPORAL_TERMS",
    "resolve_term",
    "interpret_record",
    "interpret_records",
    "normalize_event_date",
    "validate",
    "validate_minimal_fields",
    "validate_event_date",
    "Issue",
    "ParsedTemporal",
    "TemporalRange",
    "interpret",
]
