from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping

from .schema import OccurrenceRecord
from .temporal import interpret
from .validators import validate_event_date

logger = logging.getLogger(__name__)


def interpret_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Interpret the date terms of one raw occurrence record.

    Keys may be plain Darwin Core terms (``eventDate``), prefixed
    (``dwc:eventDate``) or full term URIs.  The returned mapping holds the
    ``occurrenceID``, the verbatim ``eventDate`` and the interpreted terms
    listed in :data:`dwc.schema.INTERPRETED_TERMS`, plus ``flags``.
    """

    occurrence = OccurrenceRecord.from_mapping(record)
    parsed = interpret(occurrence.year, occurrence.month, occurrence.day, occurrence.eventDate)
    result: Dict[str, Any] = {
        "occurrenceID": occurrence.occurrenceID,
        "verbatimEventDate": occurrence.eventDate,
    }
    result.update(parsed.to_dict())
    result["flags"] = ";".join(validate_event_date(occurrence, parsed))
    return result


def interpret_records(records: Iterable[Mapping[str, Any]]) -> Iterator[Dict[str, Any]]:
    """Lazily interpret ``records``, one output mapping per input row."""

    for index, record in enumerate(records):
        interpreted = interpret_record(record)
        if interpreted["issues"]:
            logger.debug(
                "Record %s (%s) raised %s",
                index,
                interpreted["occurrenceID"],
                ",".join(interpreted["issues"]),
            )
        yield interpreted


__all__ = ["interpret_record", "interpret_records"]
