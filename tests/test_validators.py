"""
Tests for record validators.

Tests cover:
- Required field checks
- Temporal issue flags
- Combined flag lists
"""

import pytest

from dwc import OccurrenceRecord, interpret, validate, validate_event_date, validate_minimal_fields


@pytest.fixture
def record():
    """Occurrence record whose explicit fields agree with eventDate."""
    return OccurrenceRecord(
        occurrenceID="occ-1",
        year="1999",
        month="04",
        day="01",
        eventDate="01 Apr. 1999",
    )


class TestMinimalFields:
    """Tests for validate_minimal_fields."""

    def test_all_present(self, record):
        assert validate_minimal_fields(record, ["occurrenceID", "eventDate"]) == []

    def test_missing(self):
        record = OccurrenceRecord(year="1999")
        assert validate_minimal_fields(record, ["occurrenceID", "year", "eventDate"]) == [
            "occurrenceID",
            "eventDate",
        ]


class TestEventDateFlags:
    """Tests for validate_event_date."""

    def test_clean_record(self, record):
        assert validate_event_date(record) == []

    def test_mismatch(self):
        record = OccurrenceRecord(year="2000", month="04", day="01", eventDate="1999/4/1")
        assert validate_event_date(record) == ["temporal:DATE_MISMATCH"]

    def test_unlikely(self):
        record = OccurrenceRecord(eventDate="2100-01-01")
        assert validate_event_date(record) == ["temporal:DATE_UNLIKELY"]

    def test_invalid(self):
        record = OccurrenceRecord(eventDate="not a date")
        assert validate_event_date(record) == ["temporal:DATE_INVALID"]

    def test_reuses_parsed_result(self, record):
        """A result passed in is reported instead of re-interpreting."""
        parsed = interpret(None, None, None, "2100")
        assert validate_event_date(record, parsed) == ["temporal:DATE_UNLIKELY"]


class TestValidate:
    """Tests for the combined validate entry point."""

    def test_no_flags(self, record):
        assert validate(record, ["occurrenceID"]) == []

    def test_missing_and_temporal(self):
        record = OccurrenceRecord(eventDate="2013/2/29")
        assert validate(record, ["occurrenceID", "eventDate"]) == [
            "missing:occurrenceID",
            "temporal:DATE_INVALID",
        ]

    def test_default_has_no_required_fields(self):
        assert validate(OccurrenceRecord()) == []
