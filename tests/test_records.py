"""
Tests for occurrence record parsing and per-record interpretation.
"""

import logging

import pytest

from dwc import INTERPRETED_TERMS, OccurrenceRecord, interpret_record, interpret_records, resolve_term


class TestResolveTerm:
    """Tests for Darwin Core term name resolution."""

    @pytest.mark.parametrize(
        "term",
        ["eventDate", "dwc:eventDate", "http://rs.tdwg.org/dwc/terms/eventDate", "https://rs.tdwg.org/dwc/terms/eventDate/"],
    )
    def test_forms(self, term):
        assert resolve_term(term) == "eventDate"


class TestOccurrenceRecord:
    """Tests for OccurrenceRecord."""

    def test_from_mapping_prefixed_keys(self):
        record = OccurrenceRecord.from_mapping(
            {
                "dwc:occurrenceID": "occ-1",
                "http://rs.tdwg.org/dwc/terms/year": "1999",
                "eventDate": "1999-04-01",
            }
        )

        assert record.occurrenceID == "occ-1"
        assert record.year == "1999"
        assert record.eventDate == "1999-04-01"
        assert record.month is None

    def test_empty_values_are_missing(self):
        record = OccurrenceRecord.from_mapping({"year": "", "month": None, "day": "1"})

        assert record.year is None
        assert record.month is None
        assert record.day == "1"

    def test_numbers_kept_as_text(self):
        """JSON numbers are read as their string form."""
        record = OccurrenceRecord.from_mapping({"year": 1999, "month": 4})

        assert record.year == "1999"
        assert record.month == "4"

    def test_extra_terms_preserved(self):
        record = OccurrenceRecord.from_mapping({"dwc:country": "Kiribati"})

        assert record.model_extra == {"country": "Kiribati"}

    def test_to_dict(self):
        record = OccurrenceRecord(year="1999")

        assert record.to_dict() == {
            "occurrenceID": "",
            "year": "1999",
            "month": "",
            "day": "",
            "eventDate": "",
        }


class TestInterpretRecord:
    """Tests for interpret_record and interpret_records."""

    def test_output_terms(self):
        result = interpret_record({"occurrenceID": "occ-1", "eventDate": "1999-04-01/11"})

        assert set(INTERPRETED_TERMS) <= set(result)
        assert result["occurrenceID"] == "occ-1"
        assert result["verbatimEventDate"] == "1999-04-01/11"
        assert result["eventDate"] == "1999-04-01/1999-04-11"
        assert result["year"] == 1999
        assert result["month"] == 4
        assert result["day"] == 1
        assert result["startDayOfYear"] == 91
        assert result["endDayOfYear"] == 101
        assert result["issues"] == []
        assert result["state"] == "event_date_only"
        assert result["flags"] == ""

    def test_issue_flags(self):
        result = interpret_record({"year": "2000", "month": "4", "day": "1", "eventDate": "1999-04-01"})

        assert result["issues"] == ["DATE_MISMATCH"]
        assert result["flags"] == "temporal:DATE_MISMATCH"
        assert result["year"] == 2000
        assert result["eventDate"] == "1999-04-01"

    def test_empty_record(self):
        result = interpret_record({})

        assert result["eventDate"] is None
        assert result["startDayOfYear"] is None
        assert result["issues"] == []
        assert result["state"] == "no_input"

    def test_records_are_lazy(self):
        def records():
            yield {"eventDate": "1999"}
            raise AssertionError("read past the first record")

        first = next(interpret_records(records()))
        assert first["eventDate"] == "1999"

    def test_issues_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dwc.mapper"):
            rows = list(interpret_records([{"occurrenceID": "occ-9", "eventDate": "2100"}]))

        assert rows[0]["issues"] == ["DATE_UNLIKELY"]
        assert "occ-9" in caplog.text
