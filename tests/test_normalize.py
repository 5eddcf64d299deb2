"""
Tests for eventDate text clean-up.
"""

from importlib import resources
from pathlib import Path
import tomllib

import pytest

from dwc.normalize import _load_rules, normalize_event_date


class TestNormalizeEventDate:
    """Tests for normalize_event_date."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        assert normalize_event_date(value) == ""

    def test_trailing_annotation_removed(self):
        value = "2016-09-15T00:05:00+1400 (LINT, Kiritimati, Kiribati - Christmas Island, UTC+14)"
        assert normalize_event_date(value) == "2016-09-15T00:05:00+1400"

    def test_inner_parentheses_kept(self):
        """Only an annotation closing the value is removed."""
        assert normalize_event_date("(circa) 1999") == "(circa) 1999"

    def test_whitespace_collapsed(self):
        assert normalize_event_date("  1987-04-11   9:30 ") == "1987-04-11 9:30"

    def test_substitutions(self):
        """Characters from the substitution rules are replaced."""
        assert normalize_event_date("ß1. Apr. 1999") == "01. Apr. 1999"
        assert normalize_event_date("1999–2010") == "1999-2010"
        assert normalize_event_date("1999／2010") == "1999/2010"

    def test_zone_offsets_untouched(self):
        assert normalize_event_date("1999-04-01T09:33:59-0300") == "1999-04-01T09:33:59-0300"


class TestRuleFiles:
    """Tests for locating the shipped rule files."""

    def test_rules_are_package_resources(self):
        """The rule file is found through the config package, not a source checkout path."""
        rules = resources.files("config").joinpath("rules").joinpath("event_date.toml")

        assert rules.is_file()
        assert _load_rules("event_date")["substitutions"]["ß"] == "0"

    def test_missing_rule_file(self, caplog):
        assert _load_rules("no_such_rules") == {}
        assert "no_such_rules.toml" in caplog.text

    def test_rule_files_declared_as_package_data(self):
        """Installed copies carry the TOML files next to the config package."""
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        with pyproject.open("rb") as f:
            setuptools_cfg = tomllib.load(f)["tool"]["setuptools"]

        assert "config" in setuptools_cfg["packages"]["find"]["include"]
        assert set(setuptools_cfg["package-data"]["config"]) >= {"*.toml", "rules/*.toml"}
