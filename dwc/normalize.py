from __future__ import annotations

import logging
import re
from functools import lru_cache
from importlib import resources
from typing import Dict
import tomllib

logger = logging.getLogger(__name__)

# Rule files ship inside the ``config`` package
_RULES_DIR = resources.files("config").joinpath("rules")

# A parenthetical annotation closing the value, e.g. "(LINT, Kiritimati, UTC+14)"
_TRAILING_ANNOTATION_RE = re.compile(r"\s*\([^()]*\)\s*$")
_WHITESPACE_RE = re.compile(r"\s+")


@lru_cache(maxsize=None)
def _load_rules(name: str) -> Dict[str, Dict[str, str]]:
    """Load a TOML rule file from the configuration directory.

    Parameters
    ----------
    name: str
        Name of the rule file without extension.
    """

    path = _RULES_DIR.joinpath(f"{name}.toml")
    if not path.is_file():
        logger.warning("Rule file %s.toml not found; no rules applied", name)
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def normalize_event_date(value: str | None) -> str:
    """Return ``value`` cleaned up for event date grammar matching.

    A trailing parenthetical annotation is removed, characters listed in the
    ``[substitutions]`` table of ``config/rules/event_date.toml`` are
    replaced and whitespace runs are collapsed to a single space.  Zone
    offsets are left alone; the grammars read past them.
    """

    if not value:
        return ""
    text = value
    if text.rstrip().endswith(")"):
        text = _TRAILING_ANNOTATION_RE.sub("", text)
    substitutions = _load_rules("event_date").get("substitutions", {})
    for old, new in substitutions.items():
        text = text.replace(old, new)
    return _WHITESPACE_RE.sub(" ", text).strip()


__all__ = ["normalize_event_date"]
