from pathlib import Path
from typing import Any, Dict, Iterator
import csv
import json
import logging

from .errors import RecordSourceError

logger = logging.getLogger(__name__)

DELIMITERS = {".csv": ",", ".tsv": "\t", ".txt": "\t"}
JSONL_EXTENSIONS = {".jsonl", ".ndjson"}


def iter_records(path: Path, encoding: str = "utf-8") -> Iterator[Dict[str, Any]]:
    """Yield occurrence records from a delimited text or JSON lines file.

    ``.csv`` files are comma separated, ``.tsv`` and ``.txt`` (the Darwin Core
    Archive default) tab separated.  JSON lines that do not decode to an
    object are logged and skipped.

    Raises:
        RecordSourceError: if the file is missing or its suffix unsupported
    """
    if not path.exists():
        raise RecordSourceError("not_found", f"No such file: {path}")

    suffix = path.suffix.lower()
    if suffix in DELIMITERS:
        with path.open(newline="", encoding=encoding) as f:
            yield from csv.DictReader(f, delimiter=DELIMITERS[suffix])
        return

    if suffix in JSONL_EXTENSIONS:
        with path.open(encoding=encoding) as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as exc:
                    logger.warning("Skipping unreadable line %s of %s: %s", line_no, path, exc)
                    continue
                if not isinstance(record, dict):
                    logger.warning("Skipping line %s of %s: not a JSON object", line_no, path)
                    continue
                yield record
        return

    raise RecordSourceError(
        "unsupported_format",
        f"Cannot read {path.name}; expected one of "
        + ", ".join(sorted(set(DELIMITERS) | JSONL_EXTENSIONS)),
    )
