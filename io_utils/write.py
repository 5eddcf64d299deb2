from pathlib import Path
from typing import Iterable, Dict, Any
import csv
import json

from dwc.schema import INTERPRETED_TERMS

# Interpreted terms plus the flag column written by the CSV writer
CSV_COLUMNS = INTERPRETED_TERMS + ["flags"]


def write_manifest(output_dir: Path, meta: Dict[str, Any]) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = output_dir / "manifest.json"
    manifest_path.write_text(json.dumps(meta, indent=2), encoding="utf-8")


def write_interpreted_csv(
    output_dir: Path, rows: Iterable[Dict[str, Any]], append: bool = False
) -> int:
    """Write interpreted records to ``interpreted.csv``; returns the row count.

    List values (``issues``) are joined with ``;`` and ``None`` becomes an
    empty cell.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / "interpreted.csv"
    file_exists = csv_path.exists()
    mode = "a" if append and file_exists else "w"
    count = 0
    with csv_path.open(mode, newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        if not file_exists or mode == "w":
            writer.writeheader()
        for row in rows:
            writer.writerow({k: _cell(row.get(k)) for k in CSV_COLUMNS})
            count += 1
    return count


def write_jsonl(output_dir: Path, rows: Iterable[Dict[str, Any]], append: bool = False) -> int:
    """Write ``rows`` to ``interpreted.jsonl``; returns the row count."""
    output_dir.mkdir(parents=True, exist_ok=True)
    jsonl_path = output_dir / "interpreted.jsonl"
    mode = "a" if append and jsonl_path.exists() else "w"
    count = 0
    with jsonl_path.open(mode, encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row) + "\n")
            count += 1
    return count


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ";".join(str(v) for v in value)
    return str(value)
