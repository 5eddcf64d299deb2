from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional
import tomllib

import typer

from dwc import interpret, interpret_records
from io_utils import (
    RecordSourceError,
    get_logger,
    iter_records,
    setup_logging,
    write_interpreted_csv,
    write_jsonl,
    write_manifest,
)

OUTPUT_FORMATS = ("jsonl", "csv")

logger = get_logger(__name__)


def load_config(config_path: Optional[Path]) -> Dict[str, Any]:
    cfg_path = resources.files("config").joinpath("config.default.toml")
    with cfg_path.open("rb") as f:
        config = tomllib.load(f)
    if config_path:
        with config_path.open("rb") as f:
            user_cfg = tomllib.load(f)
        _deep_update(config, user_cfg)
    return config


def _deep_update(d: Dict[str, Any], u: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in u.items():
        if isinstance(v, dict) and isinstance(d.get(k), dict):
            _deep_update(d[k], v)
        else:
            d[k] = v
    return d


def _tally(rows: Iterable[Dict[str, Any]], issues: Counter, states: Counter) -> Iterator[Dict[str, Any]]:
    for row in rows:
        issues.update(row["issues"])
        states[row["state"]] += 1
        yield row


def interpret_cli(
    input_path: Path,
    output: Path,
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
) -> Dict[str, Any]:
    """Interpret every record of ``input_path`` and write the results.

    Returns the run metadata that is also written to ``manifest.json``.

    Raises:
        RecordSourceError: if the input file cannot be read
        ValueError: if the output format is unknown
    """
    cfg = load_config(config)
    log_cfg = cfg.get("logging", {})
    setup_logging(output, level=log_cfg.get("level", "INFO"), json_format=log_cfg.get("json", False))

    output_format = output_format or cfg.get("output", {}).get("format", "jsonl")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {output_format!r}; use one of {', '.join(OUTPUT_FORMATS)}")

    run_id = datetime.now(timezone.utc).isoformat()
    encoding = cfg.get("input", {}).get("encoding", "utf-8")
    issue_counts: Counter = Counter()
    state_counts: Counter = Counter()
    rows = _tally(interpret_records(iter_records(input_path, encoding=encoding)), issue_counts, state_counts)

    if output_format == "csv":
        count = write_interpreted_csv(output, rows)
    else:
        count = write_jsonl(output, rows)

    meta = {
        "run_id": run_id,
        "input": str(input_path),
        "output_format": output_format,
        "records": count,
        "issues": dict(sorted(issue_counts.items())),
        "states": dict(sorted(state_counts.items())),
    }
    write_manifest(output, meta)
    logger.info(
        "Interpreted %d records from %s. Output written to %s | issues: %s",
        count,
        input_path,
        output,
        ", ".join(f"{k}={v}" for k, v in meta["issues"].items()) or "none",
    )
    return meta


app = typer.Typer(help="Darwin Core occurrence date interpreter")


@app.command("interpret")
def interpret_command(
    input: Path = typer.Option(
        ...,
        "--input",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Occurrence file (.csv, .tsv, .txt or .jsonl)",
    ),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        file_okay=False,
        dir_okay=True,
        help="Output directory",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Optional config file",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: jsonl or csv (default from config)",
    ),
) -> None:
    """Interpret the dates of every record in an occurrence file."""
    try:
        meta = interpret_cli(input, output, config, output_format)
    except (RecordSourceError, ValueError) as e:
        typer.echo(f"❌ Interpretation failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✅ Interpreted {meta['records']} records")
    typer.echo(f"📄 Output written to: {output}")
    for issue, count in meta["issues"].items():
        typer.echo(f"⚠️  {issue}: {count}")


@app.command("parse")
def parse_command(
    year: Optional[str] = typer.Option(None, "--year", help="Verbatim year"),
    month: Optional[str] = typer.Option(None, "--month", help="Verbatim month"),
    day: Optional[str] = typer.Option(None, "--day", help="Verbatim day"),
    event_date: Optional[str] = typer.Option(None, "--event-date", "-e", help="Verbatim eventDate"),
) -> None:
    """Interpret a single set of date terms and print the result as JSON."""
    result = interpret(year, month, day, event_date)
    typer.echo(json.dumps(result.to_dict(), indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
