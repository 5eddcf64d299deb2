from .errors import RecordSourceError
from .logs import JSONFormatter, get_logger, setup_logging
from .read import iter_records
from .write import write_interpreted_csv, write_jsonl, write_manifest

__all__ = [
    "RecordSourceError",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
    "iter_records",
    "write_interpreted_csv",
    "write_jsonl",
    "write_manifest",
]
