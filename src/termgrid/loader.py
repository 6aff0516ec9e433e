"""Read table rows from JSON, JSON Lines or CSV input."""

from __future__ import annotations

import csv
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any

from termgrid._exit_codes import BAD_INPUT, NOT_FOUND

logger = logging.getLogger(__name__)

FORMATS = ("json", "jsonl", "csv")
_SUFFIXES = {".json": "json", ".jsonl": "jsonl", ".ndjson": "jsonl", ".csv": "csv"}


class RowsError(Exception):
    """Raised when input rows cannot be read."""

    def __init__(self, message: str, exit_code: int = BAD_INPUT) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def detect_format(source: str, text: str) -> str:
    """Guess the input format from the file suffix, then from the content."""
    suffix = Path(source).suffix.lower()
    if suffix in _SUFFIXES:
        return _SUFFIXES[suffix]
    stripped = text.lstrip()
    if stripped.startswith("["):
        return "json"
    if stripped.startswith("{"):
        return "jsonl"
    return "csv"


def parse_rows(text: str, fmt: str) -> list[dict[str, Any]]:
    """Parse ``text`` in format ``fmt`` into a list of records."""
    if fmt == "csv":
        return [dict(r) for r in csv.DictReader(io.StringIO(text))]

    try:
        if fmt == "json":
            data = json.loads(text) if text.strip() else []
            if isinstance(data, dict):
                data = [data]
        elif fmt == "jsonl":
            data = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            raise RowsError(f"unknown input format: {fmt} (expected one of: {', '.join(FORMATS)})")
    except json.JSONDecodeError as e:
        raise RowsError(f"invalid {fmt} input: {e}") from None

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise RowsError("input must be a list of objects")
    return data


def load_rows(source: str = "-", fmt: str | None = None) -> list[dict[str, Any]]:
    """Load rows from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            raise RowsError(f"no such file: {source}", exit_code=NOT_FOUND)
        text = path.read_text(encoding="utf-8")

    fmt = fmt or detect_format(source, text)
    rows = parse_rows(text, fmt)
    logger.debug("Loaded %d rows from %s as %s", len(rows), source, fmt)
    return rows
