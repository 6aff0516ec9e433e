"""Output manager: --json, --plain, TTY-aware colour and status messages."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from termgrid._tty import should_use_color


@dataclass
class OutputContext:
    """Manages where rendered lines go and whether they carry colour.

    - TTY: coloured lines as rendered
    - Non-TTY or --plain: the same lines without colour markers
    - --json: JSON output, optionally filtered to specific fields
    - --quiet: Suppress status messages, keep results and errors
    """

    json_fields: list[str] | None = None
    quiet: bool = False
    force_json: bool = False
    plain: bool = False
    _use_color: bool = field(default_factory=should_use_color)

    @property
    def is_json_mode(self) -> bool:
        """Check if JSON output is requested."""
        return self.force_json or self.json_fields is not None

    @property
    def use_color(self) -> bool:
        """Check if rendered lines should keep their colour markers."""
        return self._use_color and not self.plain

    def render_lines(self, lines: Sequence[str], data: Any = None) -> None:
        """Write rendered lines, or ``data`` (default: the lines) in JSON mode."""
        if self.is_json_mode:
            self.render_json(list(lines) if data is None else data)
            return

        if not lines:
            self.status("No results found.")
            return

        for line in lines:
            sys.stdout.write(line + "\n")

    def render_json(self, data: Any) -> None:
        """Render JSON output with optional field filtering."""
        items = data if isinstance(data, list) else [data]
        if self.json_fields:
            items = [_pick_fields(item, self.json_fields) if isinstance(item, dict) else item for item in items]
        sys.stdout.write(json.dumps(items, indent=2, default=str) + "\n")

    def status(self, msg: str) -> None:
        """Print a status message (suppressed in --quiet mode)."""
        if not self.quiet:
            sys.stderr.write(f"{msg}\n")

    def error(self, msg: str) -> None:
        """Print an error message (always shown)."""
        sys.stderr.write(f"{msg}\n")


def _pick_fields(item: dict[str, Any], fields: Sequence[str]) -> dict[str, Any]:
    """Pick specified fields from a dict."""
    return {f: _deep_get(item, f) for f in fields}


def _deep_get(data: dict[str, Any], key: str) -> Any:
    """Get a value from a nested dict using dot notation."""
    keys = key.split(".")
    result: Any = data
    for k in keys:
        if isinstance(result, dict):
            result = result.get(k)
        else:
            return None
    return result
