"""TTY detection, terminal width and semantic color utilities."""

from __future__ import annotations

import os
import sys

from rich.console import Console

DEFAULT_WIDTH = 80


def is_tty() -> bool:
    """Check if stdout is connected to a terminal."""
    if os.getenv("TERMGRID_FORCE_TTY") == "1":
        return True
    return sys.stdout.isatty()


def should_use_color() -> bool:
    """Determine if color output should be used."""
    if os.getenv("NO_COLOR"):
        return False
    if os.getenv("CLICOLOR") == "0":
        return False
    if os.getenv("CLICOLOR_FORCE"):
        return True
    return is_tty()


def terminal_width() -> int:
    """Current terminal column count (honours ``COLUMNS``)."""
    try:
        return Console().size.width
    except OSError:
        return DEFAULT_WIDTH


def _colorize(text: str, code: str) -> str:
    if not should_use_color():
        return text
    return f"\033[{code}m{text}\033[0m"


def warning(msg: str) -> str:
    """Yellow exclamation for warning."""
    return _colorize(f"! {msg}", "0;33")
