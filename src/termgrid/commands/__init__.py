"""Shared command infrastructure."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import typer

from termgrid._exit_codes import OUT_OF_RANGE
from termgrid.formatters.decorate import OutOfRangeError
from termgrid.loader import RowsError

if TYPE_CHECKING:
    from termgrid.config import TermgridConfig
    from termgrid.output import OutputContext


@contextmanager
def command_context(operation: str = "") -> Generator[tuple[TermgridConfig, OutputContext], None, None]:
    """Shared context for all commands: resolved state + error handling.

    Args:
        operation: Human-readable label for error messages (e.g. "rendering table").
    """
    from termgrid.main import state

    output = state.output
    prefix = f"{operation}: " if operation else ""
    try:
        yield state.config, output
    except RowsError as e:
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(e.exit_code) from None
    except OutOfRangeError as e:
        output.error(f"error: {prefix}{e}")
        raise typer.Exit(OUT_OF_RANGE) from None
