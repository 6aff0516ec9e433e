"""Table rendering: header and row lines from a planned layout."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from termgrid.formatters.decorate import DecorationRange, Style, colorize_line, decorate
from termgrid.formatters.layout import RenderPlan, plan_layout
from termgrid.formatters.profile import Alignment, ColumnOverride, format_cell, profile_columns

ELLIPSIS = "\u2026"


@dataclass(frozen=True)
class HeaderOptions:
    """How to draw the header block."""

    color: int | str | None = None
    underline: bool = False
    word_styles: tuple[Style, ...] = ()
    ellipsis: str = ELLIPSIS


def fit_cell(text: str, width: int, alignment: Alignment = Alignment.LEFT, ellipsis: str = ELLIPSIS) -> str:
    """Pad or truncate ``text`` to exactly ``width`` characters."""
    if width <= 0:
        return ""
    if len(text) > width:
        return text[: width - 1] + ellipsis
    if alignment is Alignment.RIGHT:
        return text.rjust(width)
    return text.ljust(width)


def render_header(plan: RenderPlan, options: HeaderOptions | None = None) -> list[str]:
    """Render the header line, plus a dash row when ``options.underline`` is set."""
    options = options or HeaderOptions()
    cells = [fit_cell(c.name, c.final_width or 0, c.alignment, options.ellipsis) for c in plan.columns]
    line = " ".join(cells)

    if options.word_styles:
        ranges = []
        for cell, (start, _end) in zip(cells, plan.spans()):
            word = cell.strip()
            if word:
                offset = start + cell.index(word)
                ranges.append(DecorationRange(offset, offset + len(word), options.word_styles))
        line = decorate(line, ranges)

    lines = [colorize_line(line, options.color)]
    if options.underline:
        dashes = []
        for column in plan.columns:
            width = column.final_width or 0
            dashes.append(("-" * len(column.name))[:width].ljust(width))
        lines.append(colorize_line(" ".join(dashes), options.color))
    return lines


def render_row(
    plan: RenderPlan,
    row: Mapping[str, Any],
    color: int | str | None = None,
    ellipsis: str = ELLIPSIS,
) -> str:
    """Render one data row; columns missing from ``row`` come out blank."""
    cells = []
    for column in plan.columns:
        text = format_cell(row.get(column.name), column.format_spec)
        cells.append(fit_cell(text, column.final_width or 0, column.alignment, ellipsis))
    return colorize_line(" ".join(cells), color)


def render_table(
    rows: Sequence[Mapping[str, Any]],
    *,
    width: int,
    overrides: Mapping[str, ColumnOverride] | None = None,
    header: HeaderOptions | None = None,
    row_color: int | str | None = None,
) -> list[str]:
    """Profile, plan and render ``rows`` into a list of lines."""
    if not rows:
        return []
    header = header or HeaderOptions()
    plan = plan_layout(profile_columns(rows, overrides), width)
    lines = render_header(plan, header)
    lines.extend(render_row(plan, row, row_color, header.ellipsis) for row in rows)
    return lines


def write_table(
    rows: Sequence[Mapping[str, Any]],
    *,
    width: int,
    stream: TextIO | None = None,
    **kwargs: Any,
) -> None:
    """Render ``rows`` and write the lines to ``stream`` (stdout by default)."""
    out = stream or sys.stdout
    for line in render_table(rows, width=width, **kwargs):
        out.write(line + "\n")
