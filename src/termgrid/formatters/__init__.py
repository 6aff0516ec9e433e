"""Rendering pipeline: profile columns, plan widths, render and decorate lines."""

from termgrid.formatters.decorate import (
    DecorationRange,
    OutOfRangeError,
    Style,
    colorize_line,
    decorate,
    decorate_at,
    decorate_range,
    strip_styles,
)
from termgrid.formatters.entries import Entry, EntryKind, entry_lines, entry_text
from termgrid.formatters.header import HeaderWord, decorate_header_words, extract_words
from termgrid.formatters.layout import RenderPlan, plan_layout
from termgrid.formatters.profile import (
    Alignment,
    ColumnOverride,
    ColumnProfile,
    TypeTag,
    format_cell,
    profile_columns,
)
from termgrid.formatters.table import HeaderOptions, fit_cell, render_header, render_row, render_table, write_table

__all__ = [
    "Alignment",
    "ColumnOverride",
    "ColumnProfile",
    "DecorationRange",
    "Entry",
    "EntryKind",
    "HeaderOptions",
    "HeaderWord",
    "OutOfRangeError",
    "RenderPlan",
    "Style",
    "TypeTag",
    "colorize_line",
    "decorate",
    "decorate_at",
    "decorate_header_words",
    "decorate_range",
    "entry_lines",
    "entry_text",
    "extract_words",
    "fit_cell",
    "format_cell",
    "plan_layout",
    "profile_columns",
    "render_header",
    "render_row",
    "render_table",
    "strip_styles",
    "write_table",
]
