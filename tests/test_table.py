"""Tests for header and row rendering."""

from __future__ import annotations

import io

import pytest

from termgrid.formatters.decorate import Style, strip_styles
from termgrid.formatters.layout import plan_layout
from termgrid.formatters.profile import Alignment, ColumnOverride, profile_columns
from termgrid.formatters.table import (
    ELLIPSIS,
    HeaderOptions,
    fit_cell,
    render_header,
    render_row,
    render_table,
    write_table,
)

SERVERS = [
    {"Name": "Server1", "CPU": 45.5},
    {"Name": "Server2", "CPU": 78.234},
]


def _plan(rows, width=40, overrides=None):
    return plan_layout(profile_columns(rows, overrides), width)


class TestFitCell:
    """Test padding and ellipsis truncation of a single cell."""

    @pytest.mark.parametrize("width", [1, 2, 5, 8, 12])
    @pytest.mark.parametrize("value", ["", "a", "hello", "hello world"])
    def test_exact_width(self, value, width):
        """Test every fitted cell is exactly the column width."""
        cell = fit_cell(value, width)
        assert len(cell) == width
        if len(value) > width:
            assert cell == value[: width - 1] + ELLIPSIS
        else:
            assert cell.rstrip() == value

    def test_right_alignment(self):
        """Test right alignment pads on the left."""
        assert fit_cell("45.5", 6, Alignment.RIGHT) == "  45.5"

    def test_left_alignment(self):
        """Test left alignment pads on the right."""
        assert fit_cell("ab", 4, Alignment.LEFT) == "ab  "

    def test_truncation_ignores_alignment(self):
        """Test truncated cells look the same whatever the alignment."""
        assert fit_cell("abcdef", 4, Alignment.RIGHT) == "abc" + ELLIPSIS

    def test_width_one(self):
        """Test a one-character column shows only the ellipsis on overflow."""
        assert fit_cell("abc", 1) == ELLIPSIS

    def test_width_zero(self):
        """Test a zero-width column renders empty."""
        assert fit_cell("abc", 0) == ""

    def test_custom_ellipsis(self):
        """Test a different ellipsis glyph."""
        assert fit_cell("abcdef", 4, ellipsis="~") == "abc~"


class TestRenderHeader:
    """Test header rendering."""

    def test_server_header(self):
        """Test name padded left and CPU padded right, joined by one space."""
        plan = _plan(SERVERS)
        assert plan.widths == [7, 6]
        assert render_header(plan) == ["Name   " + " " + "   CPU"]

    def test_color_wrapper(self):
        """Test the whole header line is coloured and reset."""
        lines = render_header(_plan(SERVERS), HeaderOptions(color=32))
        assert lines == ["\x1b[32mName       CPU\x1b[0m"]

    def test_underline_row(self):
        """Test the dash row uses name-length dashes padded to the width."""
        lines = render_header(_plan(SERVERS), HeaderOptions(underline=True))
        assert lines[1] == "----   " + " " + "---   "
        assert len(lines[1]) == len(lines[0])

    def test_underline_row_colored(self):
        """Test the dash row carries the header colour too."""
        lines = render_header(_plan(SERVERS), HeaderOptions(color="1;36", underline=True))
        assert lines[1].startswith("\x1b[1;36m----")
        assert lines[1].endswith("\x1b[0m")

    def test_word_styles_inside_color(self):
        """Test per-word styles are applied before the colour wrapper."""
        lines = render_header(_plan(SERVERS), HeaderOptions(color=33, word_styles=(Style.UNDERLINE,)))
        assert lines == ["\x1b[33m\x1b[4mName\x1b[24m       \x1b[4mCPU\x1b[24m\x1b[0m"]

    def test_word_styles_follow_alignment(self):
        """Test word spans come from the plan, including right-aligned names."""
        (line,) = render_header(_plan(SERVERS), HeaderOptions(word_styles=(Style.BOLD,)))
        assert strip_styles(line) == "Name       CPU"
        assert line.index("\x1b[1mCPU") == len("\x1b[1mName\x1b[22m") + 7

    def test_narrow_auto_column_truncates_name(self):
        """Test a header name wider than its auto column is truncated."""
        rows = [{"id": 1, "description": "a long description"}]
        plan = _plan(rows, width=10, overrides={"description": ColumnOverride(auto_width=True)})
        (line,) = render_header(plan)
        assert plan.widths == [2, 7]
        assert line == "id descri" + ELLIPSIS


class TestRenderRow:
    """Test data row rendering."""

    def test_server_rows(self):
        """Test alignment of text and numbers."""
        plan = _plan(SERVERS)
        assert render_row(plan, SERVERS[0]) == "Server1   45.5"
        assert render_row(plan, SERVERS[1]) == "Server2 78.234"

    def test_missing_field_blank(self):
        """Test a row lacking a column renders an empty cell."""
        plan = _plan(SERVERS)
        assert render_row(plan, {"Name": "Server3"}) == "Server3       "

    def test_format_spec_applied(self):
        """Test format specs are used for display as well as width."""
        plan = _plan(SERVERS, overrides={"CPU": ColumnOverride(format_spec=".1f")})
        assert render_row(plan, SERVERS[1]) == "Server2 78.2"

    def test_truncation(self):
        """Test overflowing cells are cut with an ellipsis."""
        rows = [{"k": "x", "msg": "a" * 30}]
        plan = _plan(rows, width=12, overrides={"msg": ColumnOverride(auto_width=True)})
        line = render_row(plan, rows[0])
        assert line == "x " + "a" * 9 + ELLIPSIS
        assert len(line) == 12

    def test_zero_width_auto_column(self):
        """Test a degenerate auto column renders as empty cells."""
        rows = [{"name": "n" * 20, "msg": "hello"}]
        plan = _plan(rows, width=5, overrides={"msg": ColumnOverride(auto_width=True)})
        assert render_row(plan, rows[0]) == "n" * 20 + " "

    def test_row_color(self):
        """Test the row colour wraps the whole line."""
        line = render_row(_plan(SERVERS), SERVERS[0], color=90)
        assert line == "\x1b[90mServer1   45.5\x1b[0m"


class TestRenderTable:
    """Test the full profile, plan and render pipeline."""

    def test_plain_lines(self):
        """Test rendering without colour returns plain strings."""
        lines = render_table(SERVERS, width=40)
        assert lines == ["Name       CPU", "Server1   45.5", "Server2 78.234"]

    def test_with_underline(self):
        """Test the dash row sits between header and data."""
        lines = render_table(SERVERS, width=40, header=HeaderOptions(underline=True))
        assert lines[1] == "----    ---   "
        assert len(lines) == 4

    def test_empty(self):
        """Test no rows renders nothing."""
        assert render_table([], width=40) == []

    def test_lines_fit_target_with_auto(self):
        """Test every line is exactly the target width when an auto column shrinks."""
        rows = [{"id": i, "text": "word " * 20} for i in range(3)]
        lines = render_table(rows, width=30, overrides={"text": ColumnOverride(auto_width=True)})
        assert all(len(line) == 30 for line in lines)

    def test_write_table(self):
        """Test lines are written newline-terminated to the stream."""
        stream = io.StringIO()
        write_table(SERVERS, width=40, stream=stream)
        assert stream.getvalue() == "Name       CPU\nServer1   45.5\nServer2 78.234\n"

    def test_write_table_stdout(self, capsys):
        """Test stdout is the default stream."""
        write_table(SERVERS, width=40, row_color=31)
        captured = capsys.readouterr()
        assert "\x1b[31mServer1   45.5\x1b[0m" in captured.out
