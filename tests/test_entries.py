"""Tests for tagged display entries."""

from __future__ import annotations

import pytest

from termgrid.formatters import entries
from termgrid.formatters.entries import Entry, EntryKind, entry_lines, entry_text
from termgrid.formatters.layout import plan_layout
from termgrid.formatters.profile import profile_columns

ROWS = [{"Name": "Server1", "CPU": 45.5}, {"Name": "Server2", "CPU": 78.234}]


class TestConstructors:
    """Test the entry helper constructors."""

    def test_kinds(self):
        """Test each helper tags its entry."""
        assert entries.item("Open").kind is EntryKind.ITEM
        assert entries.action("Quit").kind is EntryKind.ACTION
        assert entries.row({"a": 1}).kind is EntryKind.ROW
        assert entries.submenu("More", []).kind is EntryKind.SUBMENU

    def test_submenu_children(self):
        """Test submenu children are stored as a tuple."""
        child = entries.item("x")
        assert entries.submenu("More", [child]).children == (child,)

    def test_row_copies_values(self):
        """Test row entries keep their own copy of the mapping."""
        values = {"a": 1}
        entry = entries.row(values)
        values["a"] = 2
        assert entry.value == {"a": 1}


class TestEntryText:
    """Test dispatch on the entry tag."""

    def test_item(self):
        """Test items render as their label."""
        assert entry_text(entries.item("Open")) == "Open"

    def test_action(self):
        """Test actions carry the action marker."""
        assert entry_text(entries.action("Quit")) == "* Quit"

    def test_submenu(self):
        """Test submenus carry the submenu marker."""
        assert entry_text(entries.submenu("More", [])) == "More >"

    def test_row_uses_plan(self):
        """Test row entries render like table rows."""
        plan = plan_layout(profile_columns(ROWS), 40)
        assert entry_text(entries.row(ROWS[0]), plan) == "Server1   45.5"

    def test_row_without_plan(self):
        """Test row entries need a plan."""
        with pytest.raises(ValueError, match="render plan"):
            entry_text(entries.row(ROWS[0]))

    def test_entry_lines(self):
        """Test a mixed list renders in order."""
        plan = plan_layout(profile_columns(ROWS), 40)
        lines = entry_lines(
            [entries.row(ROWS[1]), Entry(EntryKind.ITEM, "Refresh"), entries.action("Back")],
            plan,
        )
        assert lines == ["Server2 78.234", "Refresh", "* Back"]
