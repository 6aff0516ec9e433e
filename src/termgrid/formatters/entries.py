"""Display entries for menus and dialogs built on rendered tables.

An entry is plain data tagged with its kind; the functions below turn it into
display text. The dialog engine that navigates these entries lives elsewhere
and only ever sees the resulting strings.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from termgrid.formatters.layout import RenderPlan
from termgrid.formatters.table import render_row

SUBMENU_MARKER = " >"
ACTION_MARKER = "* "


class EntryKind(str, Enum):
    ITEM = "item"
    ACTION = "action"
    ROW = "row"
    SUBMENU = "submenu"


@dataclass(frozen=True)
class Entry:
    """A selectable line: ``value`` holds the row mapping for ``ROW`` entries."""

    kind: EntryKind
    label: str = ""
    value: Any = None
    children: tuple[Entry, ...] = ()


def item(label: str, value: Any = None) -> Entry:
    return Entry(EntryKind.ITEM, label, value)


def action(label: str, value: Any = None) -> Entry:
    return Entry(EntryKind.ACTION, label, value)


def row(values: Mapping[str, Any], label: str = "") -> Entry:
    return Entry(EntryKind.ROW, label, dict(values))


def submenu(label: str, children: Sequence[Entry]) -> Entry:
    return Entry(EntryKind.SUBMENU, label, children=tuple(children))


def entry_text(entry: Entry, plan: RenderPlan | None = None) -> str:
    """Display text for one entry."""
    if entry.kind is EntryKind.ITEM:
        return entry.label
    if entry.kind is EntryKind.ACTION:
        return ACTION_MARKER + entry.label
    if entry.kind is EntryKind.SUBMENU:
        return entry.label + SUBMENU_MARKER
    if entry.kind is EntryKind.ROW:
        if plan is None:
            raise ValueError("row entries need a render plan")
        return render_row(plan, entry.value or {})
    raise ValueError(f"unknown entry kind: {entry.kind!r}")


def entry_lines(entries: Sequence[Entry], plan: RenderPlan | None = None) -> list[str]:
    return [entry_text(e, plan) for e in entries]
