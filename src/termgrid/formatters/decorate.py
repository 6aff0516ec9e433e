"""ANSI range decoration: paired style markers at character offsets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

ESC = "\033"
RESET = f"{ESC}[0m"


class OutOfRangeError(IndexError):
    """Raised when a decoration offset falls outside the target string."""


class Style(Enum):
    """Range styles in their fixed emission order."""

    UNDERLINE = ("4", "24")
    BOLD = ("1", "22")
    ITALIC = ("3", "23")
    BLINK = ("5", "25")

    @property
    def start(self) -> str:
        return f"{ESC}[{self.value[0]}m"

    @property
    def end(self) -> str:
        return f"{ESC}[{self.value[1]}m"

    @classmethod
    def parse(cls, name: str) -> Style:
        """Look up a style by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"unknown style {name!r} (expected one of: {valid})") from None


_ORDER = list(Style)


@dataclass(frozen=True)
class DecorationRange:
    """Half-open span ``[start, end)`` plus the styles to apply to it."""

    start: int
    end: int
    styles: tuple[Style, ...] = ()


def markers(styles: Iterable[Style], *, nested: bool = False) -> tuple[str, str]:
    """Build the (start, end) marker strings for a set of styles.

    Markers always follow the declared style order. End markers use that same
    order unless ``nested`` is set, in which case they close in reverse.
    """
    wanted = set(styles)
    ordered = [s for s in _ORDER if s in wanted]
    start = "".join(s.start for s in ordered)
    closing = reversed(ordered) if nested else ordered
    return start, "".join(s.end for s in closing)


def _validate(text: str, ranges: Sequence[DecorationRange]) -> None:
    length = len(text)
    for rng in ranges:
        if rng.start < 0 or rng.end > length or rng.start > rng.end:
            raise OutOfRangeError(f"range [{rng.start}, {rng.end}) is outside a string of length {length}")


def decorate(text: str, ranges: Sequence[DecorationRange], *, nested: bool = False) -> str:
    """Insert style markers for every range in a single left-to-right pass.

    All offsets refer to the undecorated ``text``. Ranges are expected not to
    overlap. When a range ends exactly where another starts, the end marker is
    emitted first. A zero-width range emits its start and end markers back to
    back.
    """
    _validate(text, ranges)

    # (offset, rank, range index, marker); rank 0 closes non-empty ranges first
    events: list[tuple[int, int, int, str]] = []
    for index, rng in enumerate(ranges):
        start, end = markers(rng.styles, nested=nested)
        if not start:
            continue
        if rng.start == rng.end:
            events.append((rng.start, 1, index, start + end))
        else:
            events.append((rng.start, 1, index, start))
            events.append((rng.end, 0, index, end))

    if not events:
        return text

    events.sort(key=lambda e: e[:3])
    parts: list[str] = []
    cursor = 0
    for offset, _rank, _index, marker in events:
        parts.append(text[cursor:offset])
        parts.append(marker)
        cursor = offset
    parts.append(text[cursor:])
    return "".join(parts)


def decorate_range(text: str, start: int, end: int, styles: Iterable[Style], *, nested: bool = False) -> str:
    """Decorate the half-open span ``[start, end)`` of ``text``."""
    return decorate(text, [DecorationRange(start, end, tuple(styles))], nested=nested)


def decorate_at(text: str, position: int, styles: Iterable[Style], *, nested: bool = False) -> str:
    """Decorate the single character at ``position``."""
    if position < 0 or position >= len(text):
        raise OutOfRangeError(f"position {position} is outside a string of length {len(text)}")
    return decorate_range(text, position, position + 1, styles, nested=nested)


def strip_styles(text: str, styles: Iterable[Style] = tuple(Style)) -> str:
    """Remove the start and end markers of ``styles`` from ``text``."""
    for style in styles:
        text = text.replace(style.start, "").replace(style.end, "")
    return text


def colorize_line(text: str, color: int | str | None) -> str:
    """Wrap a whole line in a colour marker and a reset, or return it as is."""
    if color is None or color == "":
        return text
    return f"{ESC}[{color}m{text}{RESET}"
