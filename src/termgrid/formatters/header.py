"""Recover header word spans from an already-rendered header block.

Only the text is available here, so word boundaries are read off the dash row
under the header. Cell content that happens to look like ``"- "`` or ``" -"``
next to the header will confuse the scan; that is a known limitation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from termgrid.formatters.decorate import DecorationRange, Style, colorize_line, decorate

# Tried in order at each position; matches never overlap.
_BOUNDARY_RE = re.compile(
    r"(?P<pair>(?<![^ \n])- (?=-(?:[ \n]|$)))"  # "- -": two one-character words
    r"|(?P<start> (?=-))"  # space before a dash: a word starts
    r"|(?P<end>-(?=[ \n]|$))"  # dash before a space, newline or end: a word ends
)


@dataclass(frozen=True)
class HeaderWord:
    text: str
    start: int
    end: int


def _boundaries(underline_line: str) -> list[int]:
    offsets = [0] if underline_line.startswith("-") else []
    for match in _BOUNDARY_RE.finditer(underline_line):
        pos = match.start()
        if match.group("pair") is not None:
            offsets.extend((pos + 1, pos + 2))
        else:
            offsets.append(pos + 1)
    return offsets


def extract_words(header_line: str, underline_line: str) -> list[HeaderWord]:
    """Split ``header_line`` into words using the dash runs of ``underline_line``.

    Each word's ``start``/``end`` pair slices it out of ``header_line``.
    """
    offsets = _boundaries(underline_line)
    return [
        HeaderWord(header_line[start:end], start, end)
        for start, end in zip(offsets[0::2], offsets[1::2])
    ]


def decorate_header_words(
    header_line: str,
    underline_line: str,
    styles: Iterable[Style],
    color: int | str | None = None,
) -> str:
    """Style every recovered header word, then apply the line colour."""
    styles = tuple(styles)
    words = extract_words(header_line, underline_line)
    size = len(header_line)
    line = decorate(header_line, [DecorationRange(min(w.start, size), min(w.end, size), styles) for w in words])
    return colorize_line(line, color)
