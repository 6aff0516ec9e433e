"""Column profiling: type tag, alignment and content width from sample rows."""

from __future__ import annotations

import json
import logging
import numbers
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)

FormatSpec = Union[str, Callable[[Any], str]]


class TypeTag(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TEXT = "text"
    DATETIME = "datetime"
    OTHER = "other"


class Alignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


_RIGHT_ALIGNED = {TypeTag.INTEGER, TypeTag.FLOAT, TypeTag.BOOLEAN}

_INTEGER_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_BOOLEANS = {"true", "false"}


@dataclass(frozen=True)
class ColumnOverride:
    """Per-column settings supplied by the caller."""

    format_spec: FormatSpec | None = None
    fixed_width: int | None = None
    auto_width: bool = False


@dataclass
class ColumnProfile:
    """Metadata inferred for one column; ``final_width`` is set by the planner."""

    name: str
    type_tag: TypeTag = TypeTag.TEXT
    alignment: Alignment = Alignment.LEFT
    content_max_width: int = 0
    format_spec: FormatSpec | None = None
    fixed_width: int | None = None
    auto_width: bool = False
    final_width: int | None = None


def value_kind(value: Any) -> TypeTag:
    """Classify a single non-null value.

    Strings that read as numbers or booleans (CSV cells, or values that were
    already formatted) take the tag of what they spell.
    """
    if isinstance(value, str):
        return _string_kind(value)
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Integral):
        return TypeTag.INTEGER
    if isinstance(value, numbers.Real):
        return TypeTag.FLOAT
    if isinstance(value, (datetime, date, time)):
        return TypeTag.DATETIME
    return TypeTag.OTHER


def _string_kind(text: str) -> TypeTag:
    if _INTEGER_RE.fullmatch(text):
        return TypeTag.INTEGER
    if _FLOAT_RE.fullmatch(text):
        return TypeTag.FLOAT
    if text.lower() in _BOOLEANS:
        return TypeTag.BOOLEAN
    return TypeTag.TEXT


def infer_type(values: Sequence[Any]) -> TypeTag:
    """Pick the type tag for a column from its non-null values.

    A single kind wins outright. Integers mixed with floats widen to float.
    Any other mix falls back to text, as does a column with no values.
    """
    kinds = {value_kind(v) for v in values}
    if len(kinds) == 1:
        return kinds.pop()
    if kinds and kinds <= {TypeTag.INTEGER, TypeTag.FLOAT}:
        return TypeTag.FLOAT
    return TypeTag.TEXT


def alignment_for(type_tag: TypeTag) -> Alignment:
    return Alignment.RIGHT if type_tag in _RIGHT_ALIGNED else Alignment.LEFT


def format_cell(value: Any, format_spec: FormatSpec | None = None) -> str:
    """Convert a cell value to display text."""
    if value is None:
        return ""
    if format_spec is not None:
        if callable(format_spec):
            return str(format_spec(value))
        return format(value, format_spec)
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


def profile_columns(
    rows: Sequence[Mapping[str, Any]],
    overrides: Mapping[str, ColumnOverride] | None = None,
) -> list[ColumnProfile]:
    """Build one profile per column of the first row.

    Later rows are read by column name; keys they add are ignored and keys they
    lack count as null.
    """
    if not rows:
        return []
    overrides = overrides or {}

    profiles = []
    for name in rows[0]:
        override = overrides.get(name, ColumnOverride())
        values = [row.get(name) for row in rows]
        present = [v for v in values if v is not None]
        type_tag = infer_type(present)
        shown = [format_cell(v, override.format_spec) for v in present]
        profiles.append(
            ColumnProfile(
                name=name,
                type_tag=type_tag,
                alignment=alignment_for(type_tag),
                content_max_width=max((len(s) for s in shown), default=0),
                format_spec=override.format_spec,
                fixed_width=override.fixed_width,
                auto_width=override.auto_width,
            )
        )

    unknown = set(overrides) - {p.name for p in profiles}
    if unknown:
        logger.debug("Ignoring overrides for unknown columns: %s", ", ".join(sorted(unknown)))
    return profiles
