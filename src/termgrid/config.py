"""Configuration resolution: flags -> env -> config file -> defaults."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from termgrid.formatters.decorate import Style

logger = logging.getLogger(__name__)

DEFAULT_HEADER_COLOR = "32"
DEFAULT_ELLIPSIS = "\u2026"
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "termgrid"
CONFIG_FILE = CONFIG_DIR / "config.toml"


@dataclass(frozen=True)
class Theme:
    """Colours and header decoration, resolved once per invocation."""

    header_color: str | None = DEFAULT_HEADER_COLOR
    row_color: str | None = None
    underline: bool = False
    header_styles: tuple[Style, ...] = ()
    ellipsis: str = DEFAULT_ELLIPSIS


@dataclass(frozen=True)
class TermgridConfig:
    """Resolved termgrid configuration; ``width`` of None means the terminal width."""

    theme: Theme = field(default_factory=Theme)
    width: int | None = None


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML config file, return empty dict if missing."""
    if not path.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib  # type: ignore[no-redef]
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        logger.warning("Failed to parse config file: %s", path)
        return {}


def _resolve(flag_value: Any, env_var: str, toml_value: Any, default: Any = None) -> Any:
    """Resolve a config value using the precedence chain."""
    if flag_value is not None:
        return flag_value
    env = os.getenv(env_var)
    if env:
        return env
    if toml_value is not None:
        return toml_value
    return default


def parse_color(value: Any) -> str | None:
    """Normalise a colour setting; ``none``/``off``/empty disable it."""
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in ("", "none", "off"):
        return None
    return text


def _width(value: Any) -> int | None:
    if value is None:
        return None
    try:
        width = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid width: %r", value)
        return None
    return width if width > 0 else None


def _styles(value: Any) -> tuple[Style, ...]:
    if not value:
        return ()
    names = value.split(",") if isinstance(value, str) else list(value)
    styles = []
    for name in names:
        try:
            styles.append(Style.parse(name))
        except ValueError as e:
            logger.warning("Ignoring header style: %s", e)
    return tuple(styles)


def resolve_config(
    *,
    width: int | None = None,
    header_color: str | None = None,
    row_color: str | None = None,
    underline: bool | None = None,
    header_styles: str | None = None,
    profile: str | None = None,
) -> TermgridConfig:
    """Resolve configuration from all sources.

    Resolution order: flags -> env vars -> config file -> defaults. The config
    file holds a ``[default]`` section and optional ``[profiles.<name>]``
    sections with the keys ``width``, ``header_color``, ``row_color``,
    ``underline``, ``header_styles`` and ``ellipsis``.
    """
    toml_data = _load_toml(CONFIG_FILE)

    profile_name = profile or os.getenv("TERMGRID_PROFILE", "default")
    if profile_name == "default":
        profile_data = toml_data.get("default", {})
    else:
        profile_data = toml_data.get("profiles", {}).get(profile_name, {})
        if not profile_data:
            logger.warning("Config profile not found: %s", profile_name)

    resolved_underline = _resolve(underline, "TERMGRID_UNDERLINE", profile_data.get("underline"), False)
    if isinstance(resolved_underline, str):
        resolved_underline = resolved_underline.lower() in ("1", "true", "yes", "on")

    theme = Theme(
        header_color=parse_color(
            _resolve(header_color, "TERMGRID_HEADER_COLOR", profile_data.get("header_color"), DEFAULT_HEADER_COLOR)
        ),
        row_color=parse_color(_resolve(row_color, "TERMGRID_ROW_COLOR", profile_data.get("row_color"))),
        underline=bool(resolved_underline),
        header_styles=_styles(
            _resolve(header_styles, "TERMGRID_HEADER_STYLES", profile_data.get("header_styles"))
        ),
        ellipsis=str(profile_data.get("ellipsis", DEFAULT_ELLIPSIS)) or DEFAULT_ELLIPSIS,
    )
    return TermgridConfig(
        theme=theme,
        width=_width(_resolve(width, "TERMGRID_WIDTH", profile_data.get("width"))),
    )
