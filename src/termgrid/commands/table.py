"""Table rendering command."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import typer

from termgrid._tty import terminal_width, warning
from termgrid.commands import command_context
from termgrid.config import Theme, parse_color
from termgrid.formatters.decorate import Style
from termgrid.formatters.profile import ColumnOverride, format_cell
from termgrid.formatters.table import HeaderOptions, render_table
from termgrid.loader import FORMATS, load_rows


def _parse_pairs(values: list[str] | None, option: str) -> dict[str, str]:
    """Split repeated ``COL=VALUE`` options into a dict."""
    pairs = {}
    for item in values or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected COL=VALUE, got {item!r}", param_hint=option)
        pairs[name] = value
    return pairs


def build_overrides(
    formats: list[str] | None,
    fixed: list[str] | None,
    auto: str | None,
) -> dict[str, ColumnOverride]:
    """Merge the per-column CLI options into one override per column."""
    format_specs = _parse_pairs(formats, "--format")
    fixed_widths = {}
    for name, value in _parse_pairs(fixed, "--fixed").items():
        try:
            fixed_widths[name] = int(value)
        except ValueError:
            raise typer.BadParameter(f"width for {name!r} must be an integer", param_hint="--fixed") from None

    names = set(format_specs) | set(fixed_widths) | ({auto} if auto else set())
    return {
        name: ColumnOverride(
            format_spec=format_specs.get(name),
            fixed_width=fixed_widths.get(name),
            auto_width=name == auto,
        )
        for name in names
    }


def _select(rows: list[dict[str, Any]], columns: str | None) -> list[dict[str, Any]]:
    if not columns:
        return rows
    names = [c.strip() for c in columns.split(",") if c.strip()]
    return [{name: row.get(name) for name in names} for row in rows]


def _check_formats(rows: list[dict[str, Any]], overrides: dict[str, ColumnOverride]) -> None:
    """Apply each ``--format`` spec to its column; raises what ``format()`` raises."""
    for name, override in overrides.items():
        if override.format_spec is None:
            continue
        for row in rows:
            format_cell(row.get(name), override.format_spec)


def _theme(
    base: Theme,
    use_color: bool,
    *,
    underline: bool | None = None,
    header_styles: tuple[Style, ...] | None = None,
    header_color: str | None = None,
    row_color: str | None = None,
) -> Theme:
    """Apply command-line overrides to the configured theme."""
    theme = base
    if underline is not None:
        theme = replace(theme, underline=underline)
    if header_styles is not None:
        theme = replace(theme, header_styles=header_styles)
    # "none" on the command line clears a configured colour
    if header_color is not None:
        theme = replace(theme, header_color=parse_color(header_color))
    if row_color is not None:
        theme = replace(theme, row_color=parse_color(row_color))
    if not use_color:
        theme = replace(theme, header_color=None, row_color=None, header_styles=())
    return theme


def render_table_command(
    source: str = typer.Argument("-", help="Input file, or - for stdin."),
    input_format: str | None = typer.Option(
        None, "--input-format", "-f", help=f"Input format ({', '.join(FORMATS)}); guessed when omitted."
    ),
    columns: str | None = typer.Option(None, "--columns", "-c", help="Columns to show, in order (comma-separated)."),
    auto: str | None = typer.Option(None, "--auto", help="Column that absorbs the remaining width."),
    formats: list[str] | None = typer.Option(None, "--format", help="Format spec per column, e.g. cpu=.1f."),
    fixed: list[str] | None = typer.Option(None, "--fixed", help="Fixed width per column, e.g. name=12."),
    underline: bool | None = typer.Option(None, "--underline/--no-underline", help="Draw a dash row under the header."),
    header_style: list[str] | None = typer.Option(
        None, "--header-style", help="Style header words (underline, bold, italic, blink)."
    ),
    header_color: str | None = typer.Option(None, "--header-color", help="SGR colour code for the header, or 'none'."),
    row_color: str | None = typer.Option(None, "--row-color", help="SGR colour code for data rows."),
) -> None:
    """Render records as an aligned table."""
    with command_context("rendering table") as (config, output):
        try:
            styles = tuple(Style.parse(s) for s in header_style) if header_style else None
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--header-style") from None

        overrides = build_overrides(formats, fixed, auto)
        rows = _select(load_rows(source, input_format), columns)
        if rows:
            for name in sorted(set(overrides) - set(rows[0])):
                output.status(warning(f"no column named {name!r}; option ignored"))
        theme = _theme(
            config.theme,
            output.use_color and not output.is_json_mode,
            underline=underline,
            header_styles=styles,
            header_color=header_color,
            row_color=row_color,
        )
        try:
            _check_formats(rows, overrides)
        except (TypeError, ValueError) as e:
            raise typer.BadParameter(f"cannot format values: {e}", param_hint="--format") from None
        lines = render_table(
            rows,
            width=config.width or terminal_width(),
            overrides=overrides,
            header=HeaderOptions(
                color=theme.header_color,
                underline=theme.underline,
                word_styles=theme.header_styles,
                ellipsis=theme.ellipsis,
            ),
            row_color=theme.row_color,
        )
        output.render_lines(lines, data=rows)
