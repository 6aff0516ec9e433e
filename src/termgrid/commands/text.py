"""Text decoration commands: styling ranges and header words."""

from __future__ import annotations

import typer

from termgrid._tty import terminal_width
from termgrid.commands import command_context
from termgrid.formatters.decorate import DecorationRange, OutOfRangeError, Style, decorate
from termgrid.formatters.header import decorate_header_words, extract_words
from termgrid.formatters.table import HeaderOptions, render_table


def _parse_styles(names: list[str] | None, default: Style | None = None) -> tuple[Style, ...]:
    if not names:
        return (default,) if default else ()
    try:
        return tuple(Style.parse(n) for n in names)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--style") from None


def _parse_range(value: str) -> tuple[int, int]:
    """Parse ``START:END`` into a half-open pair."""
    start, sep, end = value.partition(":")
    try:
        if not sep:
            raise ValueError
        return int(start), int(end)
    except ValueError:
        raise typer.BadParameter(f"expected START:END, got {value!r}", param_hint="--range") from None


def decorate_command(
    text: str = typer.Argument(help="Text to decorate."),
    ranges: list[str] | None = typer.Option(None, "--range", "-r", help="Half-open range START:END (repeatable)."),
    at: list[int] | None = typer.Option(None, "--at", help="Single character position (repeatable)."),
    style: list[str] | None = typer.Option(None, "--style", "-s", help="Style to apply (default: underline)."),
    nested: bool = typer.Option(False, "--nested", help="Close styles in reverse order."),
) -> None:
    """Apply ANSI styles to character ranges of TEXT."""
    with command_context("decorating text") as (_config, output):
        styles = _parse_styles(style, Style.UNDERLINE)
        spans = [_parse_range(r) for r in ranges or []]
        for position in at or []:
            if position < 0 or position >= len(text):
                raise OutOfRangeError(f"position {position} is outside a string of length {len(text)}")
            spans.append((position, position + 1))

        result = decorate(text, [DecorationRange(s, e, styles) for s, e in spans], nested=nested)
        if output.plain:
            result = text
        output.render_lines([result], data={"text": result})


def words_command(
    header: str = typer.Argument(help="Rendered header line."),
    underline: str = typer.Argument(help="Dash row rendered under the header."),
    style: list[str] | None = typer.Option(None, "--style", "-s", help="Print the header with words styled."),
) -> None:
    """Recover header words from a header line and its dash row.

    Put ``--`` before the arguments, since the dash row starts with a dash.
    """
    with command_context("segmenting header") as (config, output):
        words = extract_words(header, underline)
        data = [{"word": w.text, "start": w.start, "end": w.end} for w in words]

        styles = _parse_styles(style)
        if styles and not output.is_json_mode:
            color = config.theme.header_color if output.use_color else None
            line = header if output.plain else decorate_header_words(header, underline, styles, color)
            output.render_lines([line])
            return

        lines = render_table(
            data,
            width=config.width or terminal_width(),
            header=HeaderOptions(
                color=config.theme.header_color if output.use_color else None,
                underline=True,
            ),
        )
        output.render_lines(lines, data=data)
