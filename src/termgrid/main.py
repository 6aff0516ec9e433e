"""termgrid CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from termgrid import __version__
from termgrid.config import TermgridConfig, resolve_config
from termgrid.output import OutputContext

app = typer.Typer(
    name="termgrid",
    help="Render tables and styled text for ANSI terminals.",
    no_args_is_help=True,
)


class State:
    """Global state shared across commands."""

    config: TermgridConfig
    output: OutputContext


state = State()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"termgrid {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("termgrid")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    width: int | None = typer.Option(None, "--width", "-w", help="Total width budget (default: terminal width)."),
    profile: str | None = typer.Option(None, "--profile", envvar="TERMGRID_PROFILE", help="Config profile name."),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    json_fields: str | None = typer.Option(
        None, "--fields", help="Filter JSON to FIELDS (comma-separated). Implies --json."
    ),
    plain: bool = typer.Option(False, "--plain", help="Never emit colour or style markers."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress status messages."),
    verbose: bool = typer.Option(False, "--verbose", help="Log layout decisions to stderr."),
) -> None:
    """termgrid - tables and styled text for ANSI terminals."""
    _setup_logging(verbose)
    state.config = resolve_config(width=width, profile=profile)

    # --fields implies --json
    is_json = output_json or json_fields is not None
    parsed_fields = json_fields.split(",") if json_fields else None

    state.output = OutputContext(
        json_fields=parsed_fields if is_json else None,
        quiet=quiet,
        force_json=is_json,
        plain=plain,
    )


# Import and register commands
from termgrid.commands import table, text  # noqa: E402

app.command("table", help="Render JSON, JSON Lines or CSV records as a table.")(table.render_table_command)
app.command("decorate", help="Apply ANSI styles to character ranges of TEXT.")(text.decorate_command)
app.command(
    "words",
    help="Recover header words from a header line and its dash row (pass -- before the arguments).",
)(text.words_command)

if __name__ == "__main__":
    app()
