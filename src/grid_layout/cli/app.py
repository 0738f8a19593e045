"""Main CLI application for grid-layout."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from grid_layout import __version__

app = typer.Typer(
    name="grid-layout",
    help="Compact, rearrange and reconcile grid layouts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"grid-layout {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version.", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions."),
) -> None:
    """grid-layout: collision-resolving layout engine for draggable grids."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


# Import and register commands
from grid_layout.cli.edit_cmd import compact_cmd, move_cmd, resize_cmd  # noqa: E402
from grid_layout.cli.inspect_cmd import show, validate  # noqa: E402
from grid_layout.cli.sync_cmd import sync  # noqa: E402

app.command("show")(show)
app.command("validate")(validate)
app.command("compact")(compact_cmd)
app.command("move")(move_cmd)
app.command("resize")(resize_cmd)
app.command("sync")(sync)


def main() -> None:
    """Entry point for the CLI."""
    app()
