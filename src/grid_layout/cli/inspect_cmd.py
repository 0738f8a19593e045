"""grid-layout show / validate: look at a layout file without changing it."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from grid_layout.cli._output import console, load_layout, print_layout, resolve_cols
from grid_layout.cli.edit_cmd import ColsOption, FormatOption
from grid_layout.exceptions import GridLayoutError
from grid_layout.layout.validator import check_layout
from grid_layout.serializer import LayoutSerializer


def show(
    layout_file: Annotated[Path, typer.Argument(help="Layout file (JSON or YAML)")],
    cols: ColsOption = None,
    output_format: FormatOption = "summary",
) -> None:
    """Print the items and an occupancy map of the grid."""
    try:
        layout, cols = load_layout(layout_file, cols)
        print_layout(layout, cols, output_format, title=layout_file.name)
        if output_format == "summary":
            console.print(f"{len(layout)} items, {layout.bottom()} rows, {cols} cols")
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def validate(
    layout_file: Annotated[Path, typer.Argument(help="Layout file (JSON or YAML)")],
    cols: ColsOption = None,
) -> None:
    """Report structural errors and geometry the engine would correct."""
    try:
        data = LayoutSerializer.read_document(layout_file)
        cols = resolve_cols(cols, data)
        records = LayoutSerializer.extract_items(data)
        result = check_layout(records, cols=cols, context=layout_file.name)
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    for error in result.errors:
        console.print(f"[red]Error:[/red] {error}")
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    if not result.valid:
        raise typer.Exit(1)
    console.print(f"[green]Valid[/green] ({len(records)} items, {len(result.warnings)} warnings)")
