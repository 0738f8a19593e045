"""grid-layout compact / move / resize: apply one engine operation to a file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from grid_layout.cli._output import (
    console,
    load_layout,
    print_layout,
    resolve_id,
    vertical_compact_enabled,
)
from grid_layout.exceptions import GridLayoutError, ItemNotFoundError
from grid_layout.layout.cascade import move_element, resize_element
from grid_layout.layout.compactor import compact
from grid_layout.layout.geometry import correct_bounds

LayoutFile = Annotated[Path, typer.Argument(help="Layout file (JSON or YAML)")]
ColsOption = Annotated[int | None, typer.Option("--cols", "-c", help="Grid columns (default: file, then settings)")]
CompactOption = Annotated[
    bool,
    typer.Option("--no-vertical-compact", help="Skip vertical compaction (free placement)"),
]
FormatOption = Annotated[str, typer.Option("--format", "-f", help="Output: summary, json, or yaml")]


def compact_cmd(
    layout_file: LayoutFile,
    cols: ColsOption = None,
    no_compact: CompactOption = False,
    output_format: FormatOption = "summary",
) -> None:
    """Correct out-of-grid items and float everything up."""
    try:
        layout, cols = load_layout(layout_file, cols)
        layout = correct_bounds(layout, cols)
        layout = compact(layout, vertical_compact_enabled(no_compact))
        print_layout(layout, cols, output_format, title="Compacted")
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def move_cmd(
    layout_file: LayoutFile,
    item_id: Annotated[str, typer.Argument(help="Item to move")],
    x: Annotated[int, typer.Argument(help="Target column")],
    y: Annotated[int, typer.Argument(help="Target row")],
    cols: ColsOption = None,
    no_compact: CompactOption = False,
    output_format: FormatOption = "summary",
) -> None:
    """Move an item as a user drag would, pushing colliding items down."""
    try:
        layout, cols = load_layout(layout_file, cols)
        key = resolve_id(layout, item_id)
        if key not in layout:
            raise ItemNotFoundError(item_id)
        layout = move_element(layout, key, x, y, cols=cols, is_user_action=True)
        layout = compact(layout, vertical_compact_enabled(no_compact))
        print_layout(layout, cols, output_format, title=f"Moved {item_id}")
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def resize_cmd(
    layout_file: LayoutFile,
    item_id: Annotated[str, typer.Argument(help="Item to resize")],
    w: Annotated[int, typer.Argument(help="New width in columns")],
    h: Annotated[int, typer.Argument(help="New height in rows")],
    cols: ColsOption = None,
    no_compact: CompactOption = False,
    output_format: FormatOption = "summary",
) -> None:
    """Resize an item within its min/max bounds, pushing colliding items down."""
    try:
        layout, cols = load_layout(layout_file, cols)
        key = resolve_id(layout, item_id)
        if key not in layout:
            raise ItemNotFoundError(item_id)
        layout = resize_element(layout, key, w, h, cols=cols)
        layout = compact(layout, vertical_compact_enabled(no_compact))
        print_layout(layout, cols, output_format, title=f"Resized {item_id}")
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
