"""Shared helpers for CLI commands: loading, id lookup and rendering."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from grid_layout.config import get_settings
from grid_layout.exceptions import GridLayoutError
from grid_layout.layout.item import ItemId
from grid_layout.layout.store import Layout
from grid_layout.serializer import LayoutSerializer

console = Console()

OUTPUT_FORMATS = ("summary", "json", "yaml")

_CELL_LABELS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def load_layout(path: Path, cols: int | None) -> tuple[Layout, int]:
    """Load a layout file and resolve the column count.

    ``--cols`` wins over a ``cols`` key in the file, which wins over
    the configured default.
    """
    layout, extra = LayoutSerializer.load(path)
    return layout, resolve_cols(cols, extra)


def resolve_cols(cols: int | None, document: Any) -> int:
    """Column count from the option, else the document's ``cols``, else settings."""
    if cols is None:
        document_cols = document.get("cols") if isinstance(document, dict) else None
        cols = get_settings().cols if document_cols is None else document_cols
    if isinstance(cols, bool) or not isinstance(cols, int) or cols < 1:
        raise GridLayoutError(f"cols must be a positive integer, got {cols!r}")
    return cols


def vertical_compact_enabled(no_compact: bool) -> bool:
    return False if no_compact else get_settings().vertical_compact


def resolve_id(layout: Layout, raw: str) -> ItemId:
    """Map a command-line identity onto the layout's own id type."""
    if raw in layout:
        return raw
    if raw.lstrip("-").isdigit() and int(raw) in layout:
        return int(raw)
    return raw


def print_layout(layout: Layout, cols: int, output_format: str, title: str = "Layout") -> None:
    if output_format == "json":
        console.print_json(json.dumps(layout.to_records()))
    elif output_format == "yaml":
        console.print(Syntax(LayoutSerializer.to_yaml(layout), "yaml", theme="monokai"))
    else:
        console.print(layout_table(layout, title))
        console.print(grid_picture(layout, cols))


def layout_table(layout: Layout, title: str = "Layout") -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Id", style="cyan")
    table.add_column("Position")
    table.add_column("Size")
    table.add_column("Flags", style="dim")

    for i, item in enumerate(layout):
        flags: list[str] = []
        if item.static:
            flags.append("static")
        if item.is_draggable is False:
            flags.append("no-drag")
        if item.is_resizable is False:
            flags.append("no-resize")
        table.add_row(
            _CELL_LABELS[i % len(_CELL_LABELS)],
            str(item.id),
            f"({item.x},{item.y})",
            f"{item.w}x{item.h}",
            ", ".join(flags),
        )
    return table


def grid_picture(layout: Layout, cols: int) -> Text:
    """ASCII occupancy map, one character per cell, labelled like the table."""
    rows = layout.bottom()
    cells: list[list[tuple[str, str]]] = [[(".", "dim")] * cols for _ in range(rows)]
    for i, item in enumerate(layout):
        label = _CELL_LABELS[i % len(_CELL_LABELS)]
        style = "bold red" if item.static else "green"
        for y in range(item.y, item.y + item.h):
            for x in range(max(item.x, 0), min(item.x + item.w, cols)):
                cells[y][x] = (label, style)

    text = Text()
    for row in cells:
        for label, style in row:
            text.append(label, style=style)
        text.append("\n")
    return text

