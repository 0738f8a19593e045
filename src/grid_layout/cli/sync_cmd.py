"""grid-layout sync: reconcile a layout file with the current item ids."""

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
from grid_layout.cli.edit_cmd import ColsOption, CompactOption, FormatOption
from grid_layout.config import get_settings
from grid_layout.exceptions import GridLayoutError
from grid_layout.layout.reconciler import synchronize_layout_with_children


def sync(
    layout_file: Annotated[Path, typer.Argument(help="Previous layout file (JSON or YAML)")],
    item_ids: Annotated[list[str], typer.Argument(help="Current item ids, in order")],
    cols: ColsOption = None,
    no_compact: CompactOption = False,
    output_format: FormatOption = "summary",
) -> None:
    """Keep known items, place new ones first-fit and drop the rest."""
    try:
        previous, cols = load_layout(layout_file, cols)
        settings = get_settings()
        children = [resolve_id(previous, raw) for raw in item_ids]
        layout = synchronize_layout_with_children(
            previous,
            children,
            cols,
            vertical_compact_enabled(no_compact),
            default_w=settings.default_w,
            default_h=settings.default_h,
        )

        added = [i for i in layout.ids if i not in previous]
        removed = [i for i in previous.ids if i not in layout]
        if output_format == "summary":
            console.print(f"[green]+{len(added)}[/green] added, [red]-{len(removed)}[/red] removed")
        print_layout(layout, cols, output_format, title="Synchronized")
    except GridLayoutError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
