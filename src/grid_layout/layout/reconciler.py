"""Reconcile a previous layout with the current set of managed items.

The managed set is authoritative: the output holds exactly one item per
managed identity, in managed order. Known identities keep their stored
geometry (with any geometry the child declares itself taking
precedence), unknown ones are placed by a greedy first-fit scan, and
stale entries are dropped.

Algorithm:
1. Resolve every child that has a position: a stored item, or explicit
   ``x``/``y`` on the child. These are registered as occupied first.
2. For each remaining child, scan rows top to bottom and, within a row,
   columns left to right, for the first spot where its ``w x h``
   rectangle fits inside the grid and overlaps nothing placed so far.
3. Correct bounds, compact (or only resolve overlaps when compaction is
   off), and validate the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from grid_layout.layout.compactor import compact, resolve_overlaps
from grid_layout.layout.geometry import bottom, correct_bounds, get_first_collision
from grid_layout.layout.item import ChildSpec, ItemId, LayoutItem
from grid_layout.layout.store import Layout
from grid_layout.layout.validator import validate_layout

logger = logging.getLogger(__name__)

Child = Union[ItemId, ChildSpec, Mapping[str, Any]]

# Identity used only for collision probes; never emitted.
_PROBE_ID = "\x00probe"


def synchronize_layout_with_children(
    initial_layout: Layout | Iterable[LayoutItem] | None,
    children: Iterable[Child],
    cols: int,
    vertical_compact: bool = True,
    *,
    default_w: int = 1,
    default_h: int = 1,
) -> Layout:
    """Build the layout for the current managed items.

    Args:
        initial_layout: Previous layout supplying geometry for identities
            it already knows. ``None`` means no previous layout.
        children: Managed items, in order. Each is a bare identity, a
            ``ChildSpec`` or a mapping with at least ``id``.
        cols: Grid column count.
        vertical_compact: Compact the result vertically.
        default_w: Width for new items that declare none.
        default_h: Height for new items that declare none.

    Returns:
        A validated Layout with one item per child, in child order.
    """
    if initial_layout is None:
        previous = Layout()
    elif isinstance(initial_layout, Layout):
        previous = initial_layout
    else:
        previous = Layout(initial_layout)

    specs = [_as_spec(child) for child in children]

    # First pass: everything whose position is already known
    resolved: list[LayoutItem | None] = []
    for spec in specs:
        stored = previous.get(spec.id)
        if stored is not None:
            overrides = spec.overrides()
            resolved.append(stored.model_copy(update=overrides) if overrides else stored)
        elif spec.has_position:
            resolved.append(LayoutItem(id=spec.id, **_with_size(spec, default_w, default_h)))
        else:
            resolved.append(None)

    occupied = [item for item in resolved if item is not None]

    # Second pass: first-fit for newcomers
    placed: list[LayoutItem] = []
    for spec, item in zip(specs, resolved):
        if item is None:
            fields = _with_size(spec, default_w, default_h)
            w = min(max(fields["w"], 1), cols)
            x, y = find_first_fit(occupied, w, fields["h"], cols)
            fields.update(x=x, y=y, w=w)
            item = LayoutItem(id=spec.id, **fields)
            occupied.append(item)
            logger.debug("Placed new item %r at (%d, %d)", item.id, x, y)
        placed.append(item)

    wanted = {spec.id for spec in specs}
    dropped = [i for i in previous.ids if i not in wanted]
    if dropped:
        logger.debug("Dropped %d stale item(s): %s", len(dropped), dropped)

    layout = correct_bounds(Layout(placed), cols)
    if vertical_compact:
        layout = compact(layout, True)
    else:
        layout = resolve_overlaps(layout)
    validate_layout(layout, "layout")
    return layout


def find_first_fit(occupied: Iterable[LayoutItem], w: int, h: int, cols: int) -> tuple[int, int]:
    """First ``(x, y)`` where a ``w x h`` rectangle overlaps nothing in ``occupied``.

    Rows are scanned top to bottom and columns left to right. The row
    just below the lowest occupied row is always free, which bounds the
    scan; that row's first column is the fallback.
    """
    occupied = list(occupied)
    w = min(max(w, 1), cols)
    floor = bottom(occupied)

    for y in range(floor + 1):
        for x in range(cols - w + 1):
            probe = LayoutItem(id=_PROBE_ID, x=x, y=y, w=w, h=max(h, 1))
            if get_first_collision(occupied, probe) is None:
                return x, y

    return 0, floor


def _as_spec(child: Child) -> ChildSpec:
    if isinstance(child, ChildSpec):
        return child
    if isinstance(child, Mapping):
        return ChildSpec.model_validate(dict(child))
    return ChildSpec(id=child)


def _with_size(spec: ChildSpec, default_w: int, default_h: int) -> dict[str, Any]:
    fields = spec.overrides()
    fields.setdefault("w", default_w)
    fields.setdefault("h", default_h)
    return fields
