"""Collision cascade for moved and resized items.

When an item is placed somewhere new, every non-static item it now
overlaps is pushed directly beneath it, and each pushed item in turn
pushes whatever it lands on. Resolution follows layout order, and
displacement is only ever downward.

Each call tracks the identities it has already displaced in a local
set, so an item is displaced at most once per call and recursion depth
is bounded by the number of items. Nothing is recorded on the items
themselves.

The result is overlap-free among non-static items but not compacted;
callers run ``compact`` afterwards.
"""

from __future__ import annotations

import logging

from grid_layout.layout.geometry import collides, get_first_collision
from grid_layout.layout.item import ItemId, LayoutItem
from grid_layout.layout.store import Layout

logger = logging.getLogger(__name__)


def move_element(
    layout: Layout,
    item_id: ItemId,
    x: int | None = None,
    y: int | None = None,
    *,
    cols: int,
    is_user_action: bool = False,
) -> Layout:
    """Move an item to ``(x, y)`` and push everything it lands on downward.

    Args:
        layout: The current layout.
        item_id: Identity of the item to move.
        x: Target column, or ``None`` to keep the current one.
        y: Target row, or ``None`` to keep the current one.
        cols: Grid column count.
        is_user_action: Clamp ``x`` into ``[0, cols - w]``, as a dragged
            item must never leave the grid.

    Returns:
        A new Layout. The input is returned unchanged when the item is
        unknown or static.
    """
    item = layout.get(item_id)
    if item is None:
        logger.debug("move_element: %r not in layout, ignoring", item_id)
        return layout
    if item.static:
        return layout

    new_x = item.x if x is None else x
    new_y = item.y if y is None else y
    if is_user_action:
        new_x = min(max(new_x, 0), max(cols - item.w, 0))
    new_y = max(new_y, 0)

    return _settle(layout, item.at(new_x, new_y))


def resize_element(
    layout: Layout,
    item_id: ItemId,
    w: int | None = None,
    h: int | None = None,
    *,
    cols: int,
) -> Layout:
    """Resize an item within its min/max bounds and push what it now covers.

    ``w`` is clamped into ``[max(min_w, 1), min(max_w, cols - x)]`` and
    ``h`` into ``[min_h or 0, max_h]``. Unknown or static items leave
    the layout unchanged.
    """
    item = layout.get(item_id)
    if item is None:
        logger.debug("resize_element: %r not in layout, ignoring", item_id)
        return layout
    if item.static:
        return layout

    new_w, new_h = clamp_size(item, item.w if w is None else w, item.h if h is None else h, cols)
    if (new_w, new_h) == (item.w, item.h):
        return layout
    return _settle(layout, item.model_copy(update={"w": new_w, "h": new_h}))


def clamp_size(item: LayoutItem, w: int, h: int, cols: int) -> tuple[int, int]:
    """Clamp a requested size to the item's bounds and the grid width."""
    max_w = cols - item.x
    if item.max_w is not None:
        max_w = min(max_w, item.max_w)
    min_w = max(item.min_w or 1, 1)
    w = max(min(w, max_w), min_w)

    min_h = max(item.min_h or 0, 0)
    if item.max_h is not None:
        h = min(h, item.max_h)
    h = max(h, min_h)
    return w, h


def _settle(layout: Layout, placed: LayoutItem) -> Layout:
    """Substitute ``placed`` into the layout and run the cascade from it."""
    working = {item.id: item for item in layout}
    displaced: set[ItemId] = set()
    _cascade(working, layout.ids, placed, displaced)
    changed = {i: item for i, item in working.items() if item is not layout.get(i)}
    return layout.replace_many(changed) if changed else layout


def _cascade(
    working: dict[ItemId, LayoutItem],
    order: tuple[ItemId, ...],
    placed: LayoutItem,
    displaced: set[ItemId],
) -> None:
    working[placed.id] = placed
    displaced.add(placed.id)

    for other_id in order:
        if other_id in displaced:
            continue
        other = working[other_id]
        if other.static or not collides(placed, other):
            continue

        target = other.at(y=placed.bottom)
        # Land clear of static items and of anything already placed during
        # this call; neither can be pushed.
        blockers = [working[i] for i in order if i in displaced or working[i].static]
        hit = get_first_collision(blockers, target)
        while hit is not None:
            target = target.at(y=hit.bottom)
            hit = get_first_collision(blockers, target)

        logger.debug("Pushed %r from y=%d to y=%d by %r", other_id, other.y, target.y, placed.id)
        _cascade(working, order, target, displaced)
