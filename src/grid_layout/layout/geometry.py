"""Rectangle primitives shared by the cascade, compactor and reconciler."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from grid_layout.layout.item import LayoutItem
from grid_layout.layout.store import Layout

logger = logging.getLogger(__name__)


def collides(a: LayoutItem | None, b: LayoutItem | None) -> bool:
    """True if two distinct items overlap with positive area.

    Items that only share an edge do not collide, and zero-height items
    never collide with anything.
    """
    if a is None or b is None or a.id == b.id:
        return False
    if a.h == 0 or b.h == 0:
        return False
    return a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h


def get_first_collision(items: Iterable[LayoutItem], item: LayoutItem) -> LayoutItem | None:
    """First item in iteration order that collides with ``item``."""
    for other in items:
        if collides(other, item):
            return other
    return None


def get_all_collisions(items: Iterable[LayoutItem], item: LayoutItem) -> list[LayoutItem]:
    return [other for other in items if collides(other, item)]


def bottom(layout: Iterable[LayoutItem]) -> int:
    """Max ``y + h`` over all items; 0 when empty."""
    return max((item.bottom for item in layout), default=0)


def correct_bounds(layout: Layout, cols: int) -> Layout:
    """Bring every item back inside ``[0, cols)`` horizontally.

    Widths are clamped into ``[1, cols]``, ``x`` into ``[0, cols - w]``
    and negative rows to 0.
    A non-static item that then overlaps a static item is pushed down
    past it, repeatedly, until it overlaps none. Static items keep their
    row. Items are visited in layout order.
    """
    if cols < 1:
        raise ValueError(f"cols must be >= 1, got {cols}")

    corrected: list[LayoutItem] = []
    for item in layout:
        w = min(max(item.w, 1), cols)
        x = min(max(item.x, 0), cols - w)
        y = max(item.y, 0)
        if (x, y, w) != (item.x, item.y, item.w):
            logger.debug("Clamped %r from x=%d w=%d to x=%d w=%d", item.id, item.x, item.w, x, w)
            item = item.model_copy(update={"x": x, "y": y, "w": w})
        corrected.append(item)

    statics = [item for item in corrected if item.static]
    if statics:
        for index, item in enumerate(corrected):
            if item.static:
                continue
            hit = get_first_collision(statics, item)
            while hit is not None:
                item = item.at(y=hit.bottom)
                hit = get_first_collision(statics, item)
            if item is not corrected[index]:
                logger.debug("Moved %r below static items to y=%d", item.id, item.y)
                corrected[index] = item

    return Layout(corrected)
