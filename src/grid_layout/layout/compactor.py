"""Vertical compaction: let every non-static item float up until blocked.

Items are settled in ascending ``y``, then ``x``, then layout order, so
the result does not depend on how the input happens to be ordered.
Static items never move and only act as obstacles. The returned layout
keeps the input order.
"""

from __future__ import annotations

import logging

from grid_layout.layout.geometry import get_first_collision
from grid_layout.layout.item import ItemId, LayoutItem
from grid_layout.layout.store import Layout

logger = logging.getLogger(__name__)


def compact(layout: Layout, vertical_compact: bool = True) -> Layout:
    """Remove avoidable empty rows above every non-static item.

    With ``vertical_compact=False`` the layout is returned unchanged
    (free placement).
    """
    if not vertical_compact:
        return layout
    return _settle_all(layout, float_up=True)


def resolve_overlaps(layout: Layout) -> Layout:
    """Push overlapping non-static items down without floating anything up.

    Used where free placement is wanted but the result must still be
    overlap-free, e.g. reconciling a layout with compaction disabled.
    """
    return _settle_all(layout, float_up=False)


def sort_by_row_col(layout: Layout) -> list[LayoutItem]:
    """Items in settling order: top to bottom, left to right, then layout order."""
    # sorted() is stable, so layout order breaks the remaining ties.
    return sorted(layout, key=lambda item: (item.y, item.x))


def _settle_all(layout: Layout, float_up: bool) -> Layout:
    obstacles: list[LayoutItem] = [item for item in layout if item.static]
    updates: dict[ItemId, LayoutItem] = {}

    for item in sort_by_row_col(layout):
        if item.static:
            continue
        settled = _settle_item(item, obstacles, float_up)
        obstacles.append(settled)
        if settled is not item:
            logger.debug("Compacted %r from y=%d to y=%d", item.id, item.y, settled.y)
            updates[item.id] = settled

    return layout.replace_many(updates) if updates else layout


def _settle_item(item: LayoutItem, obstacles: list[LayoutItem], float_up: bool) -> LayoutItem:
    y = max(item.y, 0)
    if float_up:
        while y > 0 and get_first_collision(obstacles, item.at(y=y - 1)) is None:
            y -= 1

    candidate = item.at(y=y)
    hit = get_first_collision(obstacles, candidate)
    while hit is not None:
        candidate = candidate.at(y=hit.bottom)
        hit = get_first_collision(obstacles, candidate)
    return candidate
