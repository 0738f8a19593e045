"""Gesture lifecycle on top of the pure layout operations.

A ``GridSession`` owns the current layout of one grid and turns the
start/move/stop events of a drag or resize into engine calls, the way a
grid container does. Every step returns a ``LayoutChange`` describing
the new layout, the item as it was when the gesture started, the item
as it is now and, for intermediate steps, a placeholder rectangle the
caller can render.

Gestures must be serialized by the caller: one session handles one
gesture at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from grid_layout.layout.cascade import clamp_size, move_element, resize_element
from grid_layout.layout.compactor import compact
from grid_layout.layout.item import ItemId, LayoutItem, Placeholder
from grid_layout.layout.reconciler import Child, synchronize_layout_with_children
from grid_layout.layout.store import Layout

logger = logging.getLogger(__name__)

LayoutListener = Callable[[Layout], None]


@dataclass(frozen=True)
class LayoutChange:
    """Outcome of one gesture step."""

    layout: Layout
    old_item: LayoutItem | None
    item: LayoutItem
    placeholder: Placeholder | None = None


class GridSession:
    """Stateful driver for drag and resize gestures on one grid.

    ``on_layout_change`` receives the reconciled layout once on creation,
    then every committed layout that differs from the last one reported.

    Usage:
        session = GridSession(["a", "b", "c"], cols=12)
        session.drag_start("a")
        change = session.drag("a", 4, 0)   # change.placeholder to render
        session.drag_stop("a", 4, 0)
    """

    def __init__(
        self,
        children: Iterable[Child] = (),
        layout: Layout | Iterable[LayoutItem] | None = None,
        *,
        cols: int = 12,
        vertical_compact: bool = True,
        default_w: int = 1,
        default_h: int = 1,
        on_layout_change: LayoutListener | None = None,
    ):
        self.cols = cols
        self.vertical_compact = vertical_compact
        self.default_w = default_w
        self.default_h = default_h
        self._on_layout_change = on_layout_change
        self._children = list(children)
        self._layout = synchronize_layout_with_children(
            layout, self._children, cols, vertical_compact,
            default_w=default_w, default_h=default_h,
        )
        self._old_drag_item: LayoutItem | None = None
        self._old_resize_item: LayoutItem | None = None
        self._active: Placeholder | None = None
        # Last layout reported through on_layout_change
        self._committed = self._layout
        if self._on_layout_change is not None:
            self._on_layout_change(self._layout)

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def active_placeholder(self) -> Placeholder | None:
        """Placeholder of the gesture in progress, if any."""
        return self._active

    def container_height(self, row_height: int, margin_y: int = 0) -> int:
        """Pixel height needed to show every row."""
        return self._layout.bottom() * row_height + margin_y

    # -- Reconciliation --------------------------------------------------

    def set_children(
        self,
        children: Iterable[Child],
        layout: Layout | Iterable[LayoutItem] | None = None,
    ) -> Layout:
        """Re-sync after the managed item set changed or a layout was imposed.

        Without ``layout`` the current layout supplies the known geometry.
        """
        self._children = list(children)
        source = self._layout if layout is None else layout
        new_layout = synchronize_layout_with_children(
            source, self._children, self.cols, self.vertical_compact,
            default_w=self.default_w, default_h=self.default_h,
        )
        self._commit(new_layout)
        return self._layout

    # -- Drag ------------------------------------------------------------

    def drag_start(self, item_id: ItemId) -> LayoutChange | None:
        item = self._layout.get(item_id)
        if item is None:
            return None
        self._old_drag_item = item
        return LayoutChange(self._layout, item, item)

    def drag(self, item_id: ItemId, x: int, y: int) -> LayoutChange | None:
        """Move the item under the pointer; the placeholder marks where it was."""
        item = self._layout.get(item_id)
        if item is None:
            return None
        placeholder = Placeholder.of(item)
        moved = move_element(self._layout, item_id, x, y, cols=self.cols, is_user_action=True)
        self._layout = compact(moved, self.vertical_compact)
        self._active = placeholder
        return LayoutChange(self._layout, self._old_drag_item, self._layout[item_id], placeholder)

    def drag_stop(self, item_id: ItemId, x: int, y: int) -> LayoutChange | None:
        item = self._layout.get(item_id)
        if item is None:
            return None
        moved = move_element(self._layout, item_id, x, y, cols=self.cols, is_user_action=True)
        old_item = self._old_drag_item
        self._old_drag_item = None
        self._active = None
        self._commit(compact(moved, self.vertical_compact))
        return LayoutChange(self._layout, old_item, self._layout[item_id])

    # -- Resize ----------------------------------------------------------

    def resize_start(self, item_id: ItemId) -> LayoutChange | None:
        item = self._layout.get(item_id)
        if item is None:
            return None
        self._old_resize_item = item
        return LayoutChange(self._layout, item, item)

    def resize(self, item_id: ItemId, w: int, h: int) -> LayoutChange | None:
        """Resize the item; the placeholder shows the new size at its position."""
        item = self._layout.get(item_id)
        if item is None:
            return None
        if item.static:
            placeholder = Placeholder.of(item)
        else:
            placeholder = Placeholder.of(item, *clamp_size(item, w, h, self.cols))
        resized = resize_element(self._layout, item_id, w, h, cols=self.cols)
        self._layout = compact(resized, self.vertical_compact)
        self._active = placeholder
        return LayoutChange(self._layout, self._old_resize_item, self._layout[item_id], placeholder)

    def resize_stop(self, item_id: ItemId, w: int, h: int) -> LayoutChange | None:
        item = self._layout.get(item_id)
        if item is None:
            return None
        resized = resize_element(self._layout, item_id, w, h, cols=self.cols)
        old_item = self._old_resize_item
        self._old_resize_item = None
        self._active = None
        self._commit(compact(resized, self.vertical_compact))
        return LayoutChange(self._layout, old_item, self._layout[item_id])

    # -- Internals -------------------------------------------------------

    def _commit(self, layout: Layout) -> None:
        self._layout = layout
        if layout == self._committed:
            return
        self._committed = layout
        logger.debug("Layout changed (%d items)", len(layout))
        if self._on_layout_change is not None:
            self._on_layout_change(layout)
