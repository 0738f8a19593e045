"""Tests for grid_layout.layout.reconciler — syncing layouts with managed items."""

from __future__ import annotations

import pytest

from grid_layout.exceptions import LayoutValidationError
from grid_layout.layout.item import ChildSpec, LayoutItem
from grid_layout.layout.reconciler import find_first_fit, synchronize_layout_with_children
from grid_layout.layout.store import Layout


def _item(item_id, x: int = 0, y: int = 0, w: int = 1, h: int = 1, **kwargs) -> LayoutItem:
    return LayoutItem(id=item_id, x=x, y=y, w=w, h=h, **kwargs)


def _pos(layout: Layout, item_id) -> tuple[int, int]:
    return layout[item_id].x, layout[item_id].y


class TestSynchronize:
    def test_first_fit_for_new_items(self):
        previous = Layout([_item("A", 0, 0)])
        result = synchronize_layout_with_children(previous, ["A", "B", "C"], cols=2)
        assert result.ids == ("A", "B", "C")
        assert _pos(result, "A") == (0, 0)
        assert _pos(result, "B") == (1, 0)
        assert _pos(result, "C") == (0, 1)

    def test_no_previous_layout(self):
        result = synchronize_layout_with_children(None, ["a", "b", "c"], cols=12)
        assert [_pos(result, i) for i in "abc"] == [(0, 0), (1, 0), (2, 0)]
        assert all((i.w, i.h) == (1, 1) for i in result)

    def test_stale_entries_dropped(self):
        previous = Layout([_item("A"), _item("gone", 1)])
        result = synchronize_layout_with_children(previous, ["A"], cols=4)
        assert result.ids == ("A",)

    def test_known_items_keep_geometry(self, dashboard_layout: Layout):
        children = list(dashboard_layout.ids)
        result = synchronize_layout_with_children(dashboard_layout, children, cols=12)
        assert result == dashboard_layout

    def test_known_items_keep_geometry_without_compaction(self):
        previous = Layout([_item("A", 0, 3, 2, 2), _item("B", 2, 7, 1, 1)])
        result = synchronize_layout_with_children(previous, ["A", "B"], cols=4, vertical_compact=False)
        assert result == previous

    def test_output_follows_child_order(self):
        previous = Layout([_item("A", 0, 0), _item("B", 1, 0)])
        result = synchronize_layout_with_children(previous, ["B", "A"], cols=4)
        assert result.ids == ("B", "A")
        assert _pos(result, "A") == (0, 0)

    def test_child_geometry_overrides_stored(self):
        previous = Layout([_item("A", 0, 0, 1, 1)])
        result = synchronize_layout_with_children(previous, [ChildSpec(id="A", w=3, h=2)], cols=4)
        assert (result["A"].w, result["A"].h) == (3, 2)

    def test_mapping_child_with_declared_size(self):
        result = synchronize_layout_with_children(None, [{"id": "A", "w": 2, "h": 3}], cols=4)
        assert (result["A"].w, result["A"].h) == (2, 3)

    def test_child_with_explicit_position(self):
        result = synchronize_layout_with_children(
            None, [ChildSpec(id="A", x=2, y=0, w=2, h=1), "B"], cols=4,
        )
        assert _pos(result, "A") == (2, 0)
        assert _pos(result, "B") == (0, 0)

    def test_new_item_avoids_known_items_listed_later(self):
        previous = Layout([_item("K", 0, 0, 2, 1)])
        result = synchronize_layout_with_children(previous, ["N", "K"], cols=2)
        assert _pos(result, "K") == (0, 0)
        assert _pos(result, "N") == (0, 1)

    def test_default_size(self):
        result = synchronize_layout_with_children(None, ["a", "b"], cols=4, default_w=2, default_h=3)
        assert _pos(result, "b") == (2, 0)
        assert (result["a"].w, result["a"].h) == (2, 3)

    def test_out_of_grid_items_corrected(self):
        previous = Layout([_item("A", 10, 0, 4, 1)])
        result = synchronize_layout_with_children(previous, ["A"], cols=6)
        assert (result["A"].x, result["A"].w) == (2, 4)

    def test_compacts_when_enabled(self):
        previous = Layout([_item("A", 0, 5)])
        assert synchronize_layout_with_children(previous, ["A"], cols=2)["A"].y == 0

    def test_overlaps_resolved_without_compaction(self):
        previous = Layout([_item("A", 0, 0, 2, 2), _item("B", 0, 1, 2, 1)])
        result = synchronize_layout_with_children(previous, ["A", "B"], cols=2, vertical_compact=False)
        assert result["B"].y == 2

    def test_duplicate_children_rejected(self):
        with pytest.raises(LayoutValidationError):
            synchronize_layout_with_children(None, ["A", "A"], cols=2)

    def test_wide_new_item_clamped_to_grid(self):
        result = synchronize_layout_with_children(None, [{"id": "A", "w": 9}], cols=4)
        assert (result["A"].x, result["A"].w) == (0, 4)

    def test_accepts_plain_item_list(self):
        result = synchronize_layout_with_children([_item("A", 1, 0)], ["A"], cols=2)
        assert _pos(result, "A") == (1, 0)

    def test_static_items_preserved(self):
        previous = Layout([_item("S", 0, 2, 2, 1, static=True)])
        result = synchronize_layout_with_children(previous, ["S", "N"], cols=2)
        assert result["S"] == previous["S"]
        assert _pos(result, "N") == (0, 0)


class TestFindFirstFit:
    def test_empty_grid(self):
        assert find_first_fit([], 2, 2, cols=4) == (0, 0)

    def test_scans_row_before_next_row(self):
        occupied = [_item("a", 0, 0, 2, 1)]
        assert find_first_fit(occupied, 2, 1, cols=4) == (2, 0)

    def test_needs_full_rectangle(self):
        occupied = [_item("a", 0, 0, 1, 1), _item("b", 3, 1, 1, 1)]
        # Row 0 has room at x=1 for a 3x1, but a 3x2 there would hit b.
        assert find_first_fit(occupied, 3, 2, cols=4) == (0, 1)

    def test_full_grid_falls_back_below(self):
        occupied = [_item("a", 0, 0, 4, 3)]
        assert find_first_fit(occupied, 1, 1, cols=4) == (0, 3)

    def test_fills_hole(self):
        occupied = [_item("a", 0, 0, 1, 1), _item("b", 2, 0, 2, 1), _item("c", 0, 1, 4, 1)]
        assert find_first_fit(occupied, 1, 1, cols=4) == (1, 0)
