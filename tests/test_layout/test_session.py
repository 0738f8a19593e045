"""Tests for grid_layout.layout.session — drag/resize gesture lifecycle."""

from __future__ import annotations

from grid_layout.layout.item import LayoutItem
from grid_layout.layout.session import GridSession
from grid_layout.layout.store import Layout


def _session(**kwargs) -> GridSession:
    layout = Layout([
        LayoutItem(id="A", x=0, y=0, w=2, h=2),
        LayoutItem(id="B", x=2, y=0, w=2, h=2),
        LayoutItem(id="S", x=0, y=4, w=4, h=1, static=True),
    ])
    return GridSession(["A", "B", "S"], layout, cols=4, **kwargs)


class TestConstruction:
    def test_reconciles_on_creation(self):
        session = GridSession(["a", "b"], cols=2)
        assert session.layout.ids == ("a", "b")
        assert (session.layout["b"].x, session.layout["b"].y) == (1, 0)

    def test_container_height(self):
        session = _session()
        assert session.container_height(row_height=100, margin_y=10) == 510

    def test_listener_receives_initial_layout(self):
        changes: list[Layout] = []
        session = GridSession(["a", "b"], cols=2, on_layout_change=changes.append)
        assert changes == [session.layout]


class TestDrag:
    def test_full_drag(self):
        changes: list[Layout] = []
        session = _session(on_layout_change=changes.append)

        start = session.drag_start("A")
        assert start is not None and start.placeholder is None

        step = session.drag("A", 2, 0)
        assert step.placeholder is not None
        assert (step.placeholder.x, step.placeholder.y) == (0, 0)
        assert step.old_item.x == 0
        assert (step.item.x, step.item.y) == (2, 0)
        assert session.layout["B"].y == 2
        assert session.active_placeholder == step.placeholder
        assert len(changes) == 1

        stop = session.drag_stop("A", 2, 0)
        assert stop.placeholder is None
        assert stop.old_item.x == 0
        assert session.active_placeholder is None
        assert len(changes) == 2
        assert changes[-1]["A"].x == 2

    def test_drag_clamps_to_grid(self):
        session = _session()
        session.drag_start("A")
        step = session.drag("A", 10, 0)
        assert step.item.x == 2

    def test_unknown_item_is_noop(self):
        session = _session()
        before = session.layout
        assert session.drag_start("ghost") is None
        assert session.drag("ghost", 1, 1) is None
        assert session.drag_stop("ghost", 1, 1) is None
        assert session.layout is before

    def test_static_item_does_not_move(self):
        session = _session()
        session.drag_start("S")
        step = session.drag("S", 0, 0)
        assert (step.item.x, step.item.y) == (0, 4)

    def test_no_callback_when_nothing_changed(self):
        changes: list[Layout] = []
        session = _session(on_layout_change=changes.append)
        session.drag_start("A")
        session.drag_stop("A", 0, 0)
        assert changes == [session.layout]


class TestResize:
    def test_full_resize(self):
        changes: list[Layout] = []
        session = _session(on_layout_change=changes.append)
        session.resize_start("A")

        step = session.resize("A", 2, 3)
        assert (step.placeholder.w, step.placeholder.h) == (2, 3)
        assert step.item.h == 3

        stop = session.resize_stop("A", 2, 3)
        assert stop.old_item.h == 2
        assert session.layout["A"].h == 3
        assert len(changes) == 2

    def test_placeholder_respects_bounds(self):
        session = _session()
        session.resize_start("B")
        step = session.resize("B", 9, 1)
        assert step.placeholder.w == 2

    def test_static_resize_is_noop(self):
        session = _session()
        before = session.layout
        session.resize_start("S")
        stop = session.resize_stop("S", 1, 1)
        assert stop.layout == before


class TestSetChildren:
    def test_adds_and_removes(self):
        changes: list[Layout] = []
        session = _session(on_layout_change=changes.append)
        layout = session.set_children(["A", "S", "C"])
        assert layout.ids == ("A", "S", "C")
        assert (layout["C"].x, layout["C"].y) == (2, 0)
        assert len(changes) == 2

    def test_external_layout_override(self):
        session = _session()
        imposed = Layout([LayoutItem(id="A", x=2, y=0, w=2, h=1), LayoutItem(id="B", x=0, y=0, w=2, h=1)])
        layout = session.set_children(["A", "B"], imposed)
        assert (layout["A"].x, layout["B"].x) == (2, 0)
