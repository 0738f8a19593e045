"""Shared test fixtures for grid-layout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_layout.config import reset_settings
from grid_layout.layout.item import LayoutItem
from grid_layout.layout.store import Layout


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Reset settings singleton between tests and ignore the host environment."""
    for name in ("COLS", "VERTICAL_COMPACT", "DEFAULT_W", "DEFAULT_H", "ROW_HEIGHT", "MARGIN"):
        monkeypatch.delenv(f"GRID_LAYOUT_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def dashboard_layout() -> Layout:
    """A compact 12-column layout with one static header."""
    return Layout([
        LayoutItem(id="header", x=0, y=0, w=12, h=1, static=True),
        LayoutItem(id="a", x=0, y=1, w=6, h=2),
        LayoutItem(id="b", x=6, y=1, w=6, h=2),
        LayoutItem(id="c", x=0, y=3, w=4, h=3),
        LayoutItem(id="d", x=4, y=3, w=8, h=1),
    ])


@pytest.fixture
def layout_yaml(tmp_path: Path) -> Path:
    """Layout file with a gap above item b."""
    path = tmp_path / "layout.yaml"
    path.write_text(
        """cols: 4
items:
  - {id: a, x: 0, y: 0, w: 2, h: 2}
  - {id: b, x: 2, y: 5, w: 2, h: 1}
  - {id: c, x: 0, y: 2, w: 1, h: 1, minW: 1, maxW: 2}
"""
    )
    return path
