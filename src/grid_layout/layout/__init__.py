"""Grid layout engine: items, collision cascade, compaction, reconciliation."""

from grid_layout.layout.cascade import move_element, resize_element
from grid_layout.layout.compactor import compact, resolve_overlaps
from grid_layout.layout.geometry import bottom, collides, correct_bounds, get_all_collisions, get_first_collision
from grid_layout.layout.item import ChildSpec, LayoutItem, Placeholder
from grid_layout.layout.reconciler import find_first_fit, synchronize_layout_with_children
from grid_layout.layout.session import GridSession, LayoutChange
from grid_layout.layout.store import Layout
from grid_layout.layout.validator import ValidationResult, check_layout, validate_layout

__all__ = [
    "ChildSpec",
    "GridSession",
    "Layout",
    "LayoutChange",
    "LayoutItem",
    "Placeholder",
    "ValidationResult",
    "bottom",
    "check_layout",
    "collides",
    "compact",
    "correct_bounds",
    "find_first_fit",
    "get_all_collisions",
    "get_first_collision",
    "move_element",
    "resize_element",
    "resolve_overlaps",
    "synchronize_layout_with_children",
    "validate_layout",
]
