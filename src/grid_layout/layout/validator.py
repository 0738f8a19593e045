"""Structural validation for layouts coming from outside the engine.

``validate_layout`` raises on the first structural problem: a missing
field, a non-numeric or negative coordinate, a non-boolean ``static``,
or a duplicated identity. ``check_layout`` collects every problem, and
also warns about geometry the engine would correct silently (items out
of the grid, overlapping items).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from grid_layout.exceptions import LayoutValidationError
from grid_layout.layout.geometry import collides
from grid_layout.layout.item import LayoutItem

REQUIRED_FIELDS = ("id", "x", "y", "w", "h")
NUMERIC_FIELDS = ("x", "y", "w", "h")


@dataclass
class ValidationResult:
    """Result of layout validation."""

    valid: bool = True
    errors: list[LayoutValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: LayoutValidationError) -> None:
        self.errors.append(error)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def validate_layout(layout: Iterable[Mapping[str, Any] | LayoutItem], context: str = "layout") -> None:
    """Raise ``LayoutValidationError`` if the layout is structurally invalid.

    Args:
        layout: Item records (mappings) or ``LayoutItem`` values.
        context: Name used as the prefix of the reported field path.
    """
    for error in _structural_errors(layout, context):
        raise error


def check_layout(
    layout: Iterable[Mapping[str, Any] | LayoutItem],
    cols: int | None = None,
    context: str = "layout",
) -> ValidationResult:
    """Collect structural errors and geometry warnings without raising.

    Args:
        layout: Item records (mappings) or ``LayoutItem`` values.
        cols: If given, items reaching past the grid width are reported.
        context: Name used as the prefix of the reported field path.
    """
    records = list(layout)
    result = ValidationResult()
    for error in _structural_errors(records, context):
        result.add_error(error)
    if not result.valid:
        return result

    items = [r if isinstance(r, LayoutItem) else LayoutItem.model_validate(dict(r)) for r in records]
    for item in items:
        if cols is not None and item.x + item.w > cols:
            result.add_warning(
                f"Item {item.id!r} extends beyond grid: x({item.x}) + w({item.w}) > {cols}"
            )
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if a.static and b.static:
                continue
            if collides(a, b):
                result.add_warning(f"Items {a.id!r} and {b.id!r} overlap")
    return result


def _structural_errors(layout: Iterable[Mapping[str, Any] | LayoutItem], context: str):
    seen: set[Any] = set()
    for index, record in enumerate(layout):
        prefix = f"{context}[{index}]"
        if isinstance(record, LayoutItem):
            record = record.model_dump()
        elif not isinstance(record, Mapping):
            yield LayoutValidationError(prefix, f"expected an item mapping, got {type(record).__name__}")
            continue

        missing = [name for name in REQUIRED_FIELDS if record.get(name) is None]
        if missing:
            yield LayoutValidationError(f"{prefix}.{missing[0]}", "required field is missing")
            continue

        bad = False
        for name in NUMERIC_FIELDS:
            value = record[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
                yield LayoutValidationError(f"{prefix}.{name}", f"must be a number, got {value!r}")
                bad = True
            elif isinstance(value, float) and not value.is_integer():
                yield LayoutValidationError(f"{prefix}.{name}", f"must be a whole number, got {value!r}")
                bad = True
            elif value < 0:
                yield LayoutValidationError(f"{prefix}.{name}", f"must not be negative, got {value!r}")
                bad = True
        if bad:
            continue

        static = record.get("static")
        if static is not None and not isinstance(static, bool):
            yield LayoutValidationError(f"{prefix}.static", f"must be a boolean, got {static!r}")
            continue

        item_id = record["id"]
        if isinstance(item_id, bool) or not isinstance(item_id, (str, int)):
            yield LayoutValidationError(f"{prefix}.id", f"must be a string or integer, got {type(item_id).__name__}")
            continue
        if item_id in seen:
            yield LayoutValidationError(f"{prefix}.id", f"duplicate item identity {item_id!r}")
            continue
        seen.add(item_id)
