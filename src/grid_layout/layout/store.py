"""Ordered, identity-keyed collection of layout items.

A ``Layout`` keeps two things apart: a mapping from identity to item,
used for lookups, and an explicit tuple of identities, which is the
priority order compaction and first-fit placement rely on. It is an
immutable value; "mutations" return a new ``Layout``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from grid_layout.exceptions import ItemNotFoundError, LayoutValidationError
from grid_layout.layout.item import ItemId, LayoutItem


class Layout:
    """Immutable ordered sequence of ``LayoutItem`` keyed by identity."""

    __slots__ = ("_items", "_order")

    def __init__(self, items: Iterable[LayoutItem] = ()):
        by_id: dict[ItemId, LayoutItem] = {}
        order: list[ItemId] = []
        for item in items:
            if item.id in by_id:
                raise LayoutValidationError("id", f"duplicate item identity {item.id!r}")
            by_id[item.id] = item
            order.append(item.id)
        self._items = by_id
        self._order = tuple(order)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any] | LayoutItem], context: str = "layout") -> Layout:
        """Validate raw item records and build a Layout from them."""
        from grid_layout.layout.validator import validate_layout

        records = list(records)
        validate_layout(records, context)
        return cls(
            r if isinstance(r, LayoutItem) else LayoutItem.model_validate(dict(r))
            for r in records
        )

    # -- Read access -----------------------------------------------------

    @property
    def ids(self) -> tuple[ItemId, ...]:
        return self._order

    @property
    def items(self) -> list[LayoutItem]:
        return [self._items[i] for i in self._order]

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[LayoutItem]:
        for item_id in self._order:
            yield self._items[item_id]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __getitem__(self, item_id: ItemId) -> LayoutItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def get(self, item_id: ItemId) -> LayoutItem | None:
        return self._items.get(item_id)

    def index(self, item_id: ItemId) -> int:
        """Position of ``item_id`` in layout order."""
        try:
            return self._order.index(item_id)
        except ValueError:
            raise ItemNotFoundError(item_id) from None

    def bottom(self) -> int:
        """Lowest occupied row boundary (max ``y + h``), 0 for an empty layout."""
        return max((item.bottom for item in self), default=0)

    # -- Derivation ------------------------------------------------------

    def replace(self, item: LayoutItem) -> Layout:
        """Return a new Layout with ``item`` substituted for its identity."""
        return self.replace_many({item.id: item})

    def replace_many(self, updates: Mapping[ItemId, LayoutItem]) -> Layout:
        """Substitute several items at once, keeping layout order."""
        for item_id in updates:
            if item_id not in self._items:
                raise ItemNotFoundError(item_id)
        return Layout(updates.get(i, self._items[i]) for i in self._order)

    def clone(self) -> Layout:
        return Layout(self)

    def to_records(self) -> list[dict[str, Any]]:
        return [item.to_record() for item in self]

    # -- Value semantics -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self._order == other._order and self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        inner = ", ".join(f"{i.id!r}@({i.x},{i.y} {i.w}x{i.h})" for i in self)
        return f"Layout([{inner}])"
