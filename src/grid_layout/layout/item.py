"""Core data models for grid items.

A ``LayoutItem`` is one rectangle on the integer grid. Items are frozen:
every engine operation produces new item values with ``model_copy``
rather than mutating a record another caller may still hold.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

ItemId = Union[str, int]


class LayoutItem(BaseModel):
    """One managed rectangle on the grid."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: ItemId
    x: int = 0  # Column origin
    y: int = 0  # Row origin
    w: int = 1  # Width in columns
    h: int = 1  # Height in rows (0 = natural-height placeholder)
    min_w: int | None = Field(default=None, alias="minW")
    max_w: int | None = Field(default=None, alias="maxW")
    min_h: int | None = Field(default=None, alias="minH")
    max_h: int | None = Field(default=None, alias="maxH")
    static: bool = False
    is_draggable: bool | None = Field(default=None, alias="isDraggable")
    is_resizable: bool | None = Field(default=None, alias="isResizable")

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def right(self) -> int:
        return self.x + self.w

    def draggable(self, default: bool = True) -> bool:
        """Whether the item can be dragged, given the container default."""
        if self.static:
            return False
        return default if self.is_draggable is None else self.is_draggable

    def resizable(self, default: bool = True) -> bool:
        """Whether the item can be resized, given the container default."""
        if self.static:
            return False
        return default if self.is_resizable is None else self.is_resizable

    def at(self, x: int | None = None, y: int | None = None) -> LayoutItem:
        """Return a copy moved to ``(x, y)``; ``None`` keeps that axis."""
        update: dict[str, int] = {}
        if x is not None and x != self.x:
            update["x"] = x
        if y is not None and y != self.y:
            update["y"] = y
        return self.model_copy(update=update) if update else self

    def to_record(self) -> dict[str, Any]:
        """Plain dict with the camelCase keys used by grid front ends."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ChildSpec(BaseModel):
    """An entry of the managed item set handed to the reconciler.

    Only ``id`` is required. Any geometry the managed item declares
    itself overrides what a previous layout stored for it.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: ItemId
    x: int | None = None
    y: int | None = None
    w: int | None = None
    h: int | None = None
    min_w: int | None = Field(default=None, alias="minW")
    max_w: int | None = Field(default=None, alias="maxW")
    min_h: int | None = Field(default=None, alias="minH")
    max_h: int | None = Field(default=None, alias="maxH")
    static: bool | None = None
    is_draggable: bool | None = Field(default=None, alias="isDraggable")
    is_resizable: bool | None = Field(default=None, alias="isResizable")

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None

    def overrides(self) -> dict[str, Any]:
        """Fields explicitly declared on the child (``id`` excluded)."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class Placeholder(BaseModel):
    """Display-only rectangle shown while an item is dragged or resized."""

    model_config = ConfigDict(frozen=True)

    id: ItemId
    x: int
    y: int
    w: int
    h: int
    placeholder: bool = True

    @classmethod
    def of(cls, item: LayoutItem, w: int | None = None, h: int | None = None) -> Placeholder:
        return cls(
            id=item.id,
            x=item.x,
            y=item.y,
            w=item.w if w is None else w,
            h=item.h if h is None else h,
        )
