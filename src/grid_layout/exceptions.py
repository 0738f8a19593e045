"""Custom exception hierarchy for grid-layout."""

from __future__ import annotations

from typing import Any


class GridLayoutError(Exception):
    """Base exception for all grid-layout errors."""


class LayoutValidationError(GridLayoutError):
    """A layout failed structural validation and must not be used."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class ItemNotFoundError(GridLayoutError):
    """No item with the given identity exists in the layout."""

    def __init__(self, item_id: Any):
        self.item_id = item_id
        super().__init__(f"Layout item not found: {item_id!r}")


class ConfigurationError(GridLayoutError):
    """Missing or invalid configuration."""


class LayoutFileError(GridLayoutError):
    """Error reading or parsing a layout file."""
