"""Read and write layouts as plain item records, JSON or YAML.

A layout document is either a list of item records or a mapping with
the list under ``items`` (other keys, such as ``cols``, are returned
alongside). Records use the camelCase keys grid front ends exchange
(``minW``, ``isDraggable``, ...).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from grid_layout.exceptions import LayoutFileError
from grid_layout.layout.store import Layout


class LayoutSerializer:
    """Convert ``Layout`` values to and from documents."""

    @staticmethod
    def to_records(layout: Layout) -> list[dict[str, Any]]:
        return layout.to_records()

    @staticmethod
    def from_records(records: Any, context: str = "layout") -> Layout:
        """Validate and build a Layout from a record list or ``{"items": [...]}``."""
        items = LayoutSerializer.extract_items(records)
        return Layout.from_records(items, context)

    @staticmethod
    def to_json(layout: Layout, indent: int | None = 2) -> str:
        return json.dumps(layout.to_records(), indent=indent)

    @staticmethod
    def from_json(json_str: str) -> Layout:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise LayoutFileError(f"Invalid JSON: {e}") from e
        return LayoutSerializer.from_records(data)

    @staticmethod
    def to_yaml(layout: Layout) -> str:
        return yaml.dump(layout.to_records(), default_flow_style=False, sort_keys=False)

    @staticmethod
    def from_yaml(yaml_str: str) -> Layout:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise LayoutFileError(f"Invalid YAML: {e}") from e
        return LayoutSerializer.from_records(data)

    @staticmethod
    def read_document(path: Path) -> Any:
        """Parse a layout file without validating it.

        ``.json`` files are parsed as JSON, everything else as YAML (a
        superset of JSON).
        """
        if not path.exists():
            raise LayoutFileError(f"Layout file not found: {path}")
        text = path.read_text(encoding="utf-8")
        try:
            return json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise LayoutFileError(f"Could not parse {path}: {e}") from e

    @staticmethod
    def load(path: Path) -> tuple[Layout, dict[str, Any]]:
        """Load a layout file; returns the layout and any extra document keys."""
        data = LayoutSerializer.read_document(path)
        extra = {k: v for k, v in data.items() if k != "items"} if isinstance(data, dict) else {}
        return LayoutSerializer.from_records(data, context=path.name), extra

    @staticmethod
    def extract_items(data: Any) -> list[Any]:
        if data is None:
            return []
        if isinstance(data, dict):
            if "items" not in data:
                raise LayoutFileError("Layout mapping must contain an 'items' list")
            data = data["items"] or []
        if not isinstance(data, list):
            raise LayoutFileError(f"Layout must be a list of items, got {type(data).__name__}")
        return data
