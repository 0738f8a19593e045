"""Configuration management for grid-layout.

Loads grid defaults from environment variables or a .env file. The
engine functions always take ``cols`` and ``vertical_compact`` as
arguments; these settings only feed the CLI and ``GridSession``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from grid_layout.exceptions import ConfigurationError


class GridSettings(BaseSettings):
    """Grid defaults loaded from environment variables and .env files.

    Priority (highest to lowest):
      1. Explicit constructor arguments
      2. Environment variables (GRID_LAYOUT_COLS, GRID_LAYOUT_VERTICAL_COMPACT, ...)
      3. .env file in current directory
    """

    model_config = SettingsConfigDict(
        env_prefix="GRID_LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cols: Annotated[int, Field(description="Number of grid columns")] = 12
    vertical_compact: Annotated[
        bool, Field(description="Float items up to remove empty rows")
    ] = True

    # Size given to new items that declare none
    default_w: Annotated[int, Field(description="Default width of new items")] = 1
    default_h: Annotated[int, Field(description="Default height of new items")] = 1

    # Only used for container height
    row_height: Annotated[int, Field(description="Row height in pixels")] = 150
    margin: Annotated[int, Field(description="Vertical margin in pixels")] = 10

    @field_validator("cols", "default_w")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    @field_validator("default_h", "row_height", "margin")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"must be >= 0, got {v}")
        return v


# Singleton-ish: lazily loaded on first access
_settings: GridSettings | None = None


def get_settings(**overrides: object) -> GridSettings:
    """Get or create the settings singleton.

    Raises:
        ConfigurationError: If a setting has an invalid value.
    """
    global _settings
    if _settings is None or overrides:
        try:
            _settings = GridSettings(**overrides)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid grid-layout settings: {e}") from e
    return _settings


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    global _settings
    _settings = None
