"""Workspace settings entity."""

from enum import Enum

from pydantic import Field, field_validator

from lansky.core.constants import (
    DEFAULT_APP_NAME,
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_PLATFORMS,
    DEFAULT_PRIMARY_COLOR,
)
from lansky.core.entities.base import LedgerEntity


class Theme(str, Enum):
    """Display theme."""

    LIGHT = "light"
    DARK = "dark"


def unique_in_order(values: list[str]) -> list[str]:
    """Drop blank and repeated entries, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


class AppSettings(LedgerEntity):
    """Process-wide workspace configuration."""

    app_name: str = DEFAULT_APP_NAME
    logo_svg_override: str | None = None
    platforms: list[str] = Field(default_factory=lambda: list(DEFAULT_PLATFORMS))
    expense_categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXPENSE_CATEGORIES)
    )
    primary_color: str = Field(
        default=DEFAULT_PRIMARY_COLOR, pattern=r"^#[0-9a-fA-F]{6}$"
    )
    theme: Theme = Theme.LIGHT
    inspection_mode: bool = False

    @field_validator("platforms", "expense_categories")
    @classmethod
    def dedupe(cls, v: list[str]) -> list[str]:
        return unique_in_order(v)
