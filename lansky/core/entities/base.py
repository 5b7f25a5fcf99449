"""Shared configuration for ledger entities."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Quarter = Literal["Q1", "Q2", "Q3", "Q4"]


class LedgerEntity(BaseModel):
    """Immutable record persisted with camelCase keys.

    Accepts both camelCase (persisted / legacy exports) and snake_case input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_document(self) -> dict:
        """Serialize to the persisted JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
