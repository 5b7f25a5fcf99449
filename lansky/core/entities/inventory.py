"""Inventory domain entities."""

from datetime import date
from enum import Enum

from pydantic import Field

from lansky.core.entities.base import LedgerEntity


class ItemStatus(str, Enum):
    """Sellable state of a stock item."""

    AVAILABLE = "available"
    SOLD = "sold"


class InventoryItem(LedgerEntity):
    """A single purchased item held for resale."""

    id: str
    item_name: str
    description: str | None = None
    purchase_price: float = Field(ge=0)
    purchase_date: date
    status: ItemStatus = ItemStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status == ItemStatus.AVAILABLE
