"""Ledger snapshot entity."""

from pydantic import BaseModel, ConfigDict, Field

from lansky.core.entities.app_settings import AppSettings
from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem
from lansky.core.entities.sale import Sale


class LedgerState(BaseModel):
    """Complete application state: the ledger plus workspace settings.

    Collections are ordered most-recent-first. Commands never mutate a
    state in place; they build a new one with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    inventory: list[InventoryItem] = Field(default_factory=list)
    sales: list[Sale] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    settings: AppSettings = Field(default_factory=AppSettings)

    def find_item(self, item_id: str) -> InventoryItem | None:
        return next((i for i in self.inventory if i.id == item_id), None)

    def find_sale(self, sale_id: str) -> Sale | None:
        return next((s for s in self.sales if s.id == sale_id), None)

    @property
    def available_inventory(self) -> list[InventoryItem]:
        return [i for i in self.inventory if i.is_available]

    def raw_collections(self) -> dict[str, list[dict]]:
        """Ledger collections in their persisted shape."""
        return {
            "sales": [s.to_document() for s in self.sales],
            "expenses": [e.to_document() for e in self.expenses],
            "inventory": [i.to_document() for i in self.inventory],
        }
