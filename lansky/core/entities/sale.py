"""Sale domain entity."""

import datetime

from lansky.core.entities.base import LedgerEntity, Quarter


class Sale(LedgerEntity):
    """A completed sale of an inventory item.

    Item name, description and purchase price are copied from the source
    item when the sale is recorded. ``net_profit`` and ``quarter`` are
    computed once at that moment and never recomputed.
    """

    id: str
    inventory_item_id: str | None = None
    date: datetime.date
    item_name: str
    description: str | None = None
    platform: str
    purchase_price: float
    sale_price: float
    fees: float
    shipping_paid: float
    net_profit: float
    quarter: Quarter
