"""Record Sale Use Case: sell a stock item and report why when it cannot."""

from lansky.application.dto.requests import SellItemRequest
from lansky.application.ledger_store import LedgerStore
from lansky.config import get_logger
from lansky.core.entities import Sale
from lansky.core.exceptions import InventoryItemNotFoundError, ValidationError

logger = get_logger(__name__)


class RecordSaleUseCase:
    """Sell an inventory item through the ledger store."""

    def __init__(self, store: LedgerStore | None = None):
        self._store = store

    async def _get_store(self) -> LedgerStore:
        if self._store is None:
            from lansky.application.ledger_store import get_ledger_store

            self._store = await get_ledger_store()
        return self._store

    async def execute(self, item_id: str, request: SellItemRequest) -> Sale:
        """
        Record the sale.

        Raises:
            InventoryItemNotFoundError: if the item does not exist
            ValidationError: if the item is already sold
        """
        store = await self._get_store()
        sale = await store.sell_inventory_item(
            item_id,
            request.date,
            request.platform,
            request.sale_price,
            fees=request.fees,
            shipping_paid=request.shipping_paid,
        )
        if sale is not None:
            return sale

        if store.state.find_item(item_id) is None:
            raise InventoryItemNotFoundError(item_id)
        raise ValidationError("item_id", "Item is already sold", item_id)
