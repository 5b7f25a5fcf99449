"""
Ledger store.

Holds the current LedgerState, applies the pure commands from
``lansky.core.services.ledger_commands`` one at a time and persists the
full snapshot (``sales``, ``expenses``, ``inventory``, ``settings``)
after every change. The new state only becomes current once the snapshot
write has succeeded.
"""

import asyncio
import json
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from lansky.config import get_logger
from lansky.core.constants import (
    EXPENSES_KEY,
    INVENTORY_KEY,
    SALES_KEY,
    SETTINGS_KEY,
)
from lansky.core.entities import (
    AppSettings,
    Expense,
    InventoryItem,
    LedgerState,
    Sale,
)
from lansky.core.exceptions import InvalidImportError
from lansky.core.interfaces.storage import IKeyValueStore
from lansky.core.services import ledger_commands as commands
from lansky.core.services.state_import import decode_collection

logger = get_logger(__name__)

T = TypeVar("T")


def _paired(state: LedgerState) -> tuple[LedgerState, LedgerState]:
    return state, state


def snapshot_documents(state: LedgerState) -> dict[str, str]:
    """The four persisted documents for a state, as JSON text."""
    collections = state.raw_collections()
    return {
        SALES_KEY: json.dumps(collections[SALES_KEY]),
        EXPENSES_KEY: json.dumps(collections[EXPENSES_KEY]),
        INVENTORY_KEY: json.dumps(collections[INVENTORY_KEY]),
        SETTINGS_KEY: json.dumps(state.settings.to_document()),
    }


class LedgerStore:
    """Serialized, persisted access to the ledger state."""

    def __init__(
        self,
        kv_store: IKeyValueStore,
        id_factory: commands.IdFactory = commands.new_id,
    ):
        self._kv_store = kv_store
        self._id_factory = id_factory
        self._state = LedgerState()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> LedgerState:
        return self._state

    async def load(self) -> LedgerState:
        """
        Read each persisted key independently.

        A missing key keeps its default. A key holding malformed JSON or an
        invalid document also keeps its default and is logged.
        """
        update: dict[str, Any] = {}

        for key in (SALES_KEY, EXPENSES_KEY, INVENTORY_KEY, SETTINGS_KEY):
            raw = await self._kv_store.get(key)
            if raw is None:
                continue
            try:
                document = json.loads(raw)
                if key == SETTINGS_KEY:
                    update[key] = AppSettings.model_validate(document)
                else:
                    update[key] = decode_collection(key, document)
            except (json.JSONDecodeError, InvalidImportError, PydanticValidationError) as e:
                logger.warning("ledger_key_load_failed", key=key, error=str(e))

        async with self._lock:
            self._state = LedgerState().model_copy(update=update)

        logger.info(
            "ledger_loaded",
            keys=list(update),
            inventory=len(self._state.inventory),
            sales=len(self._state.sales),
            expenses=len(self._state.expenses),
        )
        return self._state

    async def _persist(self, state: LedgerState) -> None:
        await self._kv_store.set_many(snapshot_documents(state))
        logger.debug("ledger_snapshot_persisted")

    async def _apply(self, transition: Callable[[LedgerState], tuple[LedgerState, T]]) -> T:
        """Run one transition and persist its result before making it current."""
        async with self._lock:
            new_state, result = transition(self._state)
            if new_state is not self._state:
                await self._persist(new_state)
                self._state = new_state
            return result

    # Inventory

    async def add_inventory_item(
        self,
        item_name: str,
        purchase_price: float,
        purchase_date: date | str,
        description: str | None = None,
    ) -> InventoryItem:
        item = await self._apply(
            lambda s: commands.add_inventory_item(
                s,
                item_name,
                purchase_price,
                purchase_date,
                description=description,
                id_factory=self._id_factory,
            )
        )
        logger.info("inventory_item_added", item_id=item.id, purchase_price=item.purchase_price)
        return item

    async def sell_inventory_item(
        self,
        item_id: str,
        sale_date: date | str,
        platform: str,
        sale_price: float,
        fees: float = 0.0,
        shipping_paid: float = 0.0,
    ) -> Sale | None:
        """Record a sale. Returns None when the item is unknown or sold."""
        sale = await self._apply(
            lambda s: commands.sell_inventory_item(
                s,
                item_id,
                sale_date,
                platform,
                sale_price,
                fees,
                shipping_paid,
                id_factory=self._id_factory,
            )
        )
        if sale is None:
            logger.info("sale_skipped", item_id=item_id)
        else:
            logger.info(
                "sale_recorded",
                sale_id=sale.id,
                item_id=item_id,
                net_profit=sale.net_profit,
                quarter=sale.quarter,
            )
        return sale

    async def delete_inventory_item(self, item_id: str) -> bool:
        deleted = await self._apply(lambda s: commands.delete_inventory_item(s, item_id))
        if deleted:
            logger.info("inventory_item_deleted", item_id=item_id)
        return deleted

    # Sales

    async def delete_sale(self, sale_id: str) -> bool:
        deleted = await self._apply(lambda s: commands.delete_sale(s, sale_id))
        if deleted:
            logger.info("sale_deleted", sale_id=sale_id)
        return deleted

    # Expenses

    async def add_expense(
        self,
        expense_date: date | str,
        category: str,
        amount: float,
        description: str,
    ) -> Expense:
        expense = await self._apply(
            lambda s: commands.add_expense(
                s,
                expense_date,
                category,
                amount,
                description,
                id_factory=self._id_factory,
            )
        )
        logger.info("expense_added", expense_id=expense.id, amount=expense.amount)
        return expense

    async def delete_expense(self, expense_id: str) -> bool:
        deleted = await self._apply(lambda s: commands.delete_expense(s, expense_id))
        if deleted:
            logger.info("expense_deleted", expense_id=expense_id)
        return deleted

    # Settings

    async def update_settings(self, patch: Mapping[str, Any]) -> AppSettings:
        settings = await self._apply(lambda s: commands.update_settings(s, patch))
        logger.info("settings_updated", fields=list(patch))
        return settings

    async def add_platform(self, platform: str) -> AppSettings:
        return await self._apply(lambda s: commands.add_platform(s, platform))

    async def remove_platform(self, platform: str) -> AppSettings:
        return await self._apply(lambda s: commands.remove_platform(s, platform))

    async def add_expense_category(self, category: str) -> AppSettings:
        return await self._apply(lambda s: commands.add_expense_category(s, category))

    async def remove_expense_category(self, category: str) -> AppSettings:
        return await self._apply(lambda s: commands.remove_expense_category(s, category))

    # Bulk

    async def seed_demo_data(self) -> LedgerState:
        state = await self._apply(lambda s: _paired(commands.seed_demo_data(s)))
        logger.info("ledger_seeded", inventory=len(state.inventory), sales=len(state.sales))
        return state

    async def clear_all_data(self, confirm: bool = False) -> LedgerState:
        """
        Empty the ledger collections.

        Raises:
            ConfirmationRequiredError: unless confirm is True
        """
        state = await self._apply(lambda s: _paired(commands.clear_all_data(s, confirm)))
        logger.warning("ledger_cleared")
        return state

    async def import_raw_state(self, text: str | bytes) -> list[str]:
        """
        Replace collections from raw JSON.

        Raises:
            InvalidImportError: when rejected; the state is left untouched
        """
        replaced = await self._apply(lambda s: commands.import_raw_state(s, text))
        logger.warning("ledger_state_imported", collections=replaced)
        return replaced

    def export_raw_state(self) -> dict[str, list[dict]]:
        """Current collections in their persisted shape."""
        return self._state.raw_collections()


# Singleton instance
_ledger_store: LedgerStore | None = None


async def get_ledger_store() -> LedgerStore:
    """Get the loaded store backed by the SQLite key-value store."""
    global _ledger_store
    if _ledger_store is None:
        from lansky.infrastructure.storage.sqlite import get_kv_store

        store = LedgerStore(await get_kv_store())
        await store.load()
        _ledger_store = store
    return _ledger_store


def reset_ledger_store() -> None:
    """Drop the singleton (for tests)."""
    global _ledger_store
    _ledger_store = None
