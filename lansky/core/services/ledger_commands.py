"""
Ledger state transitions.

Each command takes the current LedgerState plus its arguments and returns
the next state together with the command's result. States are never
mutated in place, so a caller can discard the new state (for example when
persisting it fails) and keep the old one intact.

Collections are ordered most-recent-first: new records are prepended.
"""

import uuid
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lansky.core.entities.app_settings import AppSettings, unique_in_order
from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem, ItemStatus
from lansky.core.entities.ledger import LedgerState
from lansky.core.entities.sale import Sale
from lansky.core.exceptions import ConfirmationRequiredError, ValidationError
from lansky.core.services.metrics import compute_net_profit, quarter_of, to_calendar_date
from lansky.core.services.seed import generate_seed_data
from lansky.core.services.state_import import parse_raw_state

IdFactory = Callable[[], str]


def new_id() -> str:
    return str(uuid.uuid4())


def _with_status(
    inventory: list[InventoryItem], item_id: str, status: ItemStatus
) -> list[InventoryItem]:
    return [
        i.model_copy(update={"status": status}) if i.id == item_id else i
        for i in inventory
    ]


# Inventory


def add_inventory_item(
    state: LedgerState,
    item_name: str,
    purchase_price: float,
    purchase_date: date | str,
    description: str | None = None,
    id_factory: IdFactory = new_id,
) -> tuple[LedgerState, InventoryItem]:
    """Add a purchased item as available stock."""
    item = InventoryItem(
        id=id_factory(),
        item_name=item_name,
        description=description,
        purchase_price=purchase_price,
        purchase_date=to_calendar_date(purchase_date),
    )
    return state.model_copy(update={"inventory": [item, *state.inventory]}), item


def sell_inventory_item(
    state: LedgerState,
    item_id: str,
    sale_date: date | str,
    platform: str,
    sale_price: float,
    fees: float = 0.0,
    shipping_paid: float = 0.0,
    id_factory: IdFactory = new_id,
) -> tuple[LedgerState, Sale | None]:
    """
    Record the sale of a stock item.

    The Sale copies the item's name, description and purchase price, and
    the item flips to sold in the same transition. Unknown or already sold
    items leave the state unchanged and return None.
    """
    item = state.find_item(item_id)
    if item is None or not item.is_available:
        return state, None

    sale_date = to_calendar_date(sale_date)

    sale = Sale(
        id=id_factory(),
        inventory_item_id=item.id,
        date=sale_date,
        item_name=item.item_name,
        description=item.description,
        platform=platform,
        purchase_price=item.purchase_price,
        sale_price=sale_price,
        fees=fees,
        shipping_paid=shipping_paid,
        net_profit=compute_net_profit(sale_price, item.purchase_price, fees, shipping_paid),
        quarter=quarter_of(sale_date),
    )

    new_state = state.model_copy(
        update={
            "sales": [sale, *state.sales],
            "inventory": _with_status(state.inventory, item.id, ItemStatus.SOLD),
        }
    )
    return new_state, sale


def delete_inventory_item(state: LedgerState, item_id: str) -> tuple[LedgerState, bool]:
    """Remove an item and every sale recorded against it."""
    if state.find_item(item_id) is None:
        return state, False

    new_state = state.model_copy(
        update={
            "inventory": [i for i in state.inventory if i.id != item_id],
            "sales": [s for s in state.sales if s.inventory_item_id != item_id],
        }
    )
    return new_state, True


# Sales


def delete_sale(state: LedgerState, sale_id: str) -> tuple[LedgerState, bool]:
    """
    Remove a sale and return its item to stock.

    The linked item only goes back to available when it still exists and no
    other sale references it.
    """
    sale = state.find_sale(sale_id)
    if sale is None:
        return state, False

    sales = [s for s in state.sales if s.id != sale_id]
    inventory = state.inventory
    item_id = sale.inventory_item_id
    if item_id and not any(s.inventory_item_id == item_id for s in sales):
        inventory = _with_status(inventory, item_id, ItemStatus.AVAILABLE)

    return state.model_copy(update={"sales": sales, "inventory": inventory}), True


# Expenses


def add_expense(
    state: LedgerState,
    expense_date: date | str,
    category: str,
    amount: float,
    description: str,
    id_factory: IdFactory = new_id,
) -> tuple[LedgerState, Expense]:
    expense_date = to_calendar_date(expense_date)
    expense = Expense(
        id=id_factory(),
        date=expense_date,
        category=category,
        amount=amount,
        description=description,
        quarter=quarter_of(expense_date),
    )
    return state.model_copy(update={"expenses": [expense, *state.expenses]}), expense


def delete_expense(state: LedgerState, expense_id: str) -> tuple[LedgerState, bool]:
    expenses = [e for e in state.expenses if e.id != expense_id]
    if len(expenses) == len(state.expenses):
        return state, False
    return state.model_copy(update={"expenses": expenses}), True


# Settings


def update_settings(
    state: LedgerState, patch: Mapping[str, Any]
) -> tuple[LedgerState, AppSettings]:
    """
    Merge a partial settings update over the current settings.

    Keys may be snake_case or camelCase. The merged result is validated as a
    whole; a rejected patch leaves the state as it was.

    Raises:
        ValidationError: on an unknown key or an invalid merged value
    """
    merged = state.settings.model_dump()
    for key, value in patch.items():
        field = _settings_field(key)
        if field is None:
            raise ValidationError(key, "Unknown settings field", value)
        merged[field] = value

    try:
        settings = AppSettings.model_validate(merged)
    except PydanticValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first["loc"]) or "settings"
        raise ValidationError(loc, first["msg"], first.get("input")) from e
    return state.model_copy(update={"settings": settings}), settings


def _settings_field(key: str) -> str | None:
    for name, info in AppSettings.model_fields.items():
        if key in (name, info.alias):
            return name
    return None


def add_platform(state: LedgerState, platform: str) -> tuple[LedgerState, AppSettings]:
    """Append a sale platform; adding one already present is a no-op."""
    platforms = unique_in_order([*state.settings.platforms, platform])
    return update_settings(state, {"platforms": platforms})


def remove_platform(state: LedgerState, platform: str) -> tuple[LedgerState, AppSettings]:
    platforms = [p for p in state.settings.platforms if p != platform]
    return update_settings(state, {"platforms": platforms})


def add_expense_category(
    state: LedgerState, category: str
) -> tuple[LedgerState, AppSettings]:
    """Append an expense category; adding one already present is a no-op."""
    categories = unique_in_order([*state.settings.expense_categories, category])
    return update_settings(state, {"expense_categories": categories})


def remove_expense_category(
    state: LedgerState, category: str
) -> tuple[LedgerState, AppSettings]:
    categories = [c for c in state.settings.expense_categories if c != category]
    return update_settings(state, {"expense_categories": categories})


# Bulk operations


def seed_demo_data(state: LedgerState) -> LedgerState:
    """Replace the ledger with the demo dataset. Settings are kept."""
    inventory, sales, expenses = generate_seed_data()
    return state.model_copy(
        update={"inventory": inventory, "sales": sales, "expenses": expenses}
    )


def clear_all_data(state: LedgerState, confirm: bool = False) -> LedgerState:
    """
    Empty the three ledger collections. Settings are kept.

    Raises:
        ConfirmationRequiredError: unless confirm is True
    """
    if not confirm:
        raise ConfirmationRequiredError("clear_all_data")
    return state.model_copy(update={"inventory": [], "sales": [], "expenses": []})


def import_raw_state(state: LedgerState, text: str | bytes) -> tuple[LedgerState, list[str]]:
    """
    Replace collections from a raw JSON payload.

    Returns the new state and the names of the replaced collections.

    Raises:
        InvalidImportError: when the payload is rejected (state untouched)
    """
    collections = parse_raw_state(text)
    if not collections:
        return state, []
    return state.model_copy(update=collections), list(collections)
