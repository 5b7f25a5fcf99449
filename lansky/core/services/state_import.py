"""
Decoding of raw ledger documents.

Used both when loading persisted keys and when an administrator injects a
raw state payload. Every collection is validated against its entity shape
before it is accepted.
"""

import json
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lansky.core.constants import EXPENSES_KEY, INVENTORY_KEY, SALES_KEY
from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem
from lansky.core.entities.sale import Sale
from lansky.core.exceptions import InvalidImportError

COLLECTION_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    SALES_KEY: TypeAdapter(list[Sale]),
    EXPENSES_KEY: TypeAdapter(list[Expense]),
    INVENTORY_KEY: TypeAdapter(list[InventoryItem]),
}


def decode_collection(key: str, value: Any) -> list:
    """
    Validate one collection document.

    Raises:
        InvalidImportError: if the value does not match the entity shape
    """
    adapter = COLLECTION_ADAPTERS[key]
    try:
        return adapter.validate_python(value)
    except PydanticValidationError as e:
        raise InvalidImportError(
            f"'{key}' does not match the expected shape ({e.error_count()} errors)",
            key=key,
        ) from e


def parse_raw_state(text: str | bytes) -> dict[str, list]:
    """
    Parse a raw state payload into validated collections.

    Only keys present (and not null) in the payload are returned, so callers
    replace just those collections.

    Raises:
        InvalidImportError: on malformed JSON, a non-object payload, or a
            collection that fails validation
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidImportError(f"Invalid JSON structure: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidImportError(
            "Expected a JSON object with 'sales', 'expenses' or 'inventory'"
        )

    collections: dict[str, list] = {}
    for key in COLLECTION_ADAPTERS:
        if payload.get(key) is not None:
            collections[key] = decode_collection(key, payload[key])
    return collections
