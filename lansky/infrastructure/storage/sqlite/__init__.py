"""SQLite storage implementations."""

from lansky.infrastructure.storage.sqlite.connection import (
    close_database,
    get_connection,
    get_transaction,
)
from lansky.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore

# Singleton instance
_kv_store: SQLiteKeyValueStore | None = None


async def get_kv_store() -> SQLiteKeyValueStore:
    """Get singleton key-value store instance."""
    global _kv_store
    if _kv_store is None:
        _kv_store = SQLiteKeyValueStore()
    return _kv_store


__all__ = [
    "close_database",
    "get_connection",
    "get_transaction",
    "SQLiteKeyValueStore",
    "get_kv_store",
]
