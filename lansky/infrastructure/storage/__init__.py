"""Storage infrastructure implementations."""

from lansky.infrastructure.storage.memory import InMemoryKeyValueStore
from lansky.infrastructure.storage.sqlite import SQLiteKeyValueStore, get_kv_store

__all__ = [
    "SQLiteKeyValueStore",
    "InMemoryKeyValueStore",
    "get_kv_store",
]
