"""Tests for the SQLite key-value store."""

import aiosqlite
import pytest

from lansky.core.exceptions import DatabaseError
from lansky.infrastructure.storage.memory import InMemoryKeyValueStore
from lansky.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore


class TestSQLiteKeyValueStore:
    """Tests for SQLiteKeyValueStore."""

    async def test_missing_key_is_none(self, sqlite_db):
        assert await SQLiteKeyValueStore().get("sales") is None

    async def test_set_and_get(self, sqlite_db):
        store = SQLiteKeyValueStore()
        await store.set("sales", "[]")
        assert await store.get("sales") == "[]"

    async def test_set_many_overwrites(self, sqlite_db):
        store = SQLiteKeyValueStore()
        await store.set_many({"sales": "[]", "settings": "{}"})
        await store.set_many({"sales": '[{"id": "s1"}]'})

        assert await store.get("sales") == '[{"id": "s1"}]'
        assert await store.get("settings") == "{}"
        assert await store.keys() == ["sales", "settings"]

    async def test_values_survive_reopen(self, sqlite_db):
        import lansky.infrastructure.storage.sqlite.connection as conn_module

        await SQLiteKeyValueStore().set("inventory", "[1]")
        await conn_module.close_database()

        assert await SQLiteKeyValueStore().get("inventory") == "[1]"

    async def test_updated_at_recorded(self, sqlite_db):
        await SQLiteKeyValueStore().set("expenses", "[]")

        async with aiosqlite.connect(sqlite_db) as conn:
            cursor = await conn.execute("SELECT updated_at FROM kv_store WHERE key = 'expenses'")
            row = await cursor.fetchone()
        assert row[0]

    async def test_delete(self, sqlite_db):
        store = SQLiteKeyValueStore()
        await store.set("sales", "[]")
        assert await store.delete("sales") is True
        assert await store.delete("sales") is False
        assert await store.get("sales") is None

    async def test_missing_table_raises_database_error(self, sqlite_db):
        async with aiosqlite.connect(sqlite_db) as conn:
            await conn.execute("DROP TABLE kv_store")
            await conn.commit()

        with pytest.raises(DatabaseError) as exc_info:
            await SQLiteKeyValueStore().set_many({"sales": "[]"})
        assert exc_info.value.details["operation"] == "set_many"


class TestInMemoryKeyValueStore:
    async def test_round_trip(self):
        store = InMemoryKeyValueStore({"settings": "{}"})
        await store.set_many({"sales": "[]"})
        assert await store.keys() == ["sales", "settings"]
        assert await store.delete("settings") is True
        assert await store.get("settings") is None
