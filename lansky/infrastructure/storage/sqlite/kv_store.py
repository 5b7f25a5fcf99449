"""SQLite implementation of the key-value document store."""

from datetime import UTC, datetime

import aiosqlite

from lansky.config import get_logger
from lansky.core.exceptions import DatabaseError
from lansky.core.interfaces.storage import IKeyValueStore
from lansky.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

_UPSERT = """
    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
"""


class SQLiteKeyValueStore(IKeyValueStore):
    """Stores JSON documents in the ``kv_store`` table."""

    async def get(self, key: str) -> str | None:
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("get", str(e)) from e
        return row["value"] if row else None

    async def set(self, key: str, value: str) -> None:
        await self.set_many({key: value})

    async def set_many(self, values: dict[str, str]) -> None:
        """Write all values in a single transaction."""
        now = datetime.now(UTC).isoformat()
        try:
            async with get_transaction() as conn:
                await conn.executemany(
                    _UPSERT, [(key, value, now) for key, value in values.items()]
                )
        except aiosqlite.Error as e:
            logger.error("kv_store_write_failed", keys=list(values), error=str(e))
            raise DatabaseError("set_many", str(e)) from e

        logger.debug("kv_store_written", keys=list(values))

    async def delete(self, key: str) -> bool:
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                deleted = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e

        if deleted:
            logger.info("kv_store_key_deleted", key=key)
        return deleted

    async def keys(self) -> list[str]:
        try:
            async with get_connection() as conn:
                cursor = await conn.execute("SELECT key FROM kv_store ORDER BY key")
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("keys", str(e)) from e
        return [row["key"] for row in rows]
