"""
Shared aiosqlite connection to the ledger database.

The ledger is four small JSON documents written by a single process, so one
connection is enough. Writes run as ``BEGIN IMMEDIATE`` transactions behind
a lock, which keeps a snapshot write from interleaving with another.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from lansky.config import get_logger, get_settings

logger = get_logger(__name__)


class LedgerDatabase:
    """Lazily opened connection to one ledger file."""

    def __init__(self, db_path: Path, busy_timeout: int = 30000):
        self.db_path = db_path
        self.busy_timeout = busy_timeout
        self._conn: aiosqlite.Connection | None = None
        self._write_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> aiosqlite.Connection:
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            # isolation_level=None: transactions are opened explicitly by writer()
            conn = await aiosqlite.connect(self.db_path, isolation_level=None)
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
            conn.row_factory = aiosqlite.Row
            self._conn = conn
            logger.info("ledger_database_opened", db_path=str(self.db_path))
        return self._conn

    @asynccontextmanager
    async def reader(self) -> AsyncIterator[aiosqlite.Connection]:
        yield await self.open()

    @asynccontextmanager
    async def writer(self) -> AsyncIterator[aiosqlite.Connection]:
        """Run the block in one immediate transaction; roll back if it raises."""
        conn = await self.open()
        async with self._write_lock:
            await conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                await conn.execute("COMMIT")
            except BaseException:
                if conn.in_transaction:
                    await conn.execute("ROLLBACK")
                raise

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("ledger_database_closed", db_path=str(self.db_path))


_database: LedgerDatabase | None = None


def get_database() -> LedgerDatabase:
    """The process-wide database for the configured ledger file."""
    global _database
    if _database is None:
        storage = get_settings().storage
        _database = LedgerDatabase(storage.db_path, busy_timeout=storage.busy_timeout)
    return _database


async def close_database() -> None:
    global _database
    if _database is not None:
        await _database.close()
        _database = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    async with get_database().reader() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    async with get_database().writer() as conn:
        yield conn
