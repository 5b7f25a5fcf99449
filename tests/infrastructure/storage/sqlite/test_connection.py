"""Tests for the shared ledger database connection."""

import aiosqlite
import pytest

from lansky.infrastructure.storage.sqlite.connection import LedgerDatabase


@pytest.fixture
async def database(tmp_path):
    db = LedgerDatabase(tmp_path / "nested" / "ledger.db", busy_timeout=1000)
    try:
        yield db
    finally:
        await db.close()


async def _create_table(db: LedgerDatabase) -> None:
    async with db.writer() as conn:
        await conn.execute("CREATE TABLE t (v TEXT)")


class TestLedgerDatabase:
    async def test_opens_lazily_and_creates_directory(self, database):
        assert database.is_open is False

        async with database.reader() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            mode = (await cursor.fetchone())[0]

        assert database.is_open is True
        assert mode == "wal"
        assert database.db_path.exists()

    async def test_writer_commits(self, database):
        await _create_table(database)
        async with database.writer() as conn:
            await conn.execute("INSERT INTO t VALUES ('a')")

        async with aiosqlite.connect(database.db_path) as other:
            cursor = await other.execute("SELECT v FROM t")
            assert await cursor.fetchall() == [("a",)]

    async def test_writer_rolls_back_on_error(self, database):
        await _create_table(database)

        with pytest.raises(RuntimeError):
            async with database.writer() as conn:
                await conn.execute("INSERT INTO t VALUES ('a')")
                raise RuntimeError("boom")

        async with database.reader() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM t")
            assert (await cursor.fetchone())[0] == 0
            assert conn.in_transaction is False

    async def test_close_then_reopen(self, database):
        await _create_table(database)
        await database.close()
        assert database.is_open is False

        async with database.reader() as conn:
            cursor = await conn.execute("SELECT name FROM sqlite_master WHERE name = 't'")
            assert await cursor.fetchone() is not None
