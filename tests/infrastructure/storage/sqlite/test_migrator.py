"""Unit tests for database migrator."""

from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

from lansky.infrastructure.storage.sqlite.migrations import migrator
from lansky.infrastructure.storage.sqlite.migrations.migrator import (
    MigrationInfo,
    discover_migrations,
    get_migration_status,
    initialize_database,
)


class TestMigrationInfo:
    """Tests for MigrationInfo dataclass."""

    def test_from_file_parses_filename(self, tmp_path: Path):
        """from_file() parses version and name from filename."""
        migration_file = tmp_path / "v002_add_index.sql"
        migration_file.write_text("SELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "002"
        assert info.name == "add_index"
        assert len(info.checksum) == 16  # First 16 chars of SHA-256

    def test_invalid_filename(self, tmp_path: Path):
        bad = tmp_path / "add_index.sql"
        bad.write_text("SELECT 1;")
        with pytest.raises(ValueError):
            MigrationInfo.from_file(bad)


class TestDiscoverMigrations:
    def test_bundled_migrations(self):
        versions = [m.version for m in discover_migrations()]
        assert versions[0] == "001"
        assert versions == sorted(versions)


class TestInitializeDatabase:
    async def test_creates_kv_store(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"

        results = await initialize_database(db_path)

        assert [r.version for r in results] == ["001"]
        assert all(r.success for r in results)
        async with aiosqlite.connect(db_path) as conn:
            cursor = await conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='kv_store'"
            )
            assert await cursor.fetchone() is not None

    async def test_second_run_is_a_no_op(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"
        await initialize_database(db_path)
        assert await initialize_database(db_path) == []

    async def test_stops_at_first_failure(self, tmp_path: Path):
        migrations_dir = tmp_path / "migrations"
        migrations_dir.mkdir()
        (migrations_dir / "v001_ok.sql").write_text(
            "CREATE TABLE schema_migrations (version TEXT PRIMARY KEY, name TEXT, "
            "checksum TEXT, execution_time_ms INTEGER);"
        )
        (migrations_dir / "v002_broken.sql").write_text("CREATE TABLE oops (;")
        (migrations_dir / "v003_never.sql").write_text("SELECT 1;")

        with patch.object(migrator, "MIGRATIONS_DIR", migrations_dir):
            results = await initialize_database(tmp_path / "ledger.db")

        assert [(r.version, r.success) for r in results] == [("001", True), ("002", False)]
        assert results[1].error

    async def test_status(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"

        before = await get_migration_status(db_path)
        assert before["exists"] is False
        assert "001" in before["pending_migrations"]

        await initialize_database(db_path)
        after = await get_migration_status(db_path)
        assert after["applied_migrations"] == ["001"]
        assert after["pending_migrations"] == []
