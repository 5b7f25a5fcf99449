"""Integration test: full app startup against a temporary database."""

from unittest.mock import patch

from fastapi.testclient import TestClient


def test_startup_migrates_and_serves(sqlite_settings, monkeypatch):
    """Lifespan applies migrations, loads the ledger and closes the database."""
    import lansky.infrastructure.storage.sqlite.connection as conn_module
    import lansky.infrastructure.storage.sqlite.migrations.migrator as migrator_module
    from lansky.api.main import app
    from lansky.application import ledger_store as store_module
    from lansky.infrastructure.storage import sqlite as sqlite_package

    monkeypatch.setattr(sqlite_package, "_kv_store", None)
    store_module.reset_ledger_store()
    conn_module._database = None

    with (
        patch.object(conn_module, "get_settings", return_value=sqlite_settings),
        patch.object(migrator_module, "get_settings", return_value=sqlite_settings),
        TestClient(app) as client,
    ):
        seeded = client.post("/api/settings/seed")
        dashboard = client.get("/api/dashboard")

    assert seeded.status_code == 200
    assert dashboard.json()["metrics"]["active_inventory_count"] == 3
    assert sqlite_settings.storage.db_path.exists()
    assert conn_module._database is None
