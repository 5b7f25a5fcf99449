"""Pytest configuration and fixtures."""

import itertools
from collections.abc import AsyncGenerator, Iterator
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lansky.application.ledger_store import LedgerStore
from lansky.config import reset_settings
from lansky.core.entities import LedgerState
from lansky.core.interfaces import ILLMProvider, LLMResponse
from lansky.core.services.in_flight import InFlightGuard
from lansky.infrastructure.storage.memory import InMemoryKeyValueStore


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings are re-read from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def id_factory():
    """Deterministic IDs: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def empty_state() -> LedgerState:
    return LedgerState()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def ledger_store(kv_store, id_factory) -> LedgerStore:
    """A store over an empty in-memory key-value store."""
    return LedgerStore(kv_store, id_factory=id_factory)


@pytest.fixture
def mock_llm() -> AsyncMock:
    llm = AsyncMock(spec=ILLMProvider)
    llm.generate.return_value = LLMResponse(text="**Raise prices**", model="test-model")
    return llm


@pytest.fixture
def guard() -> InFlightGuard:
    return InFlightGuard()


@pytest.fixture
def widget_purchase() -> dict:
    """A stock item bought for 10 on 2024-01-01."""
    return {
        "item_name": "Widget",
        "purchase_price": 10.0,
        "purchase_date": date(2024, 1, 1),
    }


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> MagicMock:
    """Settings pointing the ledger database at a temporary database."""
    mock_settings = MagicMock()
    mock_settings.storage.db_path = tmp_path / "test.db"
    mock_settings.storage.busy_timeout = 5000
    return mock_settings


@pytest_asyncio.fixture
async def sqlite_db(sqlite_settings) -> AsyncGenerator:
    """Migrated temporary database with the connection patched to use it."""
    import lansky.infrastructure.storage.sqlite.connection as conn_module
    from lansky.infrastructure.storage.sqlite.migrations.migrator import initialize_database

    results = await initialize_database(sqlite_settings.storage.db_path)
    assert all(r.success for r in results)

    conn_module._database = None
    with patch.object(conn_module, "get_settings", return_value=sqlite_settings):
        try:
            yield sqlite_settings.storage.db_path
        finally:
            await conn_module.close_database()


@pytest_asyncio.fixture
async def api_client(ledger_store, mock_llm) -> AsyncGenerator[AsyncClient, None]:
    """Async client over the app, with the store and model provider swapped out."""
    from lansky.api.dependencies import get_llm, get_store
    from lansky.api.main import app

    app.dependency_overrides[get_store] = lambda: ledger_store
    app.dependency_overrides[get_llm] = lambda: mock_llm

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
