"""Integration tests: ledger store over real storage."""

import json
from unittest.mock import AsyncMock

import pytest

from lansky.application.ledger_store import LedgerStore, snapshot_documents
from lansky.core.entities import ItemStatus, LedgerState, Theme
from lansky.core.exceptions import DatabaseError, InvalidImportError
from lansky.core.services import ledger_commands as commands
from lansky.infrastructure.storage.memory import InMemoryKeyValueStore
from lansky.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore


class TestSQLiteRoundTrip:
    async def test_state_survives_reload(self, sqlite_db, id_factory, widget_purchase):
        store = LedgerStore(SQLiteKeyValueStore(), id_factory=id_factory)
        await store.load()

        item = await store.add_inventory_item(**widget_purchase)
        await store.sell_inventory_item(item.id, "2024-02-10", "eBay", 25, fees=2.5, shipping_paid=5)
        await store.add_expense("2024-03-01", "Other", 4, "Stamps")
        await store.update_settings({"theme": "dark", "app_name": "Widget World"})

        reloaded = LedgerStore(SQLiteKeyValueStore())
        state = await reloaded.load()

        assert state == store.state
        assert state.sales[0].net_profit == 7.5
        assert state.inventory[0].status == ItemStatus.SOLD
        assert state.settings.theme == Theme.DARK

    async def test_persisted_documents_are_camel_case(self, sqlite_db):
        store = LedgerStore(SQLiteKeyValueStore())
        await store.seed_demo_data()

        raw = await SQLiteKeyValueStore().get("sales")
        assert json.loads(raw)[0]["netProfit"] == 14.15
        settings = json.loads(await SQLiteKeyValueStore().get("settings"))
        assert settings["appName"] == "Lansky"


class TestLoad:
    async def test_missing_keys_keep_defaults(self, kv_store):
        state = await LedgerStore(kv_store).load()
        assert state.inventory == []
        assert state.settings.app_name == "Lansky"

    async def test_corrupt_key_falls_back_alone(self):
        documents = snapshot_documents(commands.seed_demo_data(LedgerState()))
        documents["inventory"] = "{not json"
        documents["expenses"] = json.dumps([{"id": "broken"}])

        state = await LedgerStore(InMemoryKeyValueStore(documents)).load()

        assert state.inventory == []
        assert state.expenses == []
        assert [s.id for s in state.sales] == ["s1", "s2"]

    async def test_legacy_settings_document(self):
        kv = InMemoryKeyValueStore({"settings": json.dumps({"appName": "Old Shop", "platforms": ["eBay", "eBay"]})})
        state = await LedgerStore(kv).load()
        assert state.settings.app_name == "Old Shop"
        assert state.settings.platforms == ["eBay"]


class TestWriteFailures:
    async def test_failed_write_keeps_previous_state(self, id_factory, widget_purchase):
        kv = InMemoryKeyValueStore()
        store = LedgerStore(kv, id_factory=id_factory)
        await store.add_inventory_item(**widget_purchase)
        before = store.state

        kv.set_many = AsyncMock(side_effect=DatabaseError("set_many", "disk I/O error"))
        with pytest.raises(DatabaseError):
            await store.sell_inventory_item("id-1", "2024-02-10", "eBay", 25)

        assert store.state is before
        assert store.state.find_item("id-1").is_available

    async def test_rejected_import_writes_nothing(self, ledger_store, kv_store):
        await ledger_store.seed_demo_data()
        snapshot = dict(kv_store.data)

        with pytest.raises(InvalidImportError):
            await ledger_store.import_raw_state(b'{"sales": [{"id": 1}]}')

        assert kv_store.data == snapshot

    async def test_no_op_skips_write(self, ledger_store, kv_store):
        kv_store.set_many = AsyncMock()
        assert await ledger_store.delete_sale("missing") is False
        kv_store.set_many.assert_not_awaited()


class TestEveryChangeIsPersisted:
    async def test_snapshot_written_after_each_command(self, ledger_store, kv_store, widget_purchase):
        await ledger_store.add_inventory_item(**widget_purchase)
        assert json.loads(kv_store.data["inventory"])[0]["itemName"] == "Widget"

        await ledger_store.add_platform("Depop")
        assert "Depop" in json.loads(kv_store.data["settings"])["platforms"]

        await ledger_store.clear_all_data(confirm=True)
        assert json.loads(kv_store.data["inventory"]) == []
        assert set(kv_store.data) == {"sales", "expenses", "inventory", "settings"}


async def test_settings_round_trip(id_factory):
    kv = InMemoryKeyValueStore()
    store = LedgerStore(kv, id_factory=id_factory)
    await store.update_settings(
        {
            "app_name": "Corner Thrift",
            "logo_svg_override": "<svg/>",
            "platforms": ["Etsy", "eBay"],
            "primary_color": "#881337",
            "theme": "dark",
            "inspection_mode": True,
        }
    )

    reloaded = await LedgerStore(kv).load()

    assert reloaded.settings == store.state.settings
