"""Tests for ExportLedgerUseCase."""

from datetime import date

from lansky.application.use_cases.export_ledger import ExportLedgerUseCase


class TestExportLedgerUseCase:
    async def test_ledger_csv(self, ledger_store):
        await ledger_store.seed_demo_data()

        export = await ExportLedgerUseCase(store=ledger_store).ledger_csv()

        assert export.filename == "lansky_ledger_export.csv"
        assert export.rows == 9
        assert export.content.startswith(b"TYPE,DATE,ITEM")

    async def test_sales_csv_named_for_year(self, ledger_store):
        await ledger_store.seed_demo_data()

        export = await ExportLedgerUseCase(store=ledger_store).sales_csv(2024)

        assert export.filename == "lansky_ledger_full_export_2024.csv"
        assert export.rows == 2
        assert export.content.count(b"\n") == 2

    async def test_sales_csv_defaults_to_current_year(self, ledger_store):
        export = await ExportLedgerUseCase(store=ledger_store).sales_csv()
        assert export.filename.endswith(f"_{date.today().year}.csv")
        assert export.rows == 0
