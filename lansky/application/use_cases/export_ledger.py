"""Export Ledger Use Case: CSV downloads of the current ledger."""

from dataclasses import dataclass
from datetime import date

from lansky.application.ledger_store import LedgerStore
from lansky.config import get_logger
from lansky.core.constants import LEDGER_EXPORT_FILENAME
from lansky.core.services.csv_export import (
    build_ledger_csv,
    build_sales_csv,
    sales_export_filename,
)

logger = get_logger(__name__)


@dataclass
class CsvExport:
    """A named CSV file."""

    filename: str
    content: bytes
    rows: int


class ExportLedgerUseCase:
    """Build the full ledger CSV or the sales-only tax CSV."""

    def __init__(self, store: LedgerStore | None = None):
        self._store = store

    async def _get_store(self) -> LedgerStore:
        if self._store is None:
            from lansky.application.ledger_store import get_ledger_store

            self._store = await get_ledger_store()
        return self._store

    async def ledger_csv(self) -> CsvExport:
        state = (await self._get_store()).state
        rows = len(state.sales) + len(state.inventory) + len(state.expenses)
        content = build_ledger_csv(state.sales, state.inventory, state.expenses)
        logger.info("ledger_csv_exported", rows=rows, size=len(content))
        return CsvExport(filename=LEDGER_EXPORT_FILENAME, content=content, rows=rows)

    async def sales_csv(self, year: int | None = None) -> CsvExport:
        """Sales CSV named for ``year`` (default: the current year)."""
        state = (await self._get_store()).state
        content = build_sales_csv(state.sales)
        filename = sales_export_filename(year or date.today().year)
        logger.info("sales_csv_exported", rows=len(state.sales), filename=filename)
        return CsvExport(filename=filename, content=content, rows=len(state.sales))
