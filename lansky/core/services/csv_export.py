"""
CSV exports of the ledger.

Rows are joined with ``\\n`` and carry no trailing newline. Fields holding
a comma, quote or line break are quoted per RFC 4180; every other field is
written bare.
"""

import csv
import io
from collections.abc import Iterable, Sequence
from decimal import Decimal
from enum import Enum

from lansky.core.constants import SALES_EXPORT_FILENAME_TEMPLATE
from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem
from lansky.core.entities.sale import Sale

LEDGER_HEADER = ["TYPE", "DATE", "ITEM", "PLATFORM/CATEGORY", "IN", "OUT", "FEES", "NET"]

SALES_HEADER = [
    "Date",
    "Item Name",
    "Platform",
    "Sale Price",
    "Buy Price",
    "Fees",
    "Shipping",
    "Net Profit",
]


def format_number(value: float) -> str:
    """Render a number the way the ledger always has: ``15``, ``5.85``, ``-120``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    # Shortest round-trip digits, always in positional notation
    return format(Decimal(repr(number)), "f")


def _cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return format_number(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _write_rows(rows: Iterable[Sequence[object]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        writer.writerow([_cell(v) for v in row])

    text = buffer.getvalue()
    if text.endswith("\n"):
        text = text[:-1]
    return text.encode("utf-8")


def ledger_rows(
    sales: Sequence[Sale],
    inventory: Sequence[InventoryItem],
    expenses: Sequence[Expense],
) -> list[list[object]]:
    """Header plus one row per sale, inventory item and expense."""
    rows: list[list[object]] = [list(LEDGER_HEADER)]
    rows.extend(
        ["SALE", s.date.isoformat(), s.item_name, s.platform, s.purchase_price, s.sale_price, s.fees, s.net_profit]
        for s in sales
    )
    rows.extend(
        ["INVENTORY", i.purchase_date.isoformat(), i.item_name, i.status, i.purchase_price, 0, 0, -i.purchase_price]
        for i in inventory
    )
    rows.extend(
        ["EXPENSE", e.date.isoformat(), e.description, e.category, e.amount, 0, 0, -e.amount]
        for e in expenses
    )
    return rows


def build_ledger_csv(
    sales: Sequence[Sale],
    inventory: Sequence[InventoryItem],
    expenses: Sequence[Expense],
) -> bytes:
    """Full ledger export (sales, stock and expenses in one file)."""
    return _write_rows(ledger_rows(sales, inventory, expenses))


def build_sales_csv(sales: Sequence[Sale]) -> bytes:
    """Sales-only export used for tax preparation."""
    rows: list[list[object]] = [list(SALES_HEADER)]
    rows.extend(
        [s.date.isoformat(), s.item_name, s.platform, s.sale_price, s.purchase_price, s.fees, s.shipping_paid, s.net_profit]
        for s in sales
    )
    return _write_rows(rows)


def sales_export_filename(year: int) -> str:
    return SALES_EXPORT_FILENAME_TEMPLATE.format(year=year)
