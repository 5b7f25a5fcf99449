"""Tests for the CSV exports."""

import csv
import io
from datetime import date

from lansky.core.entities import Expense, InventoryItem, Sale
from lansky.core.services.csv_export import (
    LEDGER_HEADER,
    SALES_HEADER,
    build_ledger_csv,
    build_sales_csv,
    format_number,
    sales_export_filename,
)
from lansky.core.services.seed import generate_seed_data


class TestFormatNumber:
    def test_integers_have_no_decimal_point(self):
        assert format_number(15) == "15"
        assert format_number(15.0) == "15"
        assert format_number(-120.0) == "-120"

    def test_fractions_keep_their_digits(self):
        assert format_number(5.85) == "5.85"
        assert format_number(25.5) == "25.5"

    def test_small_fractions_are_not_exponents(self):
        assert format_number(0.00001) == "0.00001"
        assert format_number(-0.0000025) == "-0.0000025"


class TestLedgerCsv:
    def test_empty_ledger_is_header_only(self):
        assert build_ledger_csv([], [], []).decode() == ",".join(LEDGER_HEADER)

    def test_seed_rows(self):
        inventory, sales, expenses = generate_seed_data()
        lines = build_ledger_csv(sales, inventory, expenses).decode().split("\n")

        assert lines[0] == "TYPE,DATE,ITEM,PLATFORM/CATEGORY,IN,OUT,FEES,NET"
        assert lines[1] == "SALE,2024-01-05,Vintage Denim Jacket,eBay,15,45,5.85,14.15"
        assert lines[3] == "INVENTORY,2023-11-15,Vintage Denim Jacket,sold,15,0,0,-15"
        assert lines[-1] == "EXPENSE,2024-02-15,Monthly subscription,Inventory Software,15,0,0,-15"
        assert len(lines) == 1 + len(sales) + len(inventory) + len(expenses)

    def test_no_trailing_newline(self):
        inventory, sales, expenses = generate_seed_data()
        assert not build_ledger_csv(sales, inventory, expenses).endswith(b"\n")

    def test_fields_with_commas_are_quoted(self):
        item = InventoryItem(
            id="1",
            item_name='Lamp, brass "antique"',
            purchase_price=12,
            purchase_date=date(2024, 5, 1),
        )
        content = build_ledger_csv([], [item], []).decode()

        assert content.split("\n")[1] == 'INVENTORY,2024-05-01,"Lamp, brass ""antique""",available,12,0,0,-12'
        rows = list(csv.reader(io.StringIO(content)))
        assert rows[1][2] == 'Lamp, brass "antique"'

    def test_expense_row(self):
        expense = Expense(
            id="e1",
            date=date(2024, 4, 2),
            category="Gas & Mileage",
            amount=12.25,
            description="Thrift run",
            quarter="Q2",
        )
        content = build_ledger_csv([], [], [expense]).decode()
        assert content.split("\n")[1] == "EXPENSE,2024-04-02,Thrift run,Gas & Mileage,12.25,0,0,-12.25"


class TestSalesCsv:
    def test_header(self):
        assert build_sales_csv([]).decode() == ",".join(SALES_HEADER)

    def test_sale_row_order(self):
        sale = Sale(
            id="s1",
            date=date(2024, 1, 5),
            item_name="Jacket",
            platform="eBay",
            purchase_price=15,
            sale_price=45,
            fees=5.85,
            shipping_paid=10,
            net_profit=14.15,
            quarter="Q1",
        )
        lines = build_sales_csv([sale]).decode().split("\n")
        assert lines == [
            "Date,Item Name,Platform,Sale Price,Buy Price,Fees,Shipping,Net Profit",
            "2024-01-05,Jacket,eBay,45,15,5.85,10,14.15",
        ]

    def test_filename_carries_year(self):
        assert sales_export_filename(2024) == "lansky_ledger_full_export_2024.csv"
