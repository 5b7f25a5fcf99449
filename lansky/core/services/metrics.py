"""
Pure ledger derivations.

Quarter labels, dashboard metrics, tax totals and currency text. Nothing
here touches storage or the network.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import cast

from lansky.core.entities.base import Quarter
from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem, ItemStatus
from lansky.core.entities.metrics import DashboardMetrics, QuarterTotal, TaxSummary
from lansky.core.entities.sale import Sale

_CENT = Decimal("0.01")

QUARTERS: tuple[Quarter, ...] = ("Q1", "Q2", "Q3", "Q4")


def to_calendar_date(value: date | datetime | str) -> date:
    """
    Resolve a calendar date without any timezone conversion.

    ``YYYY-MM-DD`` strings are taken as written. Datetimes (objects or ISO
    strings, with or without offset) keep their own wall-clock date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


def quarter_of(value: date | datetime | str) -> Quarter:
    """Map a date to its calendar quarter label (Q1-Q4) by month."""
    month = to_calendar_date(value).month
    return cast(Quarter, f"Q{(month - 1) // 3 + 1}")


def compute_net_profit(
    sale_price: float,
    purchase_price: float,
    fees: float,
    shipping_paid: float,
) -> float:
    """Net profit of a sale, rounded to cents."""
    return round(sale_price - purchase_price - fees - shipping_paid, 2)


def compute_metrics(
    sales: Sequence[Sale],
    inventory: Sequence[InventoryItem],
) -> DashboardMetrics:
    """Aggregate dashboard figures over all sales and unsold stock."""
    total_revenue = sum(s.sale_price for s in sales)
    total_cogs = sum(s.purchase_price for s in sales)
    total_net_profit = sum(s.net_profit for s in sales)
    avg_margin = (total_net_profit / total_revenue) * 100 if total_revenue > 0 else 0.0

    active = [i for i in inventory if i.status == ItemStatus.AVAILABLE]

    return DashboardMetrics(
        total_revenue=total_revenue,
        total_cogs=total_cogs,
        total_net_profit=total_net_profit,
        avg_margin=avg_margin,
        active_inventory_value=sum(i.purchase_price for i in active),
        active_inventory_count=len(active),
    )


def quarterly_profit(sales: Iterable[Sale]) -> list[QuarterTotal]:
    """Net profit per quarter, Q1 first, only quarters with sales."""
    totals: dict[str, float] = {}
    for sale in sales:
        totals[sale.quarter] = totals.get(sale.quarter, 0.0) + sale.net_profit

    return [
        QuarterTotal(quarter=q, net_profit=totals[q]) for q in QUARTERS if q in totals
    ]


def compute_tax_summary(
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
) -> TaxSummary:
    """Schedule C totals: receipts, direct costs and deductions."""
    gross_receipts = sum(s.sale_price for s in sales)
    cogs = sum(s.purchase_price for s in sales)
    platform_fees = sum(s.fees for s in sales)
    shipping_costs = sum(s.shipping_paid for s in sales)

    by_category: dict[str, float] = {}
    for expense in expenses:
        by_category[expense.category] = by_category.get(expense.category, 0.0) + expense.amount

    total_other = sum(by_category.values())

    return TaxSummary(
        gross_receipts=gross_receipts,
        cogs=cogs,
        gross_profit=gross_receipts - cogs,
        platform_fees=platform_fees,
        shipping_costs=shipping_costs,
        expenses_by_category=by_category,
        total_other_expenses=total_other,
        net_business_income=gross_receipts - cogs - platform_fees - shipping_costs - total_other,
    )


def format_currency(amount: float) -> str:
    """Render a US-dollar amount, e.g. ``$1,234.56`` or ``-$5.00``."""
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite amount: {amount}")

    value = Decimal(repr(float(amount))).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def build_advice_summary(
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
    inventory: Sequence[InventoryItem],
) -> str:
    """Plain-text aggregate summary handed to the business advisor."""
    active = [i for i in inventory if i.status == ItemStatus.AVAILABLE]
    lines = [
        f"Total Sales: {len(sales)}",
        f"Total Revenue: ${sum(s.sale_price for s in sales):.2f}",
        f"Total Profit: ${sum(s.net_profit for s in sales):.2f}",
        f"Active Inventory: {len(active)} items",
        f"Inventory Value (Cost): ${sum(i.purchase_price for i in active):.2f}",
        f"Total Expenses: ${sum(e.amount for e in expenses):.2f}",
    ]
    return "\n".join(lines)
