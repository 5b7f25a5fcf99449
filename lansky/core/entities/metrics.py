"""Derived report entities."""

from pydantic import BaseModel, Field

from lansky.core.entities.base import Quarter


class DashboardMetrics(BaseModel):
    """Aggregate figures shown on the dashboard."""

    total_revenue: float = 0.0
    total_cogs: float = 0.0
    total_net_profit: float = 0.0
    avg_margin: float = 0.0  # percent of revenue
    active_inventory_value: float = 0.0
    active_inventory_count: int = 0


class QuarterTotal(BaseModel):
    """Net profit for one quarter bucket."""

    quarter: Quarter
    net_profit: float


class TaxSummary(BaseModel):
    """Schedule C style totals."""

    gross_receipts: float = 0.0
    cogs: float = 0.0
    gross_profit: float = 0.0
    platform_fees: float = 0.0
    shipping_costs: float = 0.0
    expenses_by_category: dict[str, float] = Field(default_factory=dict)
    total_other_expenses: float = 0.0
    net_business_income: float = 0.0
