"""Response DTOs for API endpoints."""

import datetime
from typing import Any

from pydantic import BaseModel, Field

from lansky.core.entities import (
    AppSettings,
    Expense,
    InventoryItem,
    Quarter,
    Sale,
    Theme,
)

# --- Ledger records ---


class InventoryItemResponse(BaseModel):
    """Inventory item response DTO."""

    id: str
    item_name: str
    description: str | None = None
    purchase_price: float
    purchase_date: datetime.date
    status: str

    @classmethod
    def from_entity(cls, item: InventoryItem) -> "InventoryItemResponse":
        return cls.model_validate(item.model_dump(mode="json"))


class SaleResponse(BaseModel):
    """Sale response DTO."""

    id: str
    inventory_item_id: str | None = None
    date: datetime.date
    item_name: str
    description: str | None = None
    platform: str
    purchase_price: float
    sale_price: float
    fees: float
    shipping_paid: float
    net_profit: float
    quarter: Quarter

    @classmethod
    def from_entity(cls, sale: Sale) -> "SaleResponse":
        return cls.model_validate(sale.model_dump(mode="json"))


class ExpenseResponse(BaseModel):
    """Expense response DTO."""

    id: str
    date: datetime.date
    category: str
    amount: float
    description: str
    quarter: Quarter

    @classmethod
    def from_entity(cls, expense: Expense) -> "ExpenseResponse":
        return cls.model_validate(expense.model_dump(mode="json"))


class InventoryListResponse(BaseModel):
    items: list[InventoryItemResponse]
    total: int
    available: int


class SaleListResponse(BaseModel):
    sales: list[SaleResponse]
    total: int


class ExpenseListResponse(BaseModel):
    expenses: list[ExpenseResponse]
    total: int
    total_amount: float


# --- Reports ---


class DashboardMetricsResponse(BaseModel):
    """Dashboard figures plus their display text."""

    total_revenue: float
    total_cogs: float
    total_net_profit: float
    avg_margin: float
    active_inventory_value: float
    active_inventory_count: int
    formatted: dict[str, str] = Field(
        default_factory=dict,
        description="Currency text for the money figures",
    )


class QuarterTotalResponse(BaseModel):
    quarter: Quarter
    net_profit: float


class DashboardResponse(BaseModel):
    """Dashboard screen: metrics, profit by quarter and recent sales."""

    metrics: DashboardMetricsResponse
    quarterly_profit: list[QuarterTotalResponse]
    recent_sales: list[SaleResponse]


class TaxSummaryResponse(BaseModel):
    """Schedule C summary."""

    gross_receipts: float
    cogs: float
    gross_profit: float
    platform_fees: float
    shipping_costs: float
    expenses_by_category: dict[str, float]
    total_other_expenses: float
    net_business_income: float
    sales_count: int


# --- AI ---


class AdviceResponse(BaseModel):
    """Advisor output (markdown) and the summary it was based on."""

    advice: str
    summary: str


class ImageEditResultResponse(BaseModel):
    """Edited image as a data URL; ``image`` is null when nothing was produced."""

    edited: bool
    image: str | None = None
    mime_type: str | None = None


# --- Settings ---


class SettingsResponse(BaseModel):
    """Workspace settings."""

    app_name: str
    logo_svg_override: str | None = None
    platforms: list[str]
    expense_categories: list[str]
    primary_color: str
    theme: Theme
    inspection_mode: bool

    @classmethod
    def from_entity(cls, settings: AppSettings) -> "SettingsResponse":
        return cls.model_validate(settings.model_dump())


class AccentColorResponse(BaseModel):
    name: str
    value: str


class BulkResultResponse(BaseModel):
    """Counts after a seed or clear."""

    inventory: int
    sales: int
    expenses: int


# --- Admin ---


class RawStateResponse(BaseModel):
    """Collections in their persisted (camelCase) shape."""

    sales: list[dict[str, Any]]
    expenses: list[dict[str, Any]]
    inventory: list[dict[str, Any]]


class ImportStateResponse(BaseModel):
    replaced: list[str]


# --- Health / errors ---


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    llm: ProviderHealthResponse | None = None
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVALID_IMPORT)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime.datetime = Field(default_factory=datetime.datetime.now)
