"""Data transfer objects between the API and the application layer."""

from lansky.application.dto.requests import (
    AddExpenseRequest,
    AddInventoryItemRequest,
    ClearDataRequest,
    EditImageRequest,
    ListEntryRequest,
    SellItemRequest,
    UpdateIdentityRequest,
    UpdateSettingsRequest,
)
from lansky.application.dto.responses import (
    AccentColorResponse,
    AdviceResponse,
    BulkResultResponse,
    DashboardMetricsResponse,
    DashboardResponse,
    ErrorResponse,
    ExpenseListResponse,
    ExpenseResponse,
    HealthResponse,
    ImageEditResultResponse,
    ImportStateResponse,
    InventoryItemResponse,
    InventoryListResponse,
    ProviderHealthResponse,
    QuarterTotalResponse,
    RawStateResponse,
    SaleListResponse,
    SaleResponse,
    SettingsResponse,
    TaxSummaryResponse,
)

__all__ = [
    # Requests
    "AddInventoryItemRequest",
    "SellItemRequest",
    "AddExpenseRequest",
    "UpdateSettingsRequest",
    "ListEntryRequest",
    "ClearDataRequest",
    "EditImageRequest",
    "UpdateIdentityRequest",
    # Responses
    "InventoryItemResponse",
    "InventoryListResponse",
    "SaleResponse",
    "SaleListResponse",
    "ExpenseResponse",
    "ExpenseListResponse",
    "DashboardMetricsResponse",
    "QuarterTotalResponse",
    "DashboardResponse",
    "TaxSummaryResponse",
    "AdviceResponse",
    "ImageEditResultResponse",
    "SettingsResponse",
    "AccentColorResponse",
    "BulkResultResponse",
    "RawStateResponse",
    "ImportStateResponse",
    "ProviderHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
