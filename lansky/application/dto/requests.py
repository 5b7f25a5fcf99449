"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Field names are
snake_case; persisted documents keep their camelCase shape separately.
"""

import datetime

from pydantic import BaseModel, Field

from lansky.core.entities import Theme


class AddInventoryItemRequest(BaseModel):
    """Request to add purchased stock."""

    item_name: str = Field(..., min_length=1, examples=["Vintage Denim Jacket"])
    description: str | None = Field(default=None, examples=["Levi's, size M"])
    purchase_price: float = Field(..., ge=0, examples=[15.0])
    purchase_date: datetime.date = Field(..., examples=["2024-03-01"])


class SellItemRequest(BaseModel):
    """Request to record the sale of a stock item."""

    date: datetime.date
    platform: str = Field(..., min_length=1, examples=["eBay"])
    sale_price: float = Field(..., ge=0, examples=[45.0])
    fees: float = Field(default=0.0, ge=0, examples=[5.85])
    shipping_paid: float = Field(default=0.0, ge=0, examples=[10.0])


class AddExpenseRequest(BaseModel):
    """Request to log a business expense."""

    date: datetime.date
    category: str = Field(..., min_length=1, examples=["Packaging/Boxes"])
    amount: float = Field(..., ge=0, examples=[25.5])
    description: str = Field(..., min_length=1, examples=["Bulk bubble mailers"])


class UpdateSettingsRequest(BaseModel):
    """Partial settings update. Only fields that are sent are applied."""

    app_name: str | None = Field(default=None, min_length=1)
    logo_svg_override: str | None = None
    platforms: list[str] | None = None
    expense_categories: list[str] | None = None
    primary_color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")
    theme: Theme | None = None
    inspection_mode: bool | None = None

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ListEntryRequest(BaseModel):
    """A platform or expense category name."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Depop"])


class ClearDataRequest(BaseModel):
    """Destructive clear; must be explicitly confirmed."""

    confirm: bool = Field(
        default=False,
        description="Must be true. Export the ledger first, this cannot be undone.",
    )


class EditImageRequest(BaseModel):
    """Image edit with the image sent inline as a data URL."""

    image: str = Field(..., min_length=1, description="data: URL or bare base64 (PNG)")
    prompt: str = Field(..., min_length=1, examples=["Remove the background"])


class UpdateIdentityRequest(BaseModel):
    """Admin console identity update."""

    app_name: str | None = Field(default=None, min_length=1)
    logo_svg_override: str | None = None

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)
