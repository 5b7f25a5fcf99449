"""Core domain entities."""

from lansky.core.entities.app_settings import AppSettings, Theme
from lansky.core.entities.base import LedgerEntity, Quarter
from lansky.core.entities.expense import Expense
from lansky.core.entities.image import ImagePayload
from lansky.core.entities.inventory import InventoryItem, ItemStatus
from lansky.core.entities.ledger import LedgerState
from lansky.core.entities.metrics import DashboardMetrics, QuarterTotal, TaxSummary
from lansky.core.entities.sale import Sale

__all__ = [
    # Base
    "LedgerEntity",
    "Quarter",
    # Ledger entities
    "InventoryItem",
    "ItemStatus",
    "Sale",
    "Expense",
    "LedgerState",
    # Settings
    "AppSettings",
    "Theme",
    # Reports
    "DashboardMetrics",
    "QuarterTotal",
    "TaxSummary",
    # Images
    "ImagePayload",
]
