"""Domain services: derivations, ledger commands and AI helpers."""

from lansky.core.services.advisor import (
    ADVISOR_ERROR_MESSAGE,
    EMPTY_ADVICE_MESSAGE,
    BusinessAdvisorService,
)
from lansky.core.services.csv_export import (
    build_ledger_csv,
    build_sales_csv,
    sales_export_filename,
)
from lansky.core.services.image_editor import ImageEditorService
from lansky.core.services.in_flight import InFlightGuard, get_in_flight_guard
from lansky.core.services.metrics import (
    build_advice_summary,
    compute_metrics,
    compute_net_profit,
    compute_tax_summary,
    format_currency,
    quarter_of,
    quarterly_profit,
)
from lansky.core.services.seed import generate_seed_data

__all__ = [
    # Derivations
    "quarter_of",
    "compute_net_profit",
    "compute_metrics",
    "quarterly_profit",
    "compute_tax_summary",
    "format_currency",
    "build_advice_summary",
    "generate_seed_data",
    # Export
    "build_ledger_csv",
    "build_sales_csv",
    "sales_export_filename",
    # AI
    "BusinessAdvisorService",
    "ImageEditorService",
    "InFlightGuard",
    "get_in_flight_guard",
    "EMPTY_ADVICE_MESSAGE",
    "ADVISOR_ERROR_MESSAGE",
]
