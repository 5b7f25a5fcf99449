"""Dashboard endpoint."""

from fastapi import APIRouter, Depends, Query

from lansky.api.dependencies import get_store
from lansky.application.dto.responses import (
    DashboardMetricsResponse,
    DashboardResponse,
    QuarterTotalResponse,
    SaleResponse,
)
from lansky.application.ledger_store import LedgerStore
from lansky.core.services.metrics import compute_metrics, format_currency, quarterly_profit

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

_MONEY_FIELDS = ("total_revenue", "total_cogs", "total_net_profit", "active_inventory_value")


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    recent: int = Query(default=5, ge=0, le=50, description="Number of recent sales"),
    store: LedgerStore = Depends(get_store),
) -> DashboardResponse:
    """Aggregate metrics, net profit per quarter and the latest sales."""
    state = store.state
    metrics = compute_metrics(state.sales, state.inventory)
    values = metrics.model_dump()

    return DashboardResponse(
        metrics=DashboardMetricsResponse(
            **values,
            formatted={name: format_currency(values[name]) for name in _MONEY_FIELDS},
        ),
        quarterly_profit=[
            QuarterTotalResponse(quarter=q.quarter, net_profit=q.net_profit)
            for q in quarterly_profit(state.sales)
        ],
        recent_sales=[SaleResponse.from_entity(s) for s in state.sales[:recent]],
    )
