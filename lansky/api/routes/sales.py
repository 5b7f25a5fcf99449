"""Sales log endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from lansky.api.dependencies import get_store
from lansky.application.dto.responses import SaleListResponse, SaleResponse
from lansky.application.ledger_store import LedgerStore
from lansky.core.entities import Quarter

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.get("", response_model=SaleListResponse)
async def list_sales(
    quarter: Quarter | None = Query(default=None),
    platform: str | None = Query(default=None),
    store: LedgerStore = Depends(get_store),
) -> SaleListResponse:
    """List sales, most recent first."""
    sales = [
        s
        for s in store.state.sales
        if (quarter is None or s.quarter == quarter)
        and (platform is None or s.platform == platform)
    ]
    return SaleListResponse(
        sales=[SaleResponse.from_entity(s) for s in sales],
        total=len(sales),
    )


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sale(
    sale_id: str,
    store: LedgerStore = Depends(get_store),
) -> Response:
    """Delete a sale; its item goes back to available stock."""
    await store.delete_sale(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
