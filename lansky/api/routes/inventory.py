"""Inventory endpoints: stock on hand, add, sell and delete."""

from fastapi import APIRouter, Depends, Query, Response, status

from lansky.api.dependencies import get_record_sale_use_case, get_store
from lansky.application.dto.requests import AddInventoryItemRequest, SellItemRequest
from lansky.application.dto.responses import (
    ErrorResponse,
    InventoryItemResponse,
    InventoryListResponse,
    SaleResponse,
)
from lansky.application.ledger_store import LedgerStore
from lansky.application.use_cases import RecordSaleUseCase
from lansky.core.entities import ItemStatus

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=InventoryListResponse)
async def list_inventory(
    item_status: ItemStatus | None = Query(default=None, alias="status"),
    store: LedgerStore = Depends(get_store),
) -> InventoryListResponse:
    """List stock, most recent first, optionally filtered by status."""
    inventory = store.state.inventory
    items = [i for i in inventory if item_status is None or i.status == item_status]
    return InventoryListResponse(
        items=[InventoryItemResponse.from_entity(i) for i in items],
        total=len(items),
        available=sum(1 for i in inventory if i.is_available),
    )


@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_inventory_item(
    request: AddInventoryItemRequest,
    store: LedgerStore = Depends(get_store),
) -> InventoryItemResponse:
    """Add a purchased item as available stock."""
    item = await store.add_inventory_item(
        request.item_name,
        request.purchase_price,
        request.purchase_date,
        description=request.description,
    )
    return InventoryItemResponse.from_entity(item)


@router.post(
    "/{item_id}/sell",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def sell_inventory_item(
    item_id: str,
    request: SellItemRequest,
    use_case: RecordSaleUseCase = Depends(get_record_sale_use_case),
) -> SaleResponse:
    """Record a sale; the item is marked sold in the same step."""
    sale = await use_case.execute(item_id, request)
    return SaleResponse.from_entity(sale)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(
    item_id: str,
    store: LedgerStore = Depends(get_store),
) -> Response:
    """Delete an item and every sale recorded against it. Unknown IDs are ignored."""
    await store.delete_inventory_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
