"""Workspace settings endpoints, plus seed / clear / export."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import StreamingResponse

from lansky.api.dependencies import get_export_ledger_use_case, get_store
from lansky.application.dto.requests import (
    ClearDataRequest,
    ListEntryRequest,
    UpdateSettingsRequest,
)
from lansky.application.dto.responses import (
    AccentColorResponse,
    BulkResultResponse,
    ErrorResponse,
    SettingsResponse,
)
from lansky.application.ledger_store import LedgerStore
from lansky.application.use_cases import ExportLedgerUseCase
from lansky.core.constants import ACCENT_COLORS, DEFAULT_LOGO_SVG
from lansky.core.entities import LedgerState

router = APIRouter(prefix="/api/settings", tags=["settings"])


def _counts(state: LedgerState) -> BulkResultResponse:
    return BulkResultResponse(
        inventory=len(state.inventory),
        sales=len(state.sales),
        expenses=len(state.expenses),
    )


@router.get("", response_model=SettingsResponse)
async def get_workspace_settings(store: LedgerStore = Depends(get_store)) -> SettingsResponse:
    return SettingsResponse.from_entity(store.state.settings)


@router.patch(
    "",
    response_model=SettingsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def update_workspace_settings(
    request: UpdateSettingsRequest,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    """Apply the fields that were sent; the rest keep their values."""
    settings = await store.update_settings(request.to_patch())
    return SettingsResponse.from_entity(settings)


@router.get("/palette", response_model=list[AccentColorResponse])
async def get_palette() -> list[AccentColorResponse]:
    """Preset accent colors."""
    return [AccentColorResponse(**c) for c in ACCENT_COLORS]


@router.get("/logo")
async def get_logo(store: LedgerStore = Depends(get_store)) -> Response:
    """Current logo markup: the override when set, else the default."""
    svg = store.state.settings.logo_svg_override or DEFAULT_LOGO_SVG
    return Response(content=svg.strip(), media_type="image/svg+xml")


# Platform and category lists


@router.post("/platforms", response_model=SettingsResponse)
async def add_platform(
    request: ListEntryRequest,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    """Add a sale platform. Already present names are left as they are."""
    return SettingsResponse.from_entity(await store.add_platform(request.name))


@router.delete("/platforms/{name:path}", response_model=SettingsResponse)
async def remove_platform(
    name: str,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    return SettingsResponse.from_entity(await store.remove_platform(name))


@router.post("/expense-categories", response_model=SettingsResponse)
async def add_expense_category(
    request: ListEntryRequest,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    """Add an expense category. Already present names are left as they are."""
    return SettingsResponse.from_entity(await store.add_expense_category(request.name))


@router.delete("/expense-categories/{name:path}", response_model=SettingsResponse)
async def remove_expense_category(
    name: str,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    return SettingsResponse.from_entity(await store.remove_expense_category(name))


# Data management


@router.post("/seed", response_model=BulkResultResponse)
async def seed_demo_data(store: LedgerStore = Depends(get_store)) -> BulkResultResponse:
    """Replace the ledger with the demo dataset."""
    return _counts(await store.seed_demo_data())


@router.post(
    "/clear",
    response_model=BulkResultResponse,
    responses={400: {"model": ErrorResponse}},
)
async def clear_all_data(
    request: ClearDataRequest,
    store: LedgerStore = Depends(get_store),
) -> BulkResultResponse:
    """Delete all inventory, sales and expenses. Requires ``confirm: true``."""
    return _counts(await store.clear_all_data(confirm=request.confirm))


@router.get("/export", response_class=StreamingResponse)
async def export_ledger_csv(
    use_case: ExportLedgerUseCase = Depends(get_export_ledger_use_case),
) -> StreamingResponse:
    """Download the full ledger as CSV."""
    export = await use_case.ledger_csv()
    return StreamingResponse(
        iter([export.content]),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
        },
    )

