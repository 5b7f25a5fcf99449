"""
Admin console endpoints.

All routes require the ``X-Admin-Token`` header to match ``ADMIN_TOKEN``.
With no token configured they always answer 403.
"""

from fastapi import APIRouter, Depends, Request

from lansky.api.dependencies import get_store, require_admin
from lansky.application.dto.requests import UpdateIdentityRequest
from lansky.application.dto.responses import (
    ErrorResponse,
    ImportStateResponse,
    RawStateResponse,
    SettingsResponse,
)
from lansky.application.ledger_store import LedgerStore

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
    responses={403: {"model": ErrorResponse}},
)


@router.get("/state", response_model=RawStateResponse)
async def get_raw_state(store: LedgerStore = Depends(get_store)) -> RawStateResponse:
    """Collections exactly as they are persisted."""
    return RawStateResponse(**store.export_raw_state())


@router.post(
    "/state",
    response_model=ImportStateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def inject_raw_state(
    request: Request,
    store: LedgerStore = Depends(get_store),
) -> ImportStateResponse:
    """
    Replace collections from a raw JSON body.

    Each of ``sales``, ``expenses`` and ``inventory`` present in the body
    replaces the current collection. A malformed or invalid body is
    rejected with 400 and nothing changes.
    """
    replaced = await store.import_raw_state(await request.body())
    return ImportStateResponse(replaced=replaced)


@router.patch("/identity", response_model=SettingsResponse)
async def update_identity(
    request: UpdateIdentityRequest,
    store: LedgerStore = Depends(get_store),
) -> SettingsResponse:
    """Change the workspace name or logo override."""
    settings = await store.update_settings(request.to_patch())
    return SettingsResponse.from_entity(settings)
