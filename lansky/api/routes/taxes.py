"""Tax report endpoints: Schedule C summary and the sales CSV."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from lansky.api.dependencies import get_export_ledger_use_case, get_store
from lansky.application.dto.responses import TaxSummaryResponse
from lansky.application.ledger_store import LedgerStore
from lansky.application.use_cases import ExportLedgerUseCase
from lansky.core.services.metrics import compute_tax_summary

router = APIRouter(prefix="/api/taxes", tags=["taxes"])


@router.get("/summary", response_model=TaxSummaryResponse)
async def get_tax_summary(store: LedgerStore = Depends(get_store)) -> TaxSummaryResponse:
    """Gross receipts, direct costs, deductions and net business income."""
    state = store.state
    summary = compute_tax_summary(state.sales, state.expenses)
    return TaxSummaryResponse(**summary.model_dump(), sales_count=len(state.sales))


@router.get("/export", response_class=StreamingResponse)
async def export_sales_csv(
    year: int | None = Query(default=None, ge=1900, le=9999, description="Year used in the file name"),
    use_case: ExportLedgerUseCase = Depends(get_export_ledger_use_case),
) -> StreamingResponse:
    """Download every sale as CSV for tax preparation."""
    export = await use_case.sales_csv(year)
    return StreamingResponse(
        iter([export.content]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
