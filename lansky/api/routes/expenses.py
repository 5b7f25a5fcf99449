"""Expense endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from lansky.api.dependencies import get_store
from lansky.application.dto.requests import AddExpenseRequest
from lansky.application.dto.responses import ExpenseListResponse, ExpenseResponse
from lansky.application.ledger_store import LedgerStore
from lansky.core.entities import Quarter

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    quarter: Quarter | None = Query(default=None),
    category: str | None = Query(default=None),
    store: LedgerStore = Depends(get_store),
) -> ExpenseListResponse:
    expenses = [
        e
        for e in store.state.expenses
        if (quarter is None or e.quarter == quarter)
        and (category is None or e.category == category)
    ]
    return ExpenseListResponse(
        expenses=[ExpenseResponse.from_entity(e) for e in expenses],
        total=len(expenses),
        total_amount=sum(e.amount for e in expenses),
    )


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    request: AddExpenseRequest,
    store: LedgerStore = Depends(get_store),
) -> ExpenseResponse:
    expense = await store.add_expense(
        request.date,
        request.category,
        request.amount,
        request.description,
    )
    return ExpenseResponse.from_entity(expense)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: str,
    store: LedgerStore = Depends(get_store),
) -> Response:
    await store.delete_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
