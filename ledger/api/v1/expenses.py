"""Expense endpoints"""
from uuid import UUID
from fastapi import APIRouter, Depends, status

from ledger.api.deps import get_current_user_id, get_ledger_store
from ledger.schemas.expense import ExpenseCreate, ExpenseResponse
from ledger.services.expense_service import ExpenseService
from ledger.services.ledger_store import LedgerStore

router = APIRouter(prefix="/groups/{group_id}/expenses", tags=["Expenses"])


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    group_id: UUID,
    expense_data: ExpenseCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    store: LedgerStore = Depends(get_ledger_store),
):
    """
    Add an expense to a group.

    The amount is split among the listed members according to
    `split_type`; any rounding remainder is assigned to the payer.

    Args:
        group_id: Group ID
        expense_data: Expense with payer and participants by email
        current_user_id: Current authenticated user
        store: Ledger store

    Returns:
        Created expense with computed splits

    Raises:
        400: If the amount or split is invalid
        403: If the caller or payer is not a group member
    """
    expense = await ExpenseService.add_expense(store, current_user_id, group_id, expense_data)
    return ExpenseResponse.model_validate(expense)
