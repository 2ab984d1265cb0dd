"""Balance endpoints"""

from uuid import UUID

from fastapi import APIRouter, Depends

from ledger.api.deps import get_current_user_id, get_ledger_store
from ledger.schemas.balance import GroupBalancesResponse
from ledger.services.balance_service import BalanceService
from ledger.services.ledger_store import LedgerStore

router = APIRouter(prefix="/groups/{group_id}/balances", tags=["Balances"])


@router.get("", response_model=GroupBalancesResponse)
async def get_group_balances(
    group_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    store: LedgerStore = Depends(get_ledger_store),
):
    """
    Get net balances of every member of a group.

    Also returns suggested settlements. A debtor is only ever pointed at
    creditors they have shared an expense with, so some debt may be left
    without a suggestion.

    Args:
        group_id: Group ID
        current_user_id: Current authenticated user
        store: Ledger store

    Returns:
        Balances (positive = owed money, negative = owes money) and suggestions

    Raises:
        403: If the caller is not a group member
    """
    return await BalanceService.get_group_balances(store, current_user_id, group_id)
