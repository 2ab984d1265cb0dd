"""Settlement endpoints"""
from uuid import UUID
from fastapi import APIRouter, Depends, status

from ledger.api.deps import get_current_user_id, get_ledger_store
from ledger.schemas.settlement import SettlementCreate, SettlementResponse
from ledger.services.ledger_store import LedgerStore
from ledger.services.settlement_service import SettlementService

router = APIRouter(prefix="/groups/{group_id}/settlements", tags=["Settlements"])


@router.post("", response_model=SettlementResponse, status_code=status.HTTP_201_CREATED)
async def create_settlement(
    group_id: UUID,
    settlement_data: SettlementCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    store: LedgerStore = Depends(get_ledger_store),
):
    """
    Record a payment from a member who owes to a member who is owed.

    Args:
        group_id: Group ID
        settlement_data: Payer, payee and amount
        current_user_id: Current authenticated user
        store: Ledger store

    Returns:
        Recorded settlement

    Raises:
        400: If the settlement doesn't match current balances
        403: If the caller is not a group member
    """
    settlement = await SettlementService.add_settlement(
        store, current_user_id, group_id, settlement_data
    )
    return SettlementResponse.model_validate(settlement)
