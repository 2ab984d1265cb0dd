"""Balance schemas"""
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel


class BalanceItem(BaseModel):
    """Net position of one group member"""
    user_id: UUID
    email: Optional[str] = None
    net_amount: int  # positive = owed money, negative = owes money


class SettlementSuggestionItem(BaseModel):
    """Proposed transfer between two members"""
    from_user_id: UUID
    from_email: Optional[str] = None
    to_user_id: UUID
    to_email: Optional[str] = None
    amount: int


class GroupBalancesResponse(BaseModel):
    """Balances of a group with suggested settlements"""
    balances: List[BalanceItem]
    settlements: List[SettlementSuggestionItem]
