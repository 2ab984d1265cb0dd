"""Capability interface between the ledger services and persistence"""

from datetime import datetime
from typing import List, Optional, Protocol, Sequence, Tuple
from uuid import UUID

from ledger.engine.records import (GroupSnapshot, LedgerRecord,
                                   ParticipantSplit, SettlementRecord,
                                   SplitKind, SplitRecord)


class UserRef(LedgerRecord):
    """Resolved identity of a user"""

    id: UUID
    email: str


class StoredExpense(LedgerRecord):
    """Expense as persisted, with its splits in participant order"""

    id: UUID
    group_id: UUID
    payer_id: UUID
    description: str
    amount: int
    split_kind: SplitKind
    splits: Tuple[SplitRecord, ...]
    created_at: datetime


class StoredSettlement(LedgerRecord):
    """Settlement as persisted"""

    id: UUID
    group_id: UUID
    from_user_id: UUID
    to_user_id: UUID
    amount: int
    created_at: datetime


class LedgerStore(Protocol):
    """Everything the ledger services need from the outside world"""

    async def get_user_by_email(self, email: str) -> Optional[UserRef]:
        ...

    async def get_users_by_ids(self, user_ids: Sequence[UUID]) -> List[UserRef]:
        ...

    async def is_active_member(self, group_id: UUID, user_id: UUID) -> bool:
        ...

    async def load_group_snapshot(self, group_id: UUID, lock: bool = False) -> GroupSnapshot:
        ...

    async def create_expense(
        self,
        group_id: UUID,
        payer_id: UUID,
        description: str,
        amount: int,
        split_kind: SplitKind,
        shares: Sequence[ParticipantSplit],
    ) -> StoredExpense:
        ...

    async def create_settlement(
        self, group_id: UUID, settlement: SettlementRecord
    ) -> StoredSettlement:
        ...
