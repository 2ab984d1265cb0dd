"""Immutable records consumed and produced by the ledger engine"""

import enum
from typing import FrozenSet, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SplitKind(str, enum.Enum):
    """Enum for split kinds"""
    EQUAL = "EQUAL"
    EXACT = "EXACT"
    PERCENTAGE = "PERCENTAGE"


class LedgerRecord(BaseModel):
    """Base for frozen engine records"""

    model_config = ConfigDict(frozen=True)


class ParticipantWeight(LedgerRecord):
    """Raw split input for one participant (amount or percentage by kind)"""

    user_id: UUID
    value: int


class ParticipantSplit(LedgerRecord):
    """Result of split calculation for a participant"""

    user_id: UUID
    amount_owed: int


class ExpenseRecord(LedgerRecord):
    """Expense as read from a group snapshot"""

    id: UUID
    payer_id: UUID
    amount: int
    split_kind: SplitKind


class SplitRecord(LedgerRecord):
    """One user's share of one expense"""

    expense_id: UUID
    user_id: UUID
    amount: int


class SettlementRecord(LedgerRecord):
    """Recorded (or about to be recorded) payment from debtor to creditor"""

    from_user_id: UUID
    to_user_id: UUID
    amount: int


class Balance(LedgerRecord):
    """Net position of a user; positive means the group owes them"""

    user_id: UUID
    net_amount: int


class SettlementSuggestion(LedgerRecord):
    """Proposed transfer; never persisted"""

    from_user_id: UUID
    to_user_id: UUID
    amount: int = Field(..., gt=0)


class GroupSnapshot(LedgerRecord):
    """Everything the engine reads about one group, taken in a single read"""

    group_id: UUID
    expenses: Tuple[ExpenseRecord, ...] = ()
    splits: Tuple[SplitRecord, ...] = ()
    settlements: Tuple[SettlementRecord, ...] = ()
    active_member_ids: FrozenSet[UUID] = frozenset()
