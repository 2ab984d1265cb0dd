"""LedgerStore backed by SQLAlchemy"""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ledger.engine.records import (ExpenseRecord, GroupSnapshot,
                                   ParticipantSplit, SettlementRecord,
                                   SplitKind, SplitRecord)
from ledger.models.expense import Expense
from ledger.models.expense_split import ExpenseSplit
from ledger.models.settlement import Settlement
from ledger.models.user import User
from ledger.repositories.expense_repository import ExpenseRepository
from ledger.repositories.group_member_repository import GroupMemberRepository
from ledger.repositories.settlement_repository import SettlementRepository
from ledger.repositories.user_repository import UserRepository
from ledger.services.ledger_store import StoredExpense, StoredSettlement, UserRef


def _user_ref(user: User) -> UserRef:
    return UserRef(id=user.id, email=user.email)


class SqlLedgerStore:
    """LedgerStore backed by the SQLAlchemy repositories"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[UserRef]:
        user = await UserRepository.get_by_email(self.db, email)
        if user is None or not user.is_active:
            return None
        return _user_ref(user)

    async def get_users_by_ids(self, user_ids: Sequence[UUID]) -> List[UserRef]:
        users = await UserRepository.get_by_ids(self.db, user_ids)
        return [_user_ref(user) for user in users]

    async def is_active_member(self, group_id: UUID, user_id: UUID) -> bool:
        member = await GroupMemberRepository.get_member(self.db, group_id, user_id)
        return member is not None and member.is_active

    async def load_group_snapshot(self, group_id: UUID, lock: bool = False) -> GroupSnapshot:
        """
        Read a group's ledger in the current transaction.

        The group row is locked before the four reads, so every read sees
        the same committed ledger: writers hold FOR UPDATE on that row
        from before their insert until commit.

        Args:
            group_id: Group UUID
            lock: Take the lock exclusively and hold it until the
                transaction ends, so no other writer changes the ledger
                between this read and a following write. Otherwise the
                lock is shared.

        Returns:
            GroupSnapshot
        """
        await GroupMemberRepository.lock_group(self.db, group_id, shared=not lock)

        expenses = await ExpenseRepository.get_expenses_by_group(self.db, group_id)
        splits = await ExpenseRepository.get_splits_by_group(self.db, group_id)
        settlements = await SettlementRepository.get_settlements_by_group(self.db, group_id)
        member_ids = await GroupMemberRepository.get_active_member_ids(self.db, group_id)

        return GroupSnapshot(
            group_id=group_id,
            expenses=tuple(
                ExpenseRecord(
                    id=e.id, payer_id=e.payer_id, amount=e.amount, split_kind=e.split_kind
                )
                for e in expenses
            ),
            splits=tuple(
                SplitRecord(expense_id=s.expense_id, user_id=s.user_id, amount=s.amount)
                for s in splits
            ),
            settlements=tuple(
                SettlementRecord(
                    from_user_id=s.from_user_id, to_user_id=s.to_user_id, amount=s.amount
                )
                for s in settlements
            ),
            active_member_ids=frozenset(member_ids),
        )

    async def create_expense(
        self,
        group_id: UUID,
        payer_id: UUID,
        description: str,
        amount: int,
        split_kind: SplitKind,
        shares: Sequence[ParticipantSplit],
    ) -> StoredExpense:
        expense = Expense(
            group_id=group_id,
            payer_id=payer_id,
            description=description,
            amount=amount,
            split_kind=split_kind,
        )
        splits = [
            ExpenseSplit(user_id=share.user_id, amount=share.amount_owed, position=position)
            for position, share in enumerate(shares)
        ]

        await GroupMemberRepository.lock_group(self.db, group_id)
        created = await ExpenseRepository.create_with_splits(self.db, expense, splits)
        await self.db.commit()

        return StoredExpense(
            id=created.id,
            group_id=created.group_id,
            payer_id=created.payer_id,
            description=created.description,
            amount=created.amount,
            split_kind=created.split_kind,
            splits=tuple(
                SplitRecord(expense_id=created.id, user_id=s.user_id, amount=s.amount)
                for s in splits
            ),
            created_at=created.created_at,
        )

    async def create_settlement(
        self, group_id: UUID, settlement: SettlementRecord
    ) -> StoredSettlement:
        created = await SettlementRepository.create(
            self.db,
            Settlement(
                group_id=group_id,
                from_user_id=settlement.from_user_id,
                to_user_id=settlement.to_user_id,
                amount=settlement.amount,
            ),
        )
        await self.db.commit()

        return StoredSettlement(
            id=created.id,
            group_id=created.group_id,
            from_user_id=created.from_user_id,
            to_user_id=created.to_user_id,
            amount=created.amount,
            created_at=created.created_at,
        )
