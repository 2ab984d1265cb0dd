"""Expense business logic"""
import logging
from typing import List
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.records import ParticipantWeight
from ledger.engine.split_calculator import compute_splits
from ledger.schemas.expense import ExpenseCreate
from ledger.services.ledger_store import LedgerStore, StoredExpense
from ledger.services.membership_service import MembershipService

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for expense operations"""

    @staticmethod
    async def resolve_participants(
        store: LedgerStore, group_id: UUID, expense_data: ExpenseCreate
    ) -> List[ParticipantWeight]:
        """
        Map participant emails to active group members.

        Each split is checked in turn and the first violation is raised:
        a non-positive value before its email is looked up, then an unknown
        user, a repeated user, and finally a user outside the group.

        Args:
            store: Ledger store
            group_id: Group ID
            expense_data: Expense creation data

        Returns:
            Participant weights in submitted order

        Raises:
            LedgerError: ZERO_SPLIT_NOT_ALLOWED, INVALID_SPLIT_USER or
                DUPLICATE_SPLIT_USER
        """
        participants = []
        seen = set()
        for split in expense_data.splits:
            if split.value <= 0:
                raise LedgerError(
                    LedgerErrorCode.ZERO_SPLIT_NOT_ALLOWED,
                    f"Split value must be positive, got {split.value}",
                    email=split.email,
                    value=split.value,
                )

            user = await store.get_user_by_email(split.email)
            if user is None:
                raise LedgerError(
                    LedgerErrorCode.INVALID_SPLIT_USER,
                    f"{split.email} is not a member of this group",
                    email=split.email,
                )
            if user.id in seen:
                raise LedgerError(
                    LedgerErrorCode.DUPLICATE_SPLIT_USER,
                    f"{split.email} appears more than once in the split",
                    email=split.email,
                )
            seen.add(user.id)

            if not await store.is_active_member(group_id, user.id):
                raise LedgerError(
                    LedgerErrorCode.INVALID_SPLIT_USER,
                    f"{split.email} is not a member of this group",
                    email=split.email,
                )
            participants.append(ParticipantWeight(user_id=user.id, value=split.value))

        return participants

    @staticmethod
    async def add_expense(
        store: LedgerStore,
        actor_id: UUID,
        group_id: UUID,
        expense_data: ExpenseCreate
    ) -> StoredExpense:
        """
        Create a new expense with its computed splits.

        Amount and participant-list checks run before any membership or
        identity lookup.

        Args:
            store: Ledger store
            actor_id: ID of user creating the expense
            group_id: Group the expense belongs to
            expense_data: Expense creation data

        Returns:
            Created expense with splits

        Raises:
            LedgerError: If membership, identity or split validation fails
        """
        try:
            if expense_data.amount <= 0:
                raise LedgerError(
                    LedgerErrorCode.INVALID_AMOUNT,
                    f"Expense amount must be positive, got {expense_data.amount}",
                    total_amount=expense_data.amount,
                )
            if not expense_data.splits:
                raise LedgerError(
                    LedgerErrorCode.INVALID_SPLIT, "At least one participant is required"
                )

            await MembershipService.ensure_active_member(store, group_id, actor_id)

            payer = await store.get_user_by_email(expense_data.payer_email)
            if payer is None:
                raise LedgerError(
                    LedgerErrorCode.PAYER_NOT_FOUND,
                    f"No user with email {expense_data.payer_email}",
                    email=expense_data.payer_email,
                )
            await MembershipService.ensure_active_member(
                store, group_id, payer.id, LedgerErrorCode.PAYER_NOT_GROUP_MEMBER
            )

            participants = await ExpenseService.resolve_participants(
                store, group_id, expense_data
            )

            shares = compute_splits(
                expense_data.amount,
                expense_data.split_type,
                payer.id,
                participants,
            )
        except LedgerError as e:
            logger.warning("Expense rejected in group %s: %s", group_id, e.code.value)
            raise

        expense = await store.create_expense(
            group_id=group_id,
            payer_id=payer.id,
            description=expense_data.description,
            amount=expense_data.amount,
            split_kind=expense_data.split_type,
            shares=shares,
        )

        logger.info(
            "Recorded expense %s in group %s: %d split %s across %d",
            expense.id, group_id, expense.amount, expense.split_kind.value, len(shares)
        )
        return expense
