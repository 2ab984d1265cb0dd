"""Expense data access"""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.models.expense import Expense
from ledger.models.expense_split import ExpenseSplit


class ExpenseRepository:
    """Repository for Expense and ExpenseSplit database operations"""

    @staticmethod
    async def create_with_splits(
        db: AsyncSession, expense: Expense, splits: List[ExpenseSplit]
    ) -> Expense:
        """
        Create an expense and its splits in one nested transaction.

        Args:
            db: Database session
            expense: Expense object to create
            splits: Split objects; expense_id is filled in here

        Returns:
            Created expense
        """
        async with db.begin_nested():
            db.add(expense)
            await db.flush()

            for split in splits:
                split.expense_id = expense.id
            db.add_all(splits)
            await db.flush()

        await db.refresh(expense)
        return expense

    @staticmethod
    async def get_expenses_by_group(db: AsyncSession, group_id: UUID) -> List[Expense]:
        """
        Get all expenses of a group, oldest first.

        Args:
            db: Database session
            group_id: Group UUID

        Returns:
            List of expenses
        """
        result = await db.execute(
            select(Expense)
            .where(Expense.group_id == group_id)
            .order_by(Expense.created_at.asc(), Expense.id.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_splits_by_group(db: AsyncSession, group_id: UUID) -> List[ExpenseSplit]:
        """
        Get all splits of a group's expenses.

        Ordered by their expense's creation, then by participant position.

        Args:
            db: Database session
            group_id: Group UUID

        Returns:
            List of expense splits
        """
        result = await db.execute(
            select(ExpenseSplit)
            .join(Expense, ExpenseSplit.expense_id == Expense.id)
            .where(Expense.group_id == group_id)
            .order_by(
                Expense.created_at.asc(),
                Expense.id.asc(),
                ExpenseSplit.position.asc(),
            )
        )
        return list(result.scalars().all())
