"""Settlement data access"""
from typing import List
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.models.settlement import Settlement


class SettlementRepository:
    """Repository for Settlement database operations"""

    @staticmethod
    async def create(db: AsyncSession, settlement: Settlement) -> Settlement:
        """
        Create a new settlement.

        Args:
            db: Database session
            settlement: Settlement object to create

        Returns:
            Created settlement
        """
        db.add(settlement)
        await db.flush()
        await db.refresh(settlement)
        return settlement

    @staticmethod
    async def get_settlements_by_group(db: AsyncSession, group_id: UUID) -> List[Settlement]:
        """
        Get all settlements of a group, oldest first.

        Args:
            db: Database session
            group_id: Group UUID

        Returns:
            List of settlements
        """
        result = await db.execute(
            select(Settlement)
            .where(Settlement.group_id == group_id)
            .order_by(Settlement.created_at.asc(), Settlement.id.asc())
        )
        return list(result.scalars().all())
