"""Group membership data access"""
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.models.group import Group
from ledger.models.group_member import GroupMember


class GroupMemberRepository:
    """Repository for GroupMember read operations"""

    @staticmethod
    async def get_member(db: AsyncSession, group_id: UUID, user_id: UUID) -> Optional[GroupMember]:
        """
        Get membership row of a user in a group, active or not.

        Args:
            db: Database session
            group_id: Group UUID
            user_id: User UUID

        Returns:
            GroupMember if found, None otherwise
        """
        result = await db.execute(
            select(GroupMember).where(
                GroupMember.group_id == group_id,
                GroupMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_active_member_ids(db: AsyncSession, group_id: UUID) -> List[UUID]:
        """
        Get IDs of users currently in the group.

        Args:
            db: Database session
            group_id: Group UUID

        Returns:
            List of user UUIDs
        """
        result = await db.execute(
            select(GroupMember.user_id).where(
                GroupMember.group_id == group_id,
                GroupMember.left_at.is_(None),
            )
        )
        return list(result.scalars().all())

    @staticmethod
    async def lock_group(
        db: AsyncSession, group_id: UUID, shared: bool = False
    ) -> Optional[Group]:
        """
        Take a row lock on the group for the rest of the transaction.

        Writers take it exclusively (FOR UPDATE) before inserting, readers
        take it shared (FOR SHARE) so no writer commits while they read.

        Args:
            db: Database session
            group_id: Group UUID
            shared: Take FOR SHARE instead of FOR UPDATE

        Returns:
            Locked group if found, None otherwise
        """
        result = await db.execute(
            select(Group).where(Group.id == group_id).with_for_update(read=shared)
        )
        return result.scalar_one_or_none()
