"""User lookups for identity resolution"""
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.models.user import User


class UserRepository:
    """Repository for User database operations"""

    @staticmethod
    async def create(db: AsyncSession, user: User) -> User:
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """
        Get user by email, ignoring case.

        Args:
            db: Database session
            email: Email as submitted in a request

        Returns:
            User if found, None otherwise
        """
        result = await db.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_ids(db: AsyncSession, user_ids: Sequence[UUID]) -> List[User]:
        """
        Get users by IDs; unknown IDs are skipped.

        Args:
            db: Database session
            user_ids: User UUIDs

        Returns:
            List of users found, in no particular order
        """
        if not user_ids:
            return []

        result = await db.execute(select(User).where(User.id.in_(list(user_ids))))
        return list(result.scalars().all())
