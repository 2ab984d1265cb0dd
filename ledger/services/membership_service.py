"""Group membership checks"""
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.services.ledger_store import LedgerStore


class MembershipService:
    """Service for membership checks shared by the ledger use cases"""

    @staticmethod
    async def ensure_active_member(
        store: LedgerStore,
        group_id: UUID,
        user_id: UUID,
        code: LedgerErrorCode = LedgerErrorCode.NOT_GROUP_MEMBER,
    ) -> None:
        """
        Raise unless the user currently belongs to the group.

        Args:
            store: Ledger store
            group_id: Group ID
            user_id: User ID
            code: Error code to raise with

        Raises:
            LedgerError: With the given code if the user is not an active member
        """
        if not await store.is_active_member(group_id, user_id):
            raise LedgerError(
                code,
                f"User {user_id} is not a member of group {group_id}",
                group_id=group_id,
                user_id=user_id,
            )
