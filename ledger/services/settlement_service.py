"""Settlement business logic"""
import logging
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.settlement_validator import validate_settlement
from ledger.schemas.settlement import SettlementCreate
from ledger.services.membership_service import MembershipService
from ledger.services.ledger_store import LedgerStore, StoredSettlement

logger = logging.getLogger(__name__)


class SettlementService:
    """Service for settlement operations"""

    @staticmethod
    async def add_settlement(
        store: LedgerStore,
        actor_id: UUID,
        group_id: UUID,
        settlement_data: SettlementCreate
    ) -> StoredSettlement:
        """
        Record a payment from a debtor to a creditor.

        The group's ledger is read with a lock so the balances the payment
        is validated against cannot change before it is written.

        Args:
            store: Ledger store
            actor_id: User recording the settlement
            group_id: Group ID
            settlement_data: Settlement data

        Returns:
            Recorded settlement

        Raises:
            LedgerError: If the actor is not a member or validation fails
        """
        try:
            if settlement_data.amount <= 0:
                raise LedgerError(
                    LedgerErrorCode.INVALID_SETTLEMENT_AMOUNT,
                    f"Settlement amount must be positive, got {settlement_data.amount}",
                    amount=settlement_data.amount,
                )

            if settlement_data.from_email == settlement_data.to_email:
                raise LedgerError(
                    LedgerErrorCode.INVALID_SETTLEMENT_USERS,
                    "Cannot settle with yourself",
                    email=settlement_data.from_email,
                )

            await MembershipService.ensure_active_member(store, group_id, actor_id)

            from_user = await store.get_user_by_email(settlement_data.from_email)
            to_user = await store.get_user_by_email(settlement_data.to_email)

            snapshot = await store.load_group_snapshot(group_id, lock=True)
            settlement = validate_settlement(
                snapshot,
                from_user.id if from_user else None,
                to_user.id if to_user else None,
                settlement_data.amount,
            )
        except LedgerError as e:
            logger.warning("Settlement rejected in group %s: %s", group_id, e.code.value)
            raise

        created = await store.create_settlement(group_id, settlement)

        logger.info(
            "Recorded settlement %s in group %s: %s -> %s %d",
            created.id, group_id, created.from_user_id, created.to_user_id, created.amount
        )
        return created
