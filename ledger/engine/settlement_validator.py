"""Authorize a manually proposed settlement against current balances"""

from typing import Mapping, Optional
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.balances import aggregate_balances
from ledger.engine.participation import ParticipationGraph
from ledger.engine.records import GroupSnapshot, SettlementRecord


def outstanding_between(
    balances: Mapping[UUID, int], from_user_id: UUID, to_user_id: UUID
) -> int:
    """
    Largest amount from_user may currently pay to_user.

    Args:
        balances: Net balances of the group
        from_user_id: Debtor
        to_user_id: Creditor

    Returns:
        min(-from_net, to_net); zero or negative when the pair is not
        debtor/creditor
    """
    return min(-balances.get(from_user_id, 0), balances.get(to_user_id, 0))


def validate_settlement(
    snapshot: GroupSnapshot,
    from_user_id: Optional[UUID],
    to_user_id: Optional[UUID],
    amount: int,
) -> SettlementRecord:
    """
    Check a proposed settlement before it is persisted.

    Args:
        snapshot: Group records and active members, read once
        from_user_id: Paying user, None if the caller could not resolve it
        to_user_id: Receiving user, None if the caller could not resolve it
        amount: Amount in minor units

    Returns:
        The settlement to persist

    Raises:
        LedgerError: INVALID_SETTLEMENT_AMOUNT, INVALID_SETTLEMENT_USERS,
            INVALID_SETTLEMENT_DIRECTION, NO_SHARED_EXPENSE_HISTORY or
            AMOUNT_EXCEEDS_OUTSTANDING, first violation wins
    """
    if amount <= 0:
        raise LedgerError(
            LedgerErrorCode.INVALID_SETTLEMENT_AMOUNT,
            f"Settlement amount must be positive, got {amount}",
            amount=amount,
        )

    if from_user_id is not None and from_user_id == to_user_id:
        raise LedgerError(
            LedgerErrorCode.INVALID_SETTLEMENT_USERS,
            "Cannot settle with yourself",
            from_user_id=from_user_id,
            to_user_id=to_user_id,
        )

    members = snapshot.active_member_ids
    if (
        from_user_id is None
        or to_user_id is None
        or from_user_id not in members
        or to_user_id not in members
    ):
        raise LedgerError(
            LedgerErrorCode.INVALID_SETTLEMENT_USERS,
            "Both users must be active members of the group",
            from_user_id=from_user_id,
            to_user_id=to_user_id,
        )

    balances = aggregate_balances(snapshot.expenses, snapshot.splits, snapshot.settlements)
    from_net = balances.get(from_user_id, 0)
    to_net = balances.get(to_user_id, 0)

    if from_net >= 0 or to_net <= 0:
        raise LedgerError(
            LedgerErrorCode.INVALID_SETTLEMENT_DIRECTION,
            "Settlement must go from a user who owes to a user who is owed",
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            from_net=from_net,
            to_net=to_net,
        )

    graph = ParticipationGraph.build(snapshot.splits)
    if not graph.has_edge(from_user_id, to_user_id):
        raise LedgerError(
            LedgerErrorCode.NO_SHARED_EXPENSE_HISTORY,
            "Users have no shared expense to settle against",
            from_user_id=from_user_id,
            to_user_id=to_user_id,
        )

    outstanding = outstanding_between(balances, from_user_id, to_user_id)
    if amount > outstanding:
        raise LedgerError(
            LedgerErrorCode.AMOUNT_EXCEEDS_OUTSTANDING,
            f"Settlement amount {amount} exceeds outstanding {outstanding}",
            amount=amount,
            outstanding=outstanding,
            from_net=from_net,
            to_net=to_net,
        )

    return SettlementRecord(from_user_id=from_user_id, to_user_id=to_user_id, amount=amount)
