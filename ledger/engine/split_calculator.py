"""Turn an expense amount and participant weights into exact integer shares"""

import logging
from typing import List, Sequence
from uuid import UUID

from ledger.core.exceptions import (LedgerError, LedgerErrorCode,
                                    LedgerInvariantError)
from ledger.engine.records import ParticipantSplit, ParticipantWeight, SplitKind
from ledger.engine.split_strategies import get_split_strategy
from ledger.utils.amount_utils import sum_amounts

logger = logging.getLogger(__name__)


def check_split_preconditions(
    total_amount: int, payer_id: UUID, participants: Sequence[ParticipantWeight]
) -> None:
    """
    Validate inputs shared by every split kind.

    Checks run in a fixed order and the first violation is raised.

    Raises:
        LedgerError: INVALID_AMOUNT, INVALID_SPLIT, ZERO_SPLIT_NOT_ALLOWED,
            DUPLICATE_SPLIT_USER or PAYER_MUST_BE_PARTICIPANT
    """
    if total_amount <= 0:
        raise LedgerError(
            LedgerErrorCode.INVALID_AMOUNT,
            f"Expense amount must be positive, got {total_amount}",
            total_amount=total_amount,
        )

    if not participants:
        raise LedgerError(
            LedgerErrorCode.INVALID_SPLIT, "At least one participant is required"
        )

    for participant in participants:
        if participant.value <= 0:
            raise LedgerError(
                LedgerErrorCode.ZERO_SPLIT_NOT_ALLOWED,
                f"Split value must be positive, got {participant.value}",
                user_id=participant.user_id,
                value=participant.value,
            )

    seen: set[UUID] = set()
    for participant in participants:
        if participant.user_id in seen:
            raise LedgerError(
                LedgerErrorCode.DUPLICATE_SPLIT_USER,
                f"User {participant.user_id} appears more than once in the split",
                user_id=participant.user_id,
            )
        seen.add(participant.user_id)

    if payer_id not in seen:
        raise LedgerError(
            LedgerErrorCode.PAYER_MUST_BE_PARTICIPANT,
            "Payer must be one of the split participants",
            payer_id=payer_id,
        )


def compute_splits(
    total_amount: int,
    split_kind: SplitKind,
    payer_id: UUID,
    participants: Sequence[ParticipantWeight],
) -> List[ParticipantSplit]:
    """
    Compute each participant's share of an expense.

    Args:
        total_amount: Expense amount in minor units
        split_kind: EQUAL, EXACT or PERCENTAGE
        payer_id: User who paid; receives any rounding remainder
        participants: Ordered weights (amounts for EXACT, percentages for
            PERCENTAGE, any positive value for EQUAL)

    Returns:
        Shares in participant order, summing exactly to total_amount

    Raises:
        LedgerError: If the input is invalid
        LedgerInvariantError: If the computed shares don't add up
    """
    check_split_preconditions(total_amount, payer_id, participants)

    strategy = get_split_strategy(split_kind)
    splits = strategy.calculate_splits(total_amount, payer_id, list(participants))

    allocated = sum_amounts(split.amount_owed for split in splits)
    if allocated != total_amount:
        raise LedgerInvariantError(
            LedgerErrorCode.INTERNAL_SPLIT_ERROR,
            f"{split_kind} split allocated {allocated} of {total_amount}",
            split_kind=str(split_kind),
            total_amount=total_amount,
            allocated=allocated,
        )

    logger.debug(
        "Split %s of %d across %d participants", split_kind, total_amount, len(splits)
    )
    return splits
