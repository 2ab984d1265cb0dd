"""Exact split strategy"""
from typing import List
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.records import ParticipantSplit, ParticipantWeight
from ledger.engine.split_strategies.base import BaseSplitStrategy
from ledger.utils.amount_utils import sum_amounts


class ExactSplitStrategy(BaseSplitStrategy):
    """Strategy for split with explicitly specified amounts"""

    def calculate_splits(
        self,
        total_amount: int,
        payer_id: UUID,
        participants: List[ParticipantWeight],
    ) -> List[ParticipantSplit]:
        """
        Use the specified amounts verbatim.

        Args:
            total_amount: Total expense amount
            payer_id: User who paid the expense
            participants: Weights whose values are amounts owed

        Returns:
            List of ParticipantSplit with specified amounts

        Raises:
            LedgerError: INVALID_SPLIT_SUM if amounts don't sum to total_amount
        """
        total_assigned = sum_amounts(p.value for p in participants)

        if total_assigned != total_amount:
            raise LedgerError(
                LedgerErrorCode.INVALID_SPLIT_SUM,
                f"Sum of exact amounts ({total_assigned}) must equal total amount ({total_amount})",
                total_amount=total_amount,
                split_sum=total_assigned,
            )

        return [
            ParticipantSplit(user_id=p.user_id, amount_owed=p.value)
            for p in participants
        ]
