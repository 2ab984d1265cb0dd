"""Percentage split strategy"""

from typing import List
from uuid import UUID

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.records import ParticipantSplit, ParticipantWeight
from ledger.engine.split_strategies.base import BaseSplitStrategy
from ledger.utils.amount_utils import percentage_of, sum_amounts


class PercentageSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense by percentage"""

    def calculate_splits(
        self,
        total_amount: int,
        payer_id: UUID,
        participants: List[ParticipantWeight],
    ) -> List[ParticipantSplit]:
        """
        Calculate percentage-based split for participants.

        Args:
            total_amount: Total expense amount
            payer_id: User who absorbs the rounding leftover
            participants: Weights whose values are whole percentages

        Returns:
            List of ParticipantSplit with calculated amounts

        Raises:
            LedgerError: INVALID_PERCENTAGE_SUM if percentages don't sum to 100
        """
        total_percentage = sum_amounts(p.value for p in participants)

        if total_percentage != 100:
            raise LedgerError(
                LedgerErrorCode.INVALID_PERCENTAGE_SUM,
                f"Percentages must sum to 100%, got {total_percentage}%",
                percentage_sum=total_percentage,
            )

        splits = [
            ParticipantSplit(
                user_id=p.user_id, amount_owed=percentage_of(total_amount, p.value)
            )
            for p in participants
        ]

        return self.assign_remainder_to_payer(total_amount, payer_id, splits)
