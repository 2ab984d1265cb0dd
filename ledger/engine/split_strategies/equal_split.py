"""Equal split strategy"""

from typing import List
from uuid import UUID

from ledger.engine.records import ParticipantSplit, ParticipantWeight
from ledger.engine.split_strategies.base import BaseSplitStrategy


class EqualSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting expense equally among participants"""

    def calculate_splits(
        self,
        total_amount: int,
        payer_id: UUID,
        participants: List[ParticipantWeight],
    ) -> List[ParticipantSplit]:
        """
        Calculate equal split for all participants.

        Every participant owes floor(total / n); the payer additionally
        absorbs the remainder, which can be up to n - 1 minor units.

        Args:
            total_amount: Total expense amount
            payer_id: User who paid the expense
            participants: Participant weights (values are ignored)

        Returns:
            List of ParticipantSplit with equal amounts
        """
        base_amount = total_amount // len(participants)

        splits = [
            ParticipantSplit(user_id=participant.user_id, amount_owed=base_amount)
            for participant in participants
        ]

        return self.assign_remainder_to_payer(total_amount, payer_id, splits)
