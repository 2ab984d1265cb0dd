"""Base strategy interface"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ledger.engine.records import ParticipantSplit, ParticipantWeight
from ledger.utils.amount_utils import sum_amounts


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    @abstractmethod
    def calculate_splits(
        self,
        total_amount: int,
        payer_id: UUID,
        participants: List[ParticipantWeight],
    ) -> List[ParticipantSplit]:
        """
        Calculate split amounts for participants.

        Preconditions shared by every kind (positive amount, non-empty,
        positive values, unique ids, payer included) are already checked
        by the caller.

        Args:
            total_amount: Total expense amount in minor units
            payer_id: User who paid the expense
            participants: Ordered participant weights

        Returns:
            List of ParticipantSplit in participant order
        """
        pass

    @staticmethod
    def assign_remainder_to_payer(
        total_amount: int, payer_id: UUID, splits: List[ParticipantSplit]
    ) -> List[ParticipantSplit]:
        """
        Add whatever the floored shares left unassigned to the payer's share.

        Args:
            total_amount: Total expense amount
            payer_id: User who receives the remainder
            splits: Floored splits

        Returns:
            New list of splits summing to total_amount
        """
        remainder = total_amount - sum_amounts(split.amount_owed for split in splits)
        if remainder == 0:
            return splits

        return [
            ParticipantSplit(user_id=split.user_id, amount_owed=split.amount_owed + remainder)
            if split.user_id == payer_id
            else split
            for split in splits
        ]
