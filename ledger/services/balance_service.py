"""Balance calculation logic"""

from typing import Dict, List
from uuid import UUID

from ledger.engine.balances import aggregate_balances, balances_as_list
from ledger.engine.participation import ParticipationGraph
from ledger.engine.records import Balance, GroupSnapshot, SettlementSuggestion
from ledger.engine.suggestions import suggest_settlements
from ledger.schemas.balance import (BalanceItem, GroupBalancesResponse,
                                    SettlementSuggestionItem)
from ledger.services.membership_service import MembershipService
from ledger.services.ledger_store import LedgerStore


class BalanceService:
    """Service for balance calculation operations"""

    @staticmethod
    def compute(snapshot: GroupSnapshot) -> tuple[List[Balance], List[SettlementSuggestion]]:
        """
        Derive balances and settlement suggestions from one snapshot.

        Args:
            snapshot: Group records read in one go

        Returns:
            Tuple of (balances in first-appearance order, suggestions)
        """
        balances = aggregate_balances(snapshot.expenses, snapshot.splits, snapshot.settlements)
        graph = ParticipationGraph.build(snapshot.splits)
        return balances_as_list(balances), suggest_settlements(balances, graph)

    @staticmethod
    async def _emails_by_id(
        store: LedgerStore,
        balances: List[Balance],
        suggestions: List[SettlementSuggestion],
    ) -> Dict[UUID, str]:
        user_ids = {b.user_id for b in balances}
        for suggestion in suggestions:
            user_ids.add(suggestion.from_user_id)
            user_ids.add(suggestion.to_user_id)

        users = await store.get_users_by_ids(sorted(user_ids))
        return {user.id: user.email for user in users}

    @staticmethod
    async def get_group_balances(
        store: LedgerStore, actor_id: UUID, group_id: UUID
    ) -> GroupBalancesResponse:
        """
        Get net balances of a group and suggested settlements.

        Args:
            store: Ledger store
            actor_id: User asking
            group_id: Group ID

        Returns:
            GroupBalancesResponse with emails resolved for display

        Raises:
            LedgerError: NOT_GROUP_MEMBER if the actor is not in the group
        """
        await MembershipService.ensure_active_member(store, group_id, actor_id)

        snapshot = await store.load_group_snapshot(group_id)
        balances, suggestions = BalanceService.compute(snapshot)

        emails = await BalanceService._emails_by_id(store, balances, suggestions)

        return GroupBalancesResponse(
            balances=[
                BalanceItem(
                    user_id=b.user_id,
                    email=emails.get(b.user_id),
                    net_amount=b.net_amount,
                )
                for b in balances
            ],
            settlements=[
                SettlementSuggestionItem(
                    from_user_id=s.from_user_id,
                    from_email=emails.get(s.from_user_id),
                    to_user_id=s.to_user_id,
                    to_email=emails.get(s.to_user_id),
                    amount=s.amount,
                )
                for s in suggestions
            ],
        )
