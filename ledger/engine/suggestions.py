"""Settlement suggestions constrained by shared expense history"""

import logging
from typing import List, Mapping
from uuid import UUID

from ledger.engine.participation import ParticipationGraph
from ledger.engine.records import SettlementSuggestion

logger = logging.getLogger(__name__)


def suggest_settlements(
    balances: Mapping[UUID, int], graph: ParticipationGraph
) -> List[SettlementSuggestion]:
    """
    Propose transfers that pay creditors back from debtors.

    Debtors are matched greedily, each against creditors in balance order,
    and only against creditors they share at least one expense with. Debt
    that cannot reach a creditor with remaining credit through such an edge
    is left unsuggested; that is a valid outcome, not an error.

    Args:
        balances: Ordered net balances (see aggregate_balances); not mutated
        graph: Participation graph built from the same snapshot

    Returns:
        Suggestions in the order they were produced
    """
    creditors = [
        [user_id, net_amount] for user_id, net_amount in balances.items() if net_amount > 0
    ]
    debtors = [
        (user_id, -net_amount) for user_id, net_amount in balances.items() if net_amount < 0
    ]

    suggestions: List[SettlementSuggestion] = []

    for debtor_id, debt in debtors:
        remaining_debt = debt

        for creditor in creditors:
            if remaining_debt == 0:
                break

            creditor_id, remaining_credit = creditor
            if remaining_credit == 0:
                continue

            if not graph.has_edge(debtor_id, creditor_id):
                continue

            amount = min(remaining_debt, remaining_credit)
            suggestions.append(
                SettlementSuggestion(
                    from_user_id=debtor_id, to_user_id=creditor_id, amount=amount
                )
            )
            remaining_debt -= amount
            creditor[1] = remaining_credit - amount

        if remaining_debt > 0:
            logger.debug(
                "Debtor %s left with %d unsuggested: no shared expense with remaining creditors",
                debtor_id,
                remaining_debt,
            )

    return suggestions
