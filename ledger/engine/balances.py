"""Net balance aggregation"""

from functools import reduce
from itertools import chain
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple
from uuid import UUID

from ledger.engine.records import (Balance, ExpenseRecord, SettlementRecord,
                                   SplitRecord)

# (user, signed delta) pairs in application order
Posting = Tuple[UUID, int]


def _expense_postings(expenses: Iterable[ExpenseRecord]) -> Iterable[Posting]:
    for expense in expenses:
        yield expense.payer_id, expense.amount


def _split_postings(splits: Iterable[SplitRecord]) -> Iterable[Posting]:
    for split in splits:
        yield split.user_id, -split.amount


def _settlement_postings(settlements: Iterable[SettlementRecord]) -> Iterable[Posting]:
    for settlement in settlements:
        yield settlement.from_user_id, settlement.amount
        yield settlement.to_user_id, -settlement.amount


def _post(balances: Dict[UUID, int], posting: Posting) -> Dict[UUID, int]:
    user_id, delta = posting
    balances[user_id] = balances.get(user_id, 0) + delta
    return balances


def aggregate_balances(
    expenses: Iterable[ExpenseRecord],
    splits: Iterable[SplitRecord],
    settlements: Iterable[SettlementRecord],
) -> Mapping[UUID, int]:
    """
    Fold a group's history into net balances.

    Payers are credited with the expense amount, split users debited with
    their share, settlement senders credited and receivers debited.

    Users appear in the result in order of first appearance when walking
    expense payers (in expense order), then split users (in split order),
    then settlement senders and receivers (in settlement order). The
    settlement suggester depends on this order.

    Args:
        expenses: Expense records, creation order
        splits: Split records, creation order
        settlements: Settlement records, creation order

    Returns:
        Read-only ordered mapping of user id to net amount; values sum to
        zero when the input is internally consistent
    """
    postings = chain(
        _expense_postings(expenses),
        _split_postings(splits),
        _settlement_postings(settlements),
    )
    return MappingProxyType(reduce(_post, postings, {}))


def balances_as_list(balances: Mapping[UUID, int]) -> List[Balance]:
    """Balance records in the mapping's order"""
    return [
        Balance(user_id=user_id, net_amount=net_amount)
        for user_id, net_amount in balances.items()
    ]
