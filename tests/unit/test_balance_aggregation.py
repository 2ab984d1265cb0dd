"""Unit tests for balance aggregation"""

from uuid import uuid4

import pytest

from ledger.engine.balances import aggregate_balances, balances_as_list
from ledger.engine.records import (Balance, ExpenseRecord, SettlementRecord,
                                   SplitKind, SplitRecord)


@pytest.fixture
def a():
    return uuid4()


@pytest.fixture
def b():
    return uuid4()


@pytest.fixture
def c():
    return uuid4()


def expense(payer_id, amount, kind=SplitKind.EQUAL):
    return ExpenseRecord(id=uuid4(), payer_id=payer_id, amount=amount, split_kind=kind)


def splits_for(expense_record, shares):
    return [
        SplitRecord(expense_id=expense_record.id, user_id=user_id, amount=amount)
        for user_id, amount in shares
    ]


class TestAggregateBalances:
    """Test folding history into net balances"""

    def test_single_expense(self, a, b, c):
        """Test payer is credited and participants debited"""
        e1 = expense(a, 90)

        balances = aggregate_balances([e1], splits_for(e1, [(a, 30), (b, 30), (c, 30)]), [])

        assert dict(balances) == {a: 60, b: -30, c: -30}

    def test_settlement_moves_balance(self, a, b):
        """Test settlement credits the sender and debits the receiver"""
        e1 = expense(a, 100)
        settlement = SettlementRecord(from_user_id=b, to_user_id=a, amount=20)

        balances = aggregate_balances([e1], splits_for(e1, [(a, 50), (b, 50)]), [settlement])

        assert dict(balances) == {a: 30, b: -30}

    def test_fully_settled_is_zero(self, a, b):
        """Test balances return to zero after full settlement"""
        e1 = expense(a, 100)
        settlement = SettlementRecord(from_user_id=b, to_user_id=a, amount=50)

        balances = aggregate_balances([e1], splits_for(e1, [(a, 50), (b, 50)]), [settlement])

        assert dict(balances) == {a: 0, b: 0}

    def test_sums_to_zero(self, a, b, c):
        """Test net amounts sum to zero for consistent history"""
        e1 = expense(a, 100)
        e2 = expense(b, 37, SplitKind.EXACT)
        e3 = expense(c, 1001)
        splits = (
            splits_for(e1, [(a, 34), (b, 33), (c, 33)])
            + splits_for(e2, [(b, 17), (c, 20)])
            + splits_for(e3, [(a, 500), (c, 501)])
        )
        settlements = [
            SettlementRecord(from_user_id=b, to_user_id=a, amount=10),
            SettlementRecord(from_user_id=a, to_user_id=c, amount=7),
        ]

        balances = aggregate_balances([e1, e2, e3], splits, settlements)

        assert sum(balances.values()) == 0

    def test_first_appearance_order(self, a, b, c):
        """Test users are ordered payers first, then split users, then settlements"""
        d = uuid4()
        e1 = expense(b, 20)
        splits = splits_for(e1, [(a, 10), (b, 10)])
        settlements = [SettlementRecord(from_user_id=c, to_user_id=d, amount=5)]

        balances = aggregate_balances([e1], splits, settlements)

        assert list(balances) == [b, a, c, d]

    def test_order_independent_totals(self, a, b, c):
        """Test reordering history changes order but not amounts"""
        e1 = expense(a, 60)
        e2 = expense(c, 30)
        splits = splits_for(e1, [(a, 20), (b, 20), (c, 20)]) + splits_for(e2, [(b, 15), (c, 15)])

        forward = aggregate_balances([e1, e2], splits, [])
        backward = aggregate_balances([e2, e1], list(reversed(splits)), [])

        assert dict(forward) == dict(backward)

    def test_empty_history(self):
        """Test empty history yields no balances"""
        assert dict(aggregate_balances([], [], [])) == {}

    def test_result_is_read_only(self, a, b):
        """Test the returned mapping cannot be modified"""
        e1 = expense(a, 10)
        balances = aggregate_balances([e1], splits_for(e1, [(a, 5), (b, 5)]), [])

        with pytest.raises(TypeError):
            balances[a] = 0


class TestBalancesAsList:
    """Test conversion to Balance records"""

    def test_keeps_order(self, a, b):
        """Test records follow mapping order"""
        e1 = expense(b, 10)
        balances = aggregate_balances([e1], splits_for(e1, [(a, 5), (b, 5)]), [])

        assert balances_as_list(balances) == [
            Balance(user_id=b, net_amount=5),
            Balance(user_id=a, net_amount=-5),
        ]
