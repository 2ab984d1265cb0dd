"""Test participation graph"""

from uuid import uuid4

import pytest

from ledger.engine.participation import ParticipationGraph
from ledger.engine.records import SplitRecord


@pytest.fixture
def users():
    return [uuid4() for _ in range(5)]


def split(expense_id, user_id, amount=10):
    return SplitRecord(expense_id=expense_id, user_id=user_id, amount=amount)


class TestParticipationGraph:
    """Test building and querying the graph"""

    def test_connects_every_pair_of_an_expense(self, users):
        """Test all participants of one expense are pairwise connected"""
        a, b, c = users[:3]
        e1 = uuid4()

        graph = ParticipationGraph.build([split(e1, a), split(e1, b), split(e1, c)])

        assert graph.has_edge(a, b)
        assert graph.has_edge(a, c)
        assert graph.has_edge(b, c)

    def test_no_edge_across_expenses(self, users):
        """Test users in different expenses are not connected"""
        a, b, c, d = users[:4]
        e1, e2 = uuid4(), uuid4()

        graph = ParticipationGraph.build(
            [split(e1, a), split(e1, b), split(e2, c), split(e2, d)]
        )

        assert not graph.has_edge(a, c)
        assert not graph.has_edge(b, d)

    def test_symmetric(self, users):
        """Test has_edge(a, b) == has_edge(b, a) for every pair"""
        e1, e2 = uuid4(), uuid4()
        graph = ParticipationGraph.build(
            [
                split(e1, users[0]), split(e1, users[1]),
                split(e2, users[1]), split(e2, users[2]), split(e2, users[3]),
            ]
        )

        for a in users:
            for b in users:
                assert graph.has_edge(a, b) == graph.has_edge(b, a)

    def test_no_self_edges(self, users):
        """Test a user is never connected to themself"""
        a, b = users[:2]
        e1 = uuid4()

        graph = ParticipationGraph.build([split(e1, a), split(e1, b), split(e1, a)])

        assert not graph.has_edge(a, a)
        assert not graph.has_edge(b, b)

    def test_solo_expense_has_no_edges(self, users):
        """Test a user alone in an expense gets no edges"""
        a = users[0]

        graph = ParticipationGraph.build([split(uuid4(), a)])

        assert graph.neighbours(a) == frozenset()
        assert a not in graph.users
        assert len(graph) == 0

    def test_neighbours(self, users):
        """Test neighbours collects co-participants over all expenses"""
        a, b, c = users[:3]
        e1, e2 = uuid4(), uuid4()

        graph = ParticipationGraph.build([split(e1, a), split(e1, b), split(e2, a), split(e2, c)])

        assert graph.neighbours(a) == frozenset({b, c})
        assert graph.neighbours(b) == frozenset({a})
        assert graph.users == frozenset({a, b, c})

    def test_unknown_user(self, users):
        """Test queries about unknown users are simply False / empty"""
        graph = ParticipationGraph.build([])

        assert not graph.has_edge(users[0], users[1])
        assert graph.neighbours(users[0]) == frozenset()
