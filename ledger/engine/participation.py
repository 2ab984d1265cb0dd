"""Who has shared an expense with whom"""

from collections import defaultdict
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, Mapping
from uuid import UUID

from ledger.engine.records import SplitRecord


class ParticipationGraph:
    """
    Undirected relation over users: an edge joins two users who both have
    a split in at least one common expense.

    The graph is symmetric by construction and never contains self-edges.
    It is read-only once built.
    """

    def __init__(self, adjacency: Mapping[UUID, FrozenSet[UUID]]):
        self._adjacency: Dict[UUID, FrozenSet[UUID]] = dict(adjacency)

    @classmethod
    def build(cls, splits: Iterable[SplitRecord]) -> "ParticipationGraph":
        """
        Build the graph from split records.

        Args:
            splits: Split records of one group, any order

        Returns:
            ParticipationGraph
        """
        participants_by_expense: Dict[UUID, list[UUID]] = defaultdict(list)
        for split in splits:
            participants = participants_by_expense[split.expense_id]
            if split.user_id not in participants:
                participants.append(split.user_id)

        neighbours: Dict[UUID, set[UUID]] = defaultdict(set)
        for participants in participants_by_expense.values():
            for a, b in combinations(participants, 2):
                neighbours[a].add(b)
                neighbours[b].add(a)

        return cls({user_id: frozenset(users) for user_id, users in neighbours.items()})

    def has_edge(self, a: UUID, b: UUID) -> bool:
        """True if a and b co-participated in at least one expense"""
        return b in self._adjacency.get(a, frozenset())

    def neighbours(self, user_id: UUID) -> FrozenSet[UUID]:
        return self._adjacency.get(user_id, frozenset())

    @property
    def users(self) -> FrozenSet[UUID]:
        """Users with at least one edge"""
        return frozenset(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edges = sum(len(users) for users in self._adjacency.values()) // 2
        return f"<ParticipationGraph(users={len(self._adjacency)}, edges={edges})>"
