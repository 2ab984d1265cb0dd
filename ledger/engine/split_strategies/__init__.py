"""Split calculation strategies"""

from ledger.core.exceptions import LedgerError, LedgerErrorCode
from ledger.engine.records import SplitKind
from ledger.engine.split_strategies.base import BaseSplitStrategy
from ledger.engine.split_strategies.equal_split import EqualSplitStrategy
from ledger.engine.split_strategies.exact_split import ExactSplitStrategy
from ledger.engine.split_strategies.percentage_split import \
    PercentageSplitStrategy


def get_split_strategy(split_kind: SplitKind) -> BaseSplitStrategy:
    """
    Get appropriate split strategy based on split kind.

    Args:
        split_kind: Kind of split (EQUAL, EXACT, or PERCENTAGE)

    Returns:
        Instance of appropriate strategy

    Raises:
        LedgerError: INVALID_SPLIT if split_kind is not recognized
    """
    strategies = {
        SplitKind.EQUAL: EqualSplitStrategy(),
        SplitKind.EXACT: ExactSplitStrategy(),
        SplitKind.PERCENTAGE: PercentageSplitStrategy(),
    }

    strategy = strategies.get(split_kind)
    if strategy is None:
        raise LedgerError(
            LedgerErrorCode.INVALID_SPLIT,
            f"Unknown split kind: {split_kind}",
            split_kind=str(split_kind),
        )

    return strategy


__all__ = [
    "BaseSplitStrategy",
    "EqualSplitStrategy",
    "ExactSplitStrategy",
    "PercentageSplitStrategy",
    "get_split_strategy",
]
