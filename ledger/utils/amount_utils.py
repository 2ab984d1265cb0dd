"""Integer minor-unit arithmetic helpers"""

from typing import Iterable


def sum_amounts(values: Iterable[int]) -> int:
    """
    Sum a sequence of minor-unit amounts.

    Args:
        values: Integer amounts

    Returns:
        Sum of all values
    """
    return sum(values, 0)


def percentage_of(total_amount: int, percentage: int) -> int:
    """
    Floor of ``percentage`` percent of ``total_amount``.

    Args:
        total_amount: Amount in minor units
        percentage: Whole percentage (0-100)

    Returns:
        Floored share in minor units
    """
    return (total_amount * percentage) // 100
