"""
Numeric helpers shared by the analytics modules.
Rounding follows the UI convention (halves round up), not Python's banker's rounding.
"""

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity.

    Examples:
        round_half_up(2.5) -> 3
        round_half_up(-2.5) -> -2
    """
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round to one decimal, halves up.

    Examples:
        round1(7.25) -> 7.3
    """
    return round_half_up(value * 10) / 10


def mean_or_zero(values: Iterable[float]) -> float:
    """Arithmetic mean, 0 for an empty series."""
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)
