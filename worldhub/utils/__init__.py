"""Utility functions for the World Hub core."""

from .numbers import (
    round_half_up,
    round1,
    mean_or_zero,
)

__all__ = [
    'round_half_up',
    'round1',
    'mean_or_zero',
]
