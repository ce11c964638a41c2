"""Metrics package for session time series."""

from .stats import (
    Streak,
    to_day_key,
    parse_day_key,
    days_between,
    compute_streak,
    clamp_range,
    simple_moving_average,
    pct_delta,
)

__all__ = [
    'Streak',
    'to_day_key',
    'parse_day_key',
    'days_between',
    'compute_streak',
    'clamp_range',
    'simple_moving_average',
    'pct_delta',
]
