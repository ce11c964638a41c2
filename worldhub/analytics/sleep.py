"""
Sleep detail analytics.
Hours per night, weekly volume, quality and regularity of sleep.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

import numpy as np

from ..config import GOOD_QUALITY_THRESHOLD, TREND_SMA_WINDOW
from ..logger import log_session_stats, setup_logger
from ..metrics import compute_streak, pct_delta, simple_moving_average
from ..models import SleepSession
from ..utils import mean_or_zero, round1, round_half_up
from .windows import build_windows, coverage, share_pct, window_frame

logger = setup_logger(__name__)


@dataclass
class SleepInsights:
    active_nights: int = 0
    coverage_pct: int = 0
    best_night: float = 0
    good_quality_pct: int = 0
    quality_coverage_pct: int = 0
    variability: float = 0


@dataclass
class SleepMetrics:
    """KPIs of the sleep detail view."""
    week_hours: int = 0
    delta_week: int = 0
    avg30: float = 0
    avg_quality30: Optional[int] = None
    streak_current: int = 0
    streak_best: int = 0
    trend: List[float] = field(default_factory=list)
    insights: SleepInsights = field(default_factory=SleepInsights)

    def to_dict(self) -> dict:
        return asdict(self)


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation, 0 for fewer than two values."""
    if len(values) <= 1:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))


def compute_sleep_metrics(
    sessions: Sequence[SleepSession],
    today: Optional[Union[date, datetime]] = None,
) -> SleepMetrics:
    """
    Compute the sleep detail KPIs.

    Args:
        sessions: Logged nights, in any order
        today: Reference date for the current streak (defaults to today)

    Returns:
        SleepMetrics; neutral values when there are no sessions
    """
    if not sessions:
        return SleepMetrics()

    windows = build_windows(sessions)
    last30 = windows.last30
    log_session_stats(last30, logger, "Sleep window")

    streak = compute_streak(windows.day_keys, today=today)

    hours_per_night = [round1(s.hours) for s in last30]
    avg30 = round1(mean_or_zero(hours_per_night))

    week_a_hours = sum(s.hours for s in windows.week_a)
    week_b_hours = sum(s.hours for s in windows.week_b)
    delta_week = pct_delta(round_half_up(week_a_hours), round_half_up(week_b_hours))

    quality_values = [s.quality for s in last30 if s.quality is not None]
    avg_quality30 = round_half_up(mean_or_zero(quality_values)) if quality_values else None

    frame = window_frame(last30, hours_per_night)
    active_nights, coverage_pct = coverage(frame)
    good_nights = sum(1 for s in last30 if (s.quality or 0) >= GOOD_QUALITY_THRESHOLD)

    return SleepMetrics(
        week_hours=round_half_up(week_a_hours),
        delta_week=delta_week,
        avg30=avg30,
        avg_quality30=avg_quality30,
        streak_current=streak.current,
        streak_best=streak.best,
        trend=list(simple_moving_average(hours_per_night, TREND_SMA_WINDOW)),
        insights=SleepInsights(
            active_nights=active_nights,
            coverage_pct=coverage_pct,
            best_night=float(frame['amount'].max()),
            good_quality_pct=share_pct(good_nights, len(last30)),
            quality_coverage_pct=share_pct(len(quality_values), len(last30)),
            variability=round1(std_dev(hours_per_night)),
        ),
    )
