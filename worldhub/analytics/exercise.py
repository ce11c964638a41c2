"""
Exercise detail analytics.
Repetitions per session, weekly volume, intensity and most trained exercises.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..config import TOP_N, TREND_SMA_WINDOW
from ..logger import log_session_stats, setup_logger
from ..metrics import compute_streak, pct_delta, simple_moving_average
from ..models import ExerciseSession
from ..utils import mean_or_zero, round_half_up
from .windows import build_windows, coverage, top_n, window_frame

logger = setup_logger(__name__)


@dataclass
class ExerciseInsights:
    active_days: int = 0
    coverage_pct: int = 0
    total_reps30: int = 0
    best_day_reps: int = 0
    intensity: int = 0
    top3: List[str] = field(default_factory=list)


@dataclass
class ExerciseMetrics:
    """KPIs of the exercise detail view."""
    week_reps: int = 0
    delta_week: int = 0
    avg30: int = 0
    streak_current: int = 0
    streak_best: int = 0
    top_exercise: Optional[str] = None
    trend: List[float] = field(default_factory=list)
    insights: ExerciseInsights = field(default_factory=ExerciseInsights)

    def to_dict(self) -> dict:
        return asdict(self)


def compute_exercise_metrics(
    sessions: Sequence[ExerciseSession],
    today: Optional[Union[date, datetime]] = None,
) -> ExerciseMetrics:
    """
    Compute the exercise detail KPIs.

    Exercises are ranked by repetition volume over the analysis window.

    Args:
        sessions: Workout sessions, in any order
        today: Reference date for the current streak (defaults to today)

    Returns:
        ExerciseMetrics; neutral values when there are no sessions
    """
    if not sessions:
        return ExerciseMetrics()

    windows = build_windows(sessions)
    last30 = windows.last30
    log_session_stats(last30, logger, "Exercise window")

    streak = compute_streak(windows.day_keys, today=today)

    reps_per_session = [s.total_repetitions for s in last30]
    avg30 = round_half_up(mean_or_zero(reps_per_session))

    week_a_reps = sum(s.total_repetitions for s in windows.week_a)
    week_b_reps = sum(s.total_repetitions for s in windows.week_b)

    names = [ex.content_name for s in last30 for ex in s.exercises]
    volumes = [ex.repetition_count for s in last30 for ex in s.exercises]
    ranked = [name for name, _ in top_n(names, volumes, TOP_N)]

    frame = window_frame(last30, reps_per_session)
    active_days, coverage_pct = coverage(frame)
    total_reps30 = int(frame['amount'].sum())

    return ExerciseMetrics(
        week_reps=week_a_reps,
        delta_week=pct_delta(week_a_reps, week_b_reps),
        avg30=avg30,
        streak_current=streak.current,
        streak_best=streak.best,
        top_exercise=ranked[0] if ranked else None,
        trend=list(simple_moving_average(reps_per_session, TREND_SMA_WINDOW)),
        insights=ExerciseInsights(
            active_days=active_days,
            coverage_pct=coverage_pct,
            total_reps30=total_reps30,
            best_day_reps=int(frame['amount'].max()),
            intensity=round_half_up(total_reps30 / len(last30)),
            top3=ranked,
        ),
    )
