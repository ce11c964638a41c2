"""
Meditation detail analytics.
Minutes per session, weekly volume, mood coverage and favourite meditation types.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..config import TOP_N, TREND_SMA_WINDOW
from ..logger import log_session_stats, setup_logger
from ..metrics import compute_streak, pct_delta, simple_moving_average
from ..models import MeditationSession, MeditationType
from ..utils import mean_or_zero, round_half_up
from .windows import build_windows, coverage, share_pct, top_n, window_frame

logger = setup_logger(__name__)


@dataclass
class MeditationInsights:
    active_days: int = 0
    coverage_pct: int = 0
    total_minutes30: int = 0
    best_day_minutes: int = 0
    mood_coverage_pct: int = 0


@dataclass
class MeditationMetrics:
    """KPIs of the meditation detail view."""
    week_minutes: int = 0
    last_week_minutes: int = 0
    delta_week: int = 0
    avg30: int = 0
    avg_mood30: Optional[int] = None
    streak_current: int = 0
    streak_best: int = 0
    top_type_slug: Optional[str] = None
    top3_type_slugs: List[str] = field(default_factory=list)
    trend: List[float] = field(default_factory=list)
    insights: MeditationInsights = field(default_factory=MeditationInsights)

    def to_dict(self) -> dict:
        return asdict(self)


def compute_meditation_metrics(
    sessions: Sequence[MeditationSession],
    types: Optional[Sequence[MeditationType]] = None,
    today: Optional[Union[date, datetime]] = None,
) -> MeditationMetrics:
    """Compute the meditation detail KPIs. Types are ranked by frequency."""
    if not sessions:
        return MeditationMetrics()

    windows = build_windows(sessions)
    last30 = windows.last30
    log_session_stats(last30, logger, "Meditation window")

    streak = compute_streak(windows.day_keys, today=today)

    minutes_per_session = [s.duration_minutes for s in last30]
    avg30 = round_half_up(mean_or_zero(minutes_per_session))

    mood_values = [s.mood_after for s in last30 if s.mood_after is not None]
    avg_mood30 = round_half_up(mean_or_zero(mood_values)) if mood_values else None

    week_minutes = round_half_up(sum(s.duration_seconds for s in windows.week_a) / 60)
    last_week_minutes = round_half_up(sum(s.duration_seconds for s in windows.week_b) / 60)

    slug_by_id = {t.id: t.slug for t in (types or [])}
    type_ids = [s.meditation_type_id for s in last30 if s.meditation_type_id]
    ranked_ids = [type_id for type_id, _ in top_n(type_ids, [1] * len(type_ids), TOP_N)]
    top_type_slug = slug_by_id.get(ranked_ids[0]) if ranked_ids else None
    top3_type_slugs = [slug_by_id[type_id] for type_id in ranked_ids if type_id in slug_by_id]

    frame = window_frame(last30, minutes_per_session)
    active_days, coverage_pct = coverage(frame)

    return MeditationMetrics(
        week_minutes=week_minutes,
        last_week_minutes=last_week_minutes,
        delta_week=pct_delta(week_minutes, last_week_minutes),
        avg30=avg30,
        avg_mood30=avg_mood30,
        streak_current=streak.current,
        streak_best=streak.best,
        top_type_slug=top_type_slug,
        top3_type_slugs=top3_type_slugs,
        trend=list(simple_moving_average(minutes_per_session, TREND_SMA_WINDOW)),
        insights=MeditationInsights(
            active_days=active_days,
            coverage_pct=coverage_pct,
            total_minutes30=int(frame['amount'].sum()),
            best_day_minutes=int(frame['amount'].max()),
            mood_coverage_pct=share_pct(len(mood_values), len(last30)),
        ),
    )
