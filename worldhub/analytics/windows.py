"""
Shared windowing and ranking helpers for the domain detail analytics.
"""

from dataclasses import dataclass
from typing import Hashable, List, Sequence, Tuple

import pandas as pd

from ..config import ANALYSIS_WINDOW_DAYS, WEEK_WINDOW_DAYS
from ..metrics import clamp_range
from ..utils import round_half_up


@dataclass(frozen=True)
class SessionWindows:
    """
    Chronological views over a domain's sessions.

    Attributes:
        ordered: All sessions sorted by day key
        last30: The last ANALYSIS_WINDOW_DAYS records
        week_a: The last WEEK_WINDOW_DAYS records ("this week")
        week_b: The WEEK_WINDOW_DAYS records before week_a ("last week")
    """
    ordered: Sequence
    last30: Sequence
    week_a: Sequence
    week_b: Sequence

    @property
    def day_keys(self) -> List[str]:
        return [s.date for s in self.ordered]


def build_windows(sessions: Sequence) -> SessionWindows:
    """Sort sessions by day key and cut the analysis and weekly windows.

    The sort is stable, so sessions logged on the same day keep their order.
    """
    ordered = sorted(sessions, key=lambda s: s.date)
    return SessionWindows(
        ordered=ordered,
        last30=clamp_range(ordered, ANALYSIS_WINDOW_DAYS),
        week_a=clamp_range(ordered, WEEK_WINDOW_DAYS),
        week_b=clamp_range(ordered[:max(0, len(ordered) - WEEK_WINDOW_DAYS)], WEEK_WINDOW_DAYS),
    )


def window_frame(window: Sequence, amounts: Sequence[float]) -> pd.DataFrame:
    """Build a ``date``/``amount`` DataFrame for a window."""
    return pd.DataFrame({
        'date': [s.date for s in window],
        'amount': list(amounts),
    }, columns=['date', 'amount'])


def coverage(frame: pd.DataFrame) -> Tuple[int, int]:
    """
    Days with at least one record in the window.

    Returns:
        (active_days, coverage_pct) where coverage is relative to
        ANALYSIS_WINDOW_DAYS
    """
    active_days = int(frame['date'].nunique())
    return active_days, round_half_up(active_days / ANALYSIS_WINDOW_DAYS * 100)


def share_pct(count: int, total: int) -> int:
    """Rounded percentage of ``count`` over ``total``, 0 when empty."""
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)


def top_n(keys: Sequence[Hashable], scores: Sequence[float], n: int) -> List[Tuple[Hashable, float]]:
    """
    Rank keys by their summed score, highest first.

    Ties keep the order in which keys first appear.

    Examples:
        top_n(['a', 'b', 'a'], [1, 1, 1], 1) -> [('a', 2)]
    """
    if not keys:
        return []

    frame = pd.DataFrame({'key': list(keys), 'score': list(scores)})
    totals = frame.groupby('key', sort=False)['score'].sum()
    ranked = totals.sort_values(ascending=False, kind='mergesort').head(n)
    return list(zip(ranked.index.tolist(), ranked.tolist()))
