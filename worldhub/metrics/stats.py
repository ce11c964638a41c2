"""
Session statistics shared by the domain detail views.
Day-key normalization, streaks, windowing, smoothing and percent deltas.
The sleep, meditation and exercise views all share these semantics.
"""

from datetime import date, datetime
from typing import Iterable, List, NamedTuple, Optional, Sequence, TypeVar, Union

from ..utils import round_half_up

T = TypeVar("T")

DateLike = Union[date, datetime]


class Streak(NamedTuple):
    """Current and best run of consecutive logged days."""
    current: int
    best: int


def _local_date(d: DateLike) -> date:
    """Calendar date in local time. Aware datetimes are converted first."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone()
        return d.date()
    return d


def to_day_key(d: DateLike) -> str:
    """
    Convert a date to its ``YYYY-MM-DD`` day key.

    Uses the local calendar date, zero-padded.

    Examples:
        to_day_key(datetime(2024, 3, 7, 23, 59)) -> '2024-03-07'
    """
    local = _local_date(d)
    return f"{local.year:04d}-{local.month:02d}-{local.day:02d}"


def parse_day_key(day: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` day key to a naive datetime at local midnight."""
    year, month, day_of_month = (int(part) for part in day.split("-"))
    return datetime(year, month, day_of_month)


def days_between(a: DateLike, b: DateLike) -> int:
    """Whole days from ``a`` to ``b`` (``b - a``), ignoring the time of day."""
    return (_local_date(b) - _local_date(a)).days


def compute_streak(day_keys: Iterable[str], today: Optional[DateLike] = None) -> Streak:
    """
    Compute the current and best streak from a list of day keys.

    Rules:
        - Keys are deduplicated and sorted chronologically.
        - A run extends when the gap to the previous day is exactly one day.
        - ``best`` is the longest run (1 as soon as one day exists).
        - ``current`` is the run ending at the latest logged day, or 0 when
          that day is more than one day before ``today``.

    Args:
        day_keys: Day keys, not necessarily unique nor sorted
        today: Reference date (defaults to the local date)

    Returns:
        Streak(current, best)
    """
    unique_days = sorted(set(day_keys))
    if not unique_days:
        return Streak(0, 0)

    dates = [parse_day_key(key) for key in unique_days]

    best = 1
    run = 1
    for i in range(1, len(dates)):
        if days_between(dates[i - 1], dates[i]) == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)

    if today is None:
        today = datetime.now()

    current = run
    if days_between(dates[-1], today) > 1:
        current = 0

    return Streak(current, best)


def clamp_range(arr: Sequence[T], max_len: int) -> Sequence[T]:
    """
    Keep only the last ``max_len`` elements.

    Returns the input itself when it is not longer than ``max_len``.

    Examples:
        clamp_range([1, 2, 3, 4, 5], 3) -> [3, 4, 5]
        clamp_range([1, 2], 5) -> [1, 2]
    """
    if len(arr) <= max_len:
        return arr
    return arr[len(arr) - max_len:]


def simple_moving_average(values: Sequence[float], window_size: int) -> Sequence[float]:
    """
    Trailing simple moving average, same length as the input.

    Index ``i`` averages ``values[max(0, i - window_size + 1):i + 1]``, so the
    first points use a partial window. A window of 1 or less returns the
    input unchanged.

    Examples:
        simple_moving_average([1, 2, 3, 4, 5], 3) -> [1.0, 1.5, 2.0, 3.0, 4.0]
    """
    if window_size <= 1:
        return values

    out: List[float] = []
    for i in range(len(values)):
        chunk = values[max(0, i - window_size + 1):i + 1]
        out.append(sum(chunk) / len(chunk))
    return out


def pct_delta(current: float, previous: float) -> int:
    """
    Percentage change from ``previous`` to ``current``, rounded to an integer.

    A zero baseline yields 0 when nothing happened either, 100 otherwise.
    """
    if previous == 0:
        return 0 if current == 0 else 100
    return round_half_up((current - previous) / previous * 100)
