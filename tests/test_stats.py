"""
Unit tests for the session statistics engine
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from worldhub.metrics import (
    Streak,
    clamp_range,
    compute_streak,
    days_between,
    parse_day_key,
    pct_delta,
    simple_moving_average,
    to_day_key,
)
from worldhub.utils import round1, round_half_up


@pytest.mark.unit
class TestDayKeys:
    """Test day key conversion helpers."""

    def test_to_day_key_pads(self):
        assert to_day_key(date(2024, 3, 7)) == "2024-03-07"

    def test_to_day_key_ignores_time(self):
        assert to_day_key(datetime(2024, 12, 31, 23, 59, 59)) == "2024-12-31"

    def test_to_day_key_aware_datetime_uses_local_date(self):
        moment = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

        assert to_day_key(moment) == moment.astimezone().strftime("%Y-%m-%d")

    def test_parse_day_key_local_midnight(self):
        parsed = parse_day_key("2024-02-29")

        assert parsed == datetime(2024, 2, 29, 0, 0)
        assert parsed.tzinfo is None

    def test_round_trip(self):
        assert to_day_key(parse_day_key("2023-01-09")) == "2023-01-09"

    @pytest.mark.parametrize("a,b,expected", [
        (datetime(2024, 1, 1, 23, 0), datetime(2024, 1, 2, 1, 0), 1),
        (datetime(2024, 1, 2, 8, 0), datetime(2024, 1, 2, 22, 0), 0),
        (date(2024, 1, 10), date(2024, 1, 3), -7),
        (date(2023, 12, 31), datetime(2024, 3, 1, 5, 0), 61),
    ])
    def test_days_between(self, a, b, expected):
        assert days_between(a, b) == expected


@pytest.mark.unit
class TestComputeStreak:
    """Test compute_streak()."""

    def test_empty(self):
        assert compute_streak([]) == Streak(0, 0)

    def test_consecutive_days_ending_today(self):
        streak = compute_streak(["2024-01-01", "2024-01-02", "2024-01-03"], today=date(2024, 1, 3))

        assert streak == Streak(current=3, best=3)

    def test_yesterday_still_active(self):
        current, best = compute_streak(["2024-01-01", "2024-01-02", "2024-01-03"], today=date(2024, 1, 4))

        assert (current, best) == (3, 3)

    def test_broken_streak_reports_zero(self):
        streak = compute_streak(["2024-01-01", "2024-01-02", "2024-01-03"], today=date(2024, 1, 5))

        assert streak.current == 0
        assert streak.best == 3

    def test_gap_resets_run(self):
        streak = compute_streak(["2024-01-01", "2024-01-05"], today=date(2024, 6, 1))

        assert streak == Streak(current=0, best=1)

    def test_current_is_last_run_not_best(self):
        keys = ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-09", "2024-01-10"]

        assert compute_streak(keys, today=date(2024, 1, 10)) == Streak(current=2, best=4)

    def test_duplicates_and_order_ignored(self):
        keys = ["2024-01-03", "2024-01-01", "2024-01-02", "2024-01-02", "2024-01-03"]

        assert compute_streak(keys, today=date(2024, 1, 3)) == Streak(3, 3)

    def test_across_month_boundary(self):
        keys = ["2024-02-28", "2024-02-29", "2024-03-01"]

        assert compute_streak(keys, today=datetime(2024, 3, 1, 18, 30)) == Streak(3, 3)

    def test_single_day_today(self):
        assert compute_streak(["2024-05-05"], today=date(2024, 5, 5)) == Streak(1, 1)

    def test_defaults_to_local_today(self):
        today = date.today()
        keys = [to_day_key(today - timedelta(days=1)), to_day_key(today)]

        assert compute_streak(keys) == Streak(2, 2)


@pytest.mark.unit
class TestClampRange:
    """Test clamp_range()."""

    def test_keeps_last_elements(self):
        assert clamp_range([1, 2, 3, 4, 5], 3) == [3, 4, 5]

    def test_shorter_input_returned_as_is(self):
        values = [1, 2]

        assert clamp_range(values, 5) is values

    def test_exact_length_returned_as_is(self):
        values = [1, 2, 3]

        assert clamp_range(values, 3) is values

    def test_empty(self):
        assert clamp_range([], 7) == []


@pytest.mark.unit
class TestSimpleMovingAverage:
    """Test simple_moving_average()."""

    def test_partial_leading_windows(self):
        assert simple_moving_average([1, 2, 3, 4, 5], 3) == [1, 1.5, 2, 3, 4]

    def test_same_length(self):
        values = [4, 8, 15, 16, 23, 42]

        assert len(simple_moving_average(values, 5)) == len(values)

    @pytest.mark.parametrize("window", [1, 0, -3])
    def test_small_window_returns_input(self, window):
        values = [3, 1, 2]

        assert simple_moving_average(values, window) is values

    def test_window_larger_than_series(self):
        assert simple_moving_average([2, 4, 6], 10) == pytest.approx([2, 3, 4])

    def test_empty(self):
        assert simple_moving_average([], 5) == []


@pytest.mark.unit
class TestPctDelta:
    """Test pct_delta()."""

    @pytest.mark.parametrize("current,previous,expected", [
        (0, 0, 0),
        (10, 0, 100),
        (5, 10, -50),
        (15, 10, 50),
        (56, 49, 14),
        (7, 8, -12),  # -12.5 rounds up
        (9, 8, 13),  # 12.5 rounds up
        (10, 10, 0),
    ])
    def test_pct_delta(self, current, previous, expected):
        assert pct_delta(current, previous) == expected

    def test_returns_int(self):
        assert isinstance(pct_delta(3, 7), int)


@pytest.mark.unit
class TestRounding:
    """Test the half-up rounding helpers."""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (3.5, 4),
        (-2.5, -2),
        (2.4, 2),
        (0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round1(self):
        assert round1(7.1666) == 7.2
        assert round1(6.5) == 6.5
