"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ.setdefault("WORLDHUB_LOG_TO_FILE", "0")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sleep_sessions():
    """Three consecutive nights, deliberately out of order."""
    from worldhub.models import SleepSession

    return [
        SleepSession(date="2024-01-03", hours=7.0, quality=4),
        SleepSession(date="2024-01-01", hours=6.5),
        SleepSession(date="2024-01-02", hours=8.0, quality=5),
    ]


@pytest.fixture
def meditation_sessions():
    """Four sessions over three days, two on the last day."""
    from worldhub.models import MeditationSession

    return [
        MeditationSession(date="2024-01-10", duration_seconds=600, mood_after=4, meditation_type_id="t1"),
        MeditationSession(date="2024-01-11", duration_seconds=900, meditation_type_id="t2"),
        MeditationSession(date="2024-01-12", duration_seconds=630, mood_after=5, meditation_type_id="t1"),
        MeditationSession(date="2024-01-12", duration_seconds=300),
    ]


@pytest.fixture
def meditation_types():
    from worldhub.models import MeditationType

    return [
        MeditationType(id="t1", slug="breathing", name="Breathing"),
        MeditationType(id="t2", slug="body-scan", name="Body scan"),
    ]


@pytest.fixture
def exercise_sessions():
    """Three workouts with a one-day gap."""
    from worldhub.models import ExerciseEntry, ExerciseSession

    return [
        ExerciseSession(date="2024-02-01", exercises=[
            ExerciseEntry("Squat", 20),
            ExerciseEntry("Push-up", 10),
        ]),
        ExerciseSession(date="2024-02-02", exercises=[
            ExerciseEntry("Push-up", 15),
        ]),
        ExerciseSession(date="2024-02-04", exercises=[
            ExerciseEntry("Plank", 0),
            ExerciseEntry("Squat", 5),
        ]),
    ]
