"""
Analytics subpackage for the domain detail views.
"""

from .windows import (
    SessionWindows,
    build_windows,
    top_n,
)

from .sleep import (
    compute_sleep_metrics,
    SleepMetrics,
    SleepInsights,
)

from .meditation import (
    compute_meditation_metrics,
    MeditationMetrics,
    MeditationInsights,
)

from .exercise import (
    compute_exercise_metrics,
    ExerciseMetrics,
    ExerciseInsights,
)

__all__ = [
    # Windows
    "SessionWindows",
    "build_windows",
    "top_n",
    # Sleep
    "compute_sleep_metrics",
    "SleepMetrics",
    "SleepInsights",
    # Meditation
    "compute_meditation_metrics",
    "MeditationMetrics",
    "MeditationInsights",
    # Exercise
    "compute_exercise_metrics",
    "ExerciseMetrics",
    "ExerciseInsights",
]
