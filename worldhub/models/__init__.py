"""
Models package - Session records and payload normalization.
"""

from .session import (
    SleepSession,
    MeditationSession,
    MeditationType,
    ExerciseEntry,
    ExerciseSession,
    normalize_sessions,
    normalize_meditation_types,
)

__all__ = [
    'SleepSession',
    'MeditationSession',
    'MeditationType',
    'ExerciseEntry',
    'ExerciseSession',
    'normalize_sessions',
    'normalize_meditation_types',
]
