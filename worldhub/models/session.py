"""
Session data models for the three tracked domains.

Records are immutable once built. ``from_dict`` mirrors the permissive
normalization the web client applies to the REST payloads: missing optional
values become ``None``, never a sentinel number.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Optional, Tuple

from ..config import DAY_KEY_FORMAT, QUALITY_SCALE
from ..hub.types import Domain, coerce_domain
from ..logger import setup_logger
from ..metrics.stats import to_day_key
from ..utils import round_half_up

logger = setup_logger(__name__)


def is_day_key(value: Any) -> bool:
    """Whether ``value`` is a ``YYYY-MM-DD`` string naming a real date."""
    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        datetime.strptime(value, DAY_KEY_FORMAT)
    except ValueError:
        return False
    return True


def coerce_day_key(value: Any) -> str:
    """
    Normalize a date-ish value to a day key.

    Accepts day keys, ISO timestamps (the date part is kept) and
    ``date``/``datetime`` objects.

    Raises:
        ValueError: if no valid day key can be extracted
    """
    if isinstance(value, (date, datetime)):
        return to_day_key(value)
    if isinstance(value, str) and is_day_key(value[:10]):
        return value[:10]
    raise ValueError(f"Invalid day key: {value!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce_rating(value: Any) -> Optional[float]:
    """Permissive rating parse: unusable or out-of-scale values become None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return None
    low, high = QUALITY_SCALE
    return rating if low <= rating <= high else None


def _validate_rating(name: str, value: Optional[float]) -> None:
    if value is None:
        return
    low, high = QUALITY_SCALE
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class SleepSession:
    """
    One logged night.

    Attributes:
        date: Day key of the night
        hours: Hours slept
        quality: Optional rating on the 1-5 scale
        id: Backend identifier, when provided
    """
    date: str
    hours: float
    quality: Optional[float] = None
    id: Optional[str] = None

    def __post_init__(self):
        if not is_day_key(self.date):
            raise ValueError(f"Invalid day key: {self.date!r}")
        if self.hours < 0:
            raise ValueError("Hours cannot be negative")
        _validate_rating("quality", self.quality)

    @classmethod
    def from_dict(cls, data: dict) -> 'SleepSession':
        """Create SleepSession from a REST payload entry."""
        return cls(
            date=coerce_day_key(data.get('date')),
            hours=float(data.get('hours') or 0),
            quality=_coerce_rating(data.get('quality')),
            id=str(data['id']) if data.get('id') is not None else None,
        )


@dataclass(frozen=True)
class MeditationSession:
    """
    One meditation session summary.

    Attributes:
        date: Day key of the session
        duration_seconds: Session length in seconds
        mood_after: Optional mood rating after the session (1-5)
        meditation_type_id: Identifier of the meditation type, if known
    """
    date: str
    duration_seconds: float
    mood_after: Optional[float] = None
    meditation_type_id: Optional[str] = None

    def __post_init__(self):
        if not is_day_key(self.date):
            raise ValueError(f"Invalid day key: {self.date!r}")
        if self.duration_seconds < 0:
            raise ValueError("Duration cannot be negative")
        _validate_rating("mood_after", self.mood_after)

    @property
    def duration_minutes(self) -> int:
        """Duration in whole minutes."""
        return round_half_up(self.duration_seconds / 60)

    @classmethod
    def from_dict(cls, data: dict) -> 'MeditationSession':
        """Create MeditationSession from a REST payload entry.

        Entries without a string ``date`` or a numeric ``durationSeconds``
        are rejected.
        """
        if not isinstance(data.get('date'), str):
            raise ValueError("Meditation session without a date")
        if not _is_number(data.get('durationSeconds')):
            raise ValueError("Meditation session without a numeric duration")

        mood_after = data.get('moodAfter')
        type_id = data.get('meditationTypeId')
        return cls(
            date=coerce_day_key(data['date']),
            duration_seconds=data['durationSeconds'],
            mood_after=_coerce_rating(mood_after),
            meditation_type_id=type_id if isinstance(type_id, str) else None,
        )


@dataclass(frozen=True)
class MeditationType:
    """Meditation type lookup item (id -> slug)."""
    id: str
    slug: str
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'MeditationType':
        return cls(
            id=str(data['id']),
            slug=str(data['slug']),
            name=data.get('name'),
        )


@dataclass(frozen=True)
class ExerciseEntry:
    """One exercise performed during a session."""
    content_name: str
    repetition_count: int = 0
    content_id: Optional[str] = None

    def __post_init__(self):
        if self.repetition_count < 0:
            raise ValueError("Repetition count cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'ExerciseEntry':
        content_id = data.get('exerciceContentId')
        return cls(
            content_name=str(data.get('exerciceContentName') or ""),
            repetition_count=int(data.get('repetitionCount') or 0),
            content_id=str(content_id) if content_id is not None else None,
        )


@dataclass(frozen=True)
class ExerciseSession:
    """
    One workout session.

    Attributes:
        date: Day key of the session
        exercises: Exercises performed, with their repetition counts
        quality: Optional rating on the 1-5 scale
        id: Backend identifier, when provided
    """
    date: str
    exercises: Tuple[ExerciseEntry, ...] = field(default_factory=tuple)
    quality: Optional[float] = None
    id: Optional[str] = None

    def __post_init__(self):
        if not is_day_key(self.date):
            raise ValueError(f"Invalid day key: {self.date!r}")
        object.__setattr__(self, 'exercises', tuple(self.exercises))
        _validate_rating("quality", self.quality)

    @property
    def total_repetitions(self) -> int:
        return sum(ex.repetition_count for ex in self.exercises)

    @classmethod
    def from_dict(cls, data: dict) -> 'ExerciseSession':
        """Create ExerciseSession from a REST payload entry."""
        raw_exercises = data.get('exercices')
        if not isinstance(raw_exercises, list):
            raw_exercises = []
        return cls(
            date=coerce_day_key(data.get('date')),
            exercises=tuple(
                ExerciseEntry.from_dict(ex) for ex in raw_exercises if isinstance(ex, dict)
            ),
            quality=_coerce_rating(data.get('quality')),
            id=str(data['id']) if data.get('id') is not None else None,
        )


SESSION_MODELS = {
    Domain.SLEEP: SleepSession,
    Domain.MEDITATION: MeditationSession,
    Domain.EXERCISE: ExerciseSession,
}


def _normalize_list(model, payload: Any, label: str) -> List:
    if not isinstance(payload, list):
        logger.warning(f"{label}: expected a list payload, got {type(payload).__name__}")
        return []

    items = []
    dropped = 0
    for raw in payload:
        if not isinstance(raw, dict):
            dropped += 1
            continue
        try:
            items.append(model.from_dict(raw))
        except (KeyError, TypeError, ValueError) as e:
            dropped += 1
            logger.debug(f"{label}: dropping malformed entry {raw!r}: {e}")

    if dropped:
        logger.info(f"{label}: dropped {dropped} malformed entries out of {len(payload)}")
    return items


def normalize_sessions(domain: Domain, payload: Any) -> List:
    """
    Convert a raw REST payload into session records for a domain.

    Args:
        domain: Domain the payload belongs to
        payload: Decoded JSON (expected: list of dicts)

    Returns:
        List of session records; malformed entries are dropped
    """
    domain = coerce_domain(domain)
    return _normalize_list(SESSION_MODELS[domain], payload, f"{domain.value} sessions")


def normalize_meditation_types(payload: Any) -> List[MeditationType]:
    """Convert a raw meditation types payload into lookup items."""
    return _normalize_list(MeditationType, payload, "meditation types")
