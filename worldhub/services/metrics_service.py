"""
Metrics service - Centralized domain metrics calculations.
Provides consistent KPIs across all domain detail views.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence, Union

from ..analytics import (
    compute_exercise_metrics,
    compute_meditation_metrics,
    compute_sleep_metrics,
)
from ..hub.types import Domain, coerce_domain
from ..logger import setup_logger
from ..models import MeditationType, normalize_meditation_types, normalize_sessions

logger = setup_logger(__name__)


class MetricsService:
    """
    Service layer for domain metrics calculations.
    Provides a unified interface over the sleep, meditation and exercise analytics.
    """

    def __init__(self, today: Optional[Union[date, datetime]] = None):
        # Fixed reference date for streaks; None means "now" at each call
        self.today = today

    def compute(
        self,
        domain: Domain,
        sessions: Sequence,
        types: Optional[Sequence[MeditationType]] = None,
    ):
        """
        Compute the detail KPIs of one domain.

        Args:
            domain: Domain of the sessions
            sessions: Session records of that domain
            types: Meditation type lookup (meditation only)

        Returns:
            SleepMetrics, MeditationMetrics or ExerciseMetrics
        """
        domain = coerce_domain(domain)
        sessions = sessions or []
        logger.debug(f"Computing {domain.value} metrics for {len(sessions)} sessions")

        if domain is Domain.SLEEP:
            return compute_sleep_metrics(sessions, today=self.today)
        if domain is Domain.MEDITATION:
            return compute_meditation_metrics(sessions, types=types, today=self.today)
        return compute_exercise_metrics(sessions, today=self.today)

    def compute_from_raw(self, domain: Domain, payload: Any, types_payload: Any = None):
        """
        Normalize REST payloads, then compute the domain KPIs.

        Args:
            domain: Domain of the payload
            payload: Decoded JSON list of sessions
            types_payload: Decoded JSON list of meditation types

        Returns:
            Metrics dataclass of the domain
        """
        sessions = normalize_sessions(domain, payload)
        types = normalize_meditation_types(types_payload) if types_payload is not None else None
        return self.compute(domain, sessions, types=types)

    def compute_all(
        self,
        sessions_by_domain: Dict[Domain, Sequence],
        meditation_types: Optional[Sequence[MeditationType]] = None,
    ) -> Dict[str, dict]:
        """
        Compute the KPIs of every domain.

        Domains missing from ``sessions_by_domain`` get neutral metrics.

        Returns:
            Dictionary keyed by domain value with the metrics as dicts
        """
        by_domain = {coerce_domain(d): s for d, s in sessions_by_domain.items()}
        return {
            domain.value: self.compute(
                domain,
                by_domain.get(domain, []),
                types=meditation_types if domain is Domain.MEDITATION else None,
            ).to_dict()
            for domain in Domain
        }


# Global singleton instance
_metrics_service = MetricsService()


def get_metrics_service() -> MetricsService:
    """
    Get the global MetricsService instance.

    Returns:
        MetricsService singleton
    """
    return _metrics_service
