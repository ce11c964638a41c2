"""
Services package - Business logic layer.
"""

from .metrics_service import MetricsService, get_metrics_service

__all__ = ['MetricsService', 'get_metrics_service']
