"""
Service layer for coordinating business logic.

This package contains high-level services that coordinate multiple components
to accomplish business goals.
"""

from .analytics_service import AnalyticsReport, AnalyticsService

__all__ = [
    "AnalyticsReport",
    "AnalyticsService",
]
