"""BabySync Analytics - sleep, feeding and wake-window statistics for infant care logs."""

__version__ = "1.0.0"

from . import analytics, constants, data, exceptions, models, services
from .analytics import (
    AgeTargetTables,
    DateRangeResolver,
    DaySummaryBuilder,
    FeedingAnalyticsEngine,
    SleepAnalyticsEngine,
    WakeWindowClassifier,
)
from .clock import Clock, FixedClock, SystemClock
from .data import EventDataLoader, EventRepository
from .models import (
    BabyProfile,
    DateInterval,
    DateRangeSelector,
    DaySummary,
    DiaperEvent,
    FeedEvent,
    FeedingAnalyticsResult,
    FeedMethod,
    MilestoneEvent,
    SleepAnalyticsResult,
    SleepEvent,
    TargetRange,
    WakeWindow,
    WakeWindowQuality,
    parse_event,
)
from .services import AnalyticsReport, AnalyticsService


def get_version() -> str:
    """Get the current version of babysync_analytics."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "babysync-analytics",
        "version": __version__,
        "description": "Sleep, feeding and wake-window statistics for infant care logs",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "BabyProfile",
    "DateInterval",
    "DateRangeSelector",
    "DaySummary",
    "DiaperEvent",
    "FeedEvent",
    "FeedingAnalyticsResult",
    "FeedMethod",
    "MilestoneEvent",
    "SleepAnalyticsResult",
    "SleepEvent",
    "TargetRange",
    "WakeWindow",
    "WakeWindowQuality",
    "parse_event",
    # Engines
    "AgeTargetTables",
    "DateRangeResolver",
    "DaySummaryBuilder",
    "FeedingAnalyticsEngine",
    "SleepAnalyticsEngine",
    "WakeWindowClassifier",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Data Layer
    "EventDataLoader",
    "EventRepository",
    # Services
    "AnalyticsReport",
    "AnalyticsService",
    # Modules
    "analytics",
    "constants",
    "data",
    "exceptions",
    "models",
    "services",
]
