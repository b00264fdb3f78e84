"""
Analytics computation layer.

This package contains the pure engines that turn event logs into statistics:
- date_ranges: Range selector resolution
- targets: Age-bracketed target ranges
- sleep: Sleep totals and averages
- wake_windows: Wake window derivation and classification
- feeding: Feeding totals and averages
- daily: Single-day summaries across event kinds
"""

from .base import BaseRangeEngine
from .daily import DaySummaryBuilder
from .date_ranges import DateRangeResolver, nominal_day_count
from .feeding import FeedingAnalyticsEngine
from .sleep import SleepAnalyticsEngine
from .targets import AgeTargetTables
from .wake_windows import WakeWindowClassifier, classify_wake_window

__all__ = [
    "AgeTargetTables",
    "BaseRangeEngine",
    "DateRangeResolver",
    "DaySummaryBuilder",
    "FeedingAnalyticsEngine",
    "SleepAnalyticsEngine",
    "WakeWindowClassifier",
    "classify_wake_window",
    "nominal_day_count",
]
