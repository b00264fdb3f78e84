"""
High-level service for computing baby analytics.

This service owns the engines and the clock. Each public call samples the
clock exactly once and passes that single reference timestamp to range
resolution, age calculation and every engine it invokes.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ..analytics import (
    AgeTargetTables,
    DateRangeResolver,
    DaySummaryBuilder,
    FeedingAnalyticsEngine,
    SleepAnalyticsEngine,
    WakeWindowClassifier,
)
from ..clock import Clock, SystemClock
from ..models import (
    BabyProfile,
    DateRangeSelector,
    DaySummary,
    FeedEvent,
    FeedingAnalyticsResult,
    SleepAnalyticsResult,
    SleepEvent,
    TargetRange,
    WakeWindow,
)
from ..settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsReport:
    """
    Sleep and feeding analytics computed against one reference time.

    Attributes:
        reference_time: The instant the clock was sampled
        sleep: Sleep analytics for the requested range
        feeding: Feeding analytics for the requested range
        sleep_target: Recommended daily sleep hours for the baby's age
        feeding_target: Recommended daily volume for the baby's age
    """

    reference_time: datetime
    sleep: SleepAnalyticsResult
    feeding: FeedingAnalyticsResult
    sleep_target: TargetRange
    feeding_target: TargetRange


class AnalyticsServiceProtocol(Protocol):
    """Protocol for analytics services."""

    def report(
        self,
        sleep_events: Iterable[SleepEvent],
        feed_events: Iterable[FeedEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
    ) -> AnalyticsReport:
        """Compute a combined report."""
        ...


class AnalyticsService:
    """
    Facade coordinating the analytics engines for a caller.

    Engines are stateless, so one service may be shared across threads and
    across baby profiles.
    """

    def __init__(self, settings: Settings | None = None, clock: Clock | None = None):
        """
        Initialize the analytics service.

        Args:
            settings: Application settings
            clock: Reference-time source; wall clock when omitted
        """
        self.settings = settings or Settings()
        self.clock = clock or SystemClock()
        self.logger = logging.getLogger(__name__)

        resolver = DateRangeResolver()
        self.wake_window_classifier = WakeWindowClassifier()
        self.sleep_engine = SleepAnalyticsEngine(
            self.settings, resolver, self.wake_window_classifier
        )
        self.feeding_engine = FeedingAnalyticsEngine(self.settings, resolver)
        self.day_summary_builder = DaySummaryBuilder(self.settings.volume_unit)

    def sleep_analytics(
        self,
        events: Iterable[SleepEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> SleepAnalyticsResult:
        reference_time = self.clock.now()
        return self.sleep_engine.compute(
            events, baby, selector, reference_time, custom_start, custom_end
        )

    def feeding_analytics(
        self,
        events: Iterable[FeedEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> FeedingAnalyticsResult:
        reference_time = self.clock.now()
        return self.feeding_engine.compute(
            events, baby, selector, reference_time, custom_start, custom_end
        )

    def wake_windows(
        self, events: Iterable[SleepEvent], baby: BabyProfile
    ) -> list[WakeWindow]:
        reference_time = self.clock.now()
        return self.wake_window_classifier.compute(events, baby, reference_time)

    def day_summary(self, events: Iterable, day: datetime | None = None) -> DaySummary:
        """Summarize one calendar day; today (per the clock) when day is omitted."""
        return self.day_summary_builder.build(events, day or self.clock.now())

    def sleep_target(self, baby: BabyProfile) -> TargetRange:
        return AgeTargetTables.sleep_hours(baby.age_in_months(self.clock.now()))

    def feeding_target(self, baby: BabyProfile) -> TargetRange:
        return AgeTargetTables.feeding_volume(baby.age_in_months(self.clock.now()))

    def report(
        self,
        sleep_events: Iterable[SleepEvent],
        feed_events: Iterable[FeedEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> AnalyticsReport:
        """
        Compute sleep and feeding analytics plus age targets in one pass.

        Args:
            sleep_events: All sleep events for the baby
            feed_events: All feed events for the baby
            baby: Profile the events belong to
            selector: Symbolic date range
            custom_start: Inclusive start for CUSTOM ranges
            custom_end: Exclusive end for CUSTOM ranges

        Returns:
            AnalyticsReport whose parts all share one reference time
        """
        reference_time = self.clock.now()
        age_months = baby.age_in_months(reference_time)
        self.logger.info(
            f"Computing {DateRangeSelector(selector).value} report for baby "
            f"{baby.id} ({age_months} months) at {reference_time.isoformat()}"
        )

        return AnalyticsReport(
            reference_time=reference_time,
            sleep=self.sleep_engine.compute(
                sleep_events, baby, selector, reference_time, custom_start, custom_end
            ),
            feeding=self.feeding_engine.compute(
                feed_events, baby, selector, reference_time, custom_start, custom_end
            ),
            sleep_target=AgeTargetTables.sleep_hours(age_months),
            feeding_target=AgeTargetTables.feeding_volume(age_months),
        )
