"""
Sleep analytics.

Aggregates sleep events whose start falls inside the resolved range. Ongoing
sleeps are counted but contribute nothing to any duration statistic. Wake
windows are derived from the baby's entire sleep history, independent of the
report range.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from ..constants import TimeConstants
from ..models import (
    BabyProfile,
    DailySleep,
    DateInterval,
    DateRangeSelector,
    SleepAnalyticsResult,
    SleepEvent,
)
from ..settings import Settings
from .base import BaseRangeEngine
from .date_ranges import DateRangeResolver
from .wake_windows import WakeWindowClassifier

logger = logging.getLogger(__name__)


def _total_seconds(events: Iterable[SleepEvent]) -> float:
    return sum(event.duration for event in events if event.duration is not None)


class SleepAnalyticsEngine(BaseRangeEngine):
    """Computes sleep totals and averages for a resolved date range."""

    def __init__(
        self,
        settings: Settings | None = None,
        resolver: DateRangeResolver | None = None,
        wake_window_classifier: WakeWindowClassifier | None = None,
    ):
        super().__init__(settings, resolver)
        self.wake_window_classifier = wake_window_classifier or WakeWindowClassifier()

    def compute(
        self,
        events: Iterable[SleepEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> SleepAnalyticsResult:
        """
        Compute sleep analytics for baby.

        Args:
            events: All sleep events for the baby
            baby: Profile the events belong to
            selector: Symbolic date range
            reference_time: Single reference timestamp for this pass
            custom_start: Inclusive start for CUSTOM ranges
            custom_end: Exclusive end for CUSTOM ranges

        Returns:
            SleepAnalyticsResult; all statistics are 0 for an empty range
        """
        all_events = list(events)
        interval = self._resolve(selector, reference_time, custom_start, custom_end)
        in_range = self._filter_in_interval(
            all_events, interval, key=lambda event: event.start_time
        )

        completed = [event for event in in_range if not event.is_ongoing]
        ongoing_count = len(in_range) - len(completed)
        night_sleeps = [event for event in completed if event.is_night_sleep]
        naps = [event for event in completed if event.is_nap]
        durations = [event.duration for event in completed]

        days = self._averaging_days(interval)
        total_hours = _total_seconds(completed) / TimeConstants.SECONDS_PER_HOUR
        night_hours = _total_seconds(night_sleeps) / TimeConstants.SECONDS_PER_HOUR
        nap_hours = _total_seconds(naps) / TimeConstants.SECONDS_PER_HOUR

        logger.debug(
            f"Sleep analytics for baby {baby.id}: {len(in_range)} events in "
            f"[{interval.start.isoformat()}, {interval.end.isoformat()}), "
            f"{ongoing_count} ongoing"
        )

        return SleepAnalyticsResult(
            baby_id=baby.id,
            date_range=interval,
            total_sleep_hours=total_hours,
            average_daily_sleep=total_hours / days,
            night_sleep_average=night_hours / days,
            nap_average=nap_hours / days,
            nap_count=len(naps),
            average_naps_per_day=len(naps) / days,
            longest_sleep=max(durations, default=0.0),
            shortest_sleep=min(durations, default=0.0),
            average_wakeups=None,
            ongoing_sleep_count=ongoing_count,
            wake_windows=tuple(
                self.wake_window_classifier.compute(all_events, baby, reference_time)
            ),
            sleep_by_day=tuple(self._sleep_by_day(in_range, interval)),
        )

    def _sleep_by_day(
        self, events: list[SleepEvent], interval: DateInterval
    ) -> list[DailySleep]:
        """Bucket in-range events by the calendar day their sleep started."""
        buckets: list[DailySleep] = []
        for day in interval.days():
            day_interval = DateInterval(
                start=max(day, interval.start),
                end=min(day + timedelta(days=1), interval.end),
                selector=DateRangeSelector.CUSTOM,
                day_count=1,
            )
            completed = [
                event
                for event in self._filter_in_interval(
                    events, day_interval, key=lambda event: event.start_time
                )
                if not event.is_ongoing
            ]
            naps = [event for event in completed if event.is_nap]
            buckets.append(
                DailySleep(
                    date=day,
                    total_sleep=_total_seconds(completed),
                    nap_sleep=_total_seconds(naps),
                    night_sleep=_total_seconds(
                        event for event in completed if event.is_night_sleep
                    ),
                    nap_count=len(naps),
                )
            )
        return buckets
