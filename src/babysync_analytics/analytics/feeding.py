"""
Feeding analytics.

Aggregates feed events whose timestamp falls inside the resolved range.
Feeds without a recorded volume (solids, breast-only) are still counted as
feeds but add nothing to volume totals. Recorded volumes are converted into
the configured reporting unit before summing.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta

from ..models import (
    BabyProfile,
    DailyFeeding,
    DateInterval,
    DateRangeSelector,
    FeedEvent,
    FeedingAnalyticsResult,
    FeedMethod,
)
from .base import BaseRangeEngine

logger = logging.getLogger(__name__)


def average_interval(events: list[FeedEvent]) -> float:
    """Mean gap in seconds between consecutive feeds; 0.0 for fewer than two."""
    if len(events) < 2:
        return 0.0
    ordered = sorted(event.timestamp for event in events)
    gaps = [
        (later - earlier).total_seconds()
        for earlier, later in zip(ordered, ordered[1:])
    ]
    return sum(gaps) / len(gaps)


class FeedingAnalyticsEngine(BaseRangeEngine):
    """Computes feeding totals and averages for a resolved date range."""

    def compute(
        self,
        events: Iterable[FeedEvent],
        baby: BabyProfile,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> FeedingAnalyticsResult:
        """
        Compute feeding analytics for baby.

        Args:
            events: All feed events for the baby
            baby: Profile the events belong to
            selector: Symbolic date range
            reference_time: Single reference timestamp for this pass
            custom_start: Inclusive start for CUSTOM ranges
            custom_end: Exclusive end for CUSTOM ranges

        Returns:
            FeedingAnalyticsResult; all statistics are 0 for an empty range
        """
        interval = self._resolve(selector, reference_time, custom_start, custom_end)
        in_range = self._filter_in_interval(
            events, interval, key=lambda event: event.timestamp
        )

        days = self._averaging_days(interval)
        total_volume = self._total_volume(in_range)
        recorded = sum(1 for event in in_range if event.has_volume)

        if self.settings.average_volume_over_recorded_feeds:
            per_feed_denominator = recorded
        else:
            per_feed_denominator = len(in_range)

        by_method: dict[FeedMethod, int] = dict(
            Counter(event.method for event in in_range)
        )

        logger.debug(
            f"Feeding analytics for baby {baby.id}: {len(in_range)} feeds in "
            f"[{interval.start.isoformat()}, {interval.end.isoformat()}), "
            f"{recorded} with volume"
        )

        return FeedingAnalyticsResult(
            baby_id=baby.id,
            date_range=interval,
            volume_unit=self.settings.volume_unit,
            total_feedings=len(in_range),
            average_feedings_per_day=len(in_range) / days,
            total_volume=total_volume,
            average_daily_volume=total_volume / days,
            average_volume_per_feed=self._safe_divide(
                total_volume, per_feed_denominator
            ),
            recorded_volume_feedings=recorded,
            average_interval_between_feeds=average_interval(in_range),
            feedings_by_method=by_method,
            feedings_by_day=tuple(self._feedings_by_day(in_range, interval)),
        )

    def _total_volume(self, events: Iterable[FeedEvent]) -> float:
        total = 0.0
        for event in events:
            volume = event.volume_in(self.settings.volume_unit)
            if volume is not None:
                total += volume
        return total

    def _feedings_by_day(
        self, events: list[FeedEvent], interval: DateInterval
    ) -> list[DailyFeeding]:
        """Bucket in-range feeds by calendar day."""
        buckets: list[DailyFeeding] = []
        for day in interval.days():
            day_interval = DateInterval(
                start=max(day, interval.start),
                end=min(day + timedelta(days=1), interval.end),
                selector=DateRangeSelector.CUSTOM,
                day_count=1,
            )
            day_events = self._filter_in_interval(
                events, day_interval, key=lambda event: event.timestamp
            )
            buckets.append(
                DailyFeeding(
                    date=day,
                    count=len(day_events),
                    total_volume=self._total_volume(day_events),
                    average_interval=average_interval(day_events),
                )
            )
        return buckets
