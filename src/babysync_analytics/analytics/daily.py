"""Single-day summaries across all event kinds."""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from ..constants import TimeConstants
from ..models import (
    DaySummary,
    DiaperEvent,
    FeedEvent,
    MilestoneEvent,
    SleepEvent,
    VolumeUnit,
)
from .date_ranges import start_of_day

logger = logging.getLogger(__name__)


class DaySummaryBuilder:
    """Builds a DaySummary from a mixed list of events."""

    def __init__(self, volume_unit: VolumeUnit = VolumeUnit.OZ):
        self.volume_unit = volume_unit

    def build(
        self,
        events: Iterable[FeedEvent | SleepEvent | DiaperEvent | MilestoneEvent],
        day: datetime,
    ) -> DaySummary:
        """
        Summarize the calendar day containing `day`.

        Sleeps are attributed to the day they started; ongoing sleeps add
        nothing to the sleep hours or nap count.

        Args:
            events: Events of any kind for one baby
            day: Any moment within the day to summarize

        Returns:
            DaySummary for that day
        """
        start = start_of_day(day)
        end = start + timedelta(days=1)

        feeds: list[FeedEvent] = []
        sleeps: list[SleepEvent] = []
        diapers = 0
        milestones = 0

        for event in events:
            if isinstance(event, SleepEvent):
                moment = event.start_time
            else:
                moment = event.timestamp
            if not start <= moment < end:
                continue
            if isinstance(event, FeedEvent):
                feeds.append(event)
            elif isinstance(event, SleepEvent):
                if not event.is_ongoing:
                    sleeps.append(event)
            elif isinstance(event, DiaperEvent):
                diapers += 1
            elif isinstance(event, MilestoneEvent):
                milestones += 1

        volumes = [event.volume_in(self.volume_unit) for event in feeds]
        naps = [event for event in sleeps if event.is_nap]
        nap_seconds = sum(event.duration for event in naps)
        night_seconds = sum(
            event.duration for event in sleeps if event.is_night_sleep
        )

        return DaySummary(
            date=start,
            total_feedings=len(feeds),
            total_volume=sum(volume for volume in volumes if volume is not None),
            nap_count=len(naps),
            day_sleep_hours=nap_seconds / TimeConstants.SECONDS_PER_HOUR,
            night_sleep_hours=night_seconds / TimeConstants.SECONDS_PER_HOUR,
            diaper_count=diapers,
            milestones=milestones,
        )
