"""
Wake window derivation and classification.

Wake windows are the gaps between consecutive completed sleeps, ordered by
sleep end time. Gaps that are not positive or that reach twelve hours are
treated as overlapping logs or missing data and discarded without consuming
an ordinal. Each retained window is classified on its whole-minute length
against its age target, with a 30-minute soft margin before "long" becomes
"too long".
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from ..constants import TimeConstants, WakeWindowConstants
from ..models import (
    BabyProfile,
    SleepEvent,
    TargetRange,
    WakeWindow,
    WakeWindowQuality,
)
from .targets import AgeTargetTables

logger = logging.getLogger(__name__)


def classify_wake_window(minutes: float, target: TargetRange) -> WakeWindowQuality:
    """
    Classify a wake window length against its target range.

    Args:
        minutes: Window length in minutes
        target: Inclusive target range in minutes

    Returns:
        SHORT below the target, OPTIMAL inside it, LONG up to 30 minutes over,
        TOO_LONG beyond that
    """
    if minutes < target.lower:
        return WakeWindowQuality.SHORT
    if minutes > target.upper + WakeWindowConstants.LONG_BUFFER_MINUTES:
        return WakeWindowQuality.TOO_LONG
    if minutes > target.upper:
        return WakeWindowQuality.LONG
    return WakeWindowQuality.OPTIMAL


class WakeWindowClassifier:
    """Derives classified wake windows from a baby's full sleep history."""

    def __init__(self, tables: type[AgeTargetTables] = AgeTargetTables):
        self.tables = tables

    def compute(
        self,
        sleep_events: Iterable[SleepEvent],
        baby: BabyProfile,
        reference_time: datetime,
    ) -> list[WakeWindow]:
        """
        Derive wake windows in chronological order.

        Args:
            sleep_events: All sleep events for the baby, in any order
            baby: Profile used for the age lookup
            reference_time: Single reference timestamp for this pass

        Returns:
            Retained windows with ordinals 1..n
        """
        completed = sorted(
            (event for event in sleep_events if event.end_time is not None),
            key=lambda event: event.end_time,
        )
        age_months = baby.age_in_months(reference_time)

        windows: list[WakeWindow] = []
        for current, following in zip(completed, completed[1:]):
            gap = (following.start_time - current.end_time).total_seconds()

            if gap <= 0 or gap >= WakeWindowConstants.MAX_GAP_SECONDS:
                logger.debug(
                    f"Discarding gap of {gap:.0f}s between sleep ending "
                    f"{current.end_time.isoformat()} and sleep starting "
                    f"{following.start_time.isoformat()}"
                )
                continue

            ordinal = len(windows) + 1
            target = self.tables.wake_window_minutes(age_months, ordinal)
            # Classified on whole minutes; partial minutes are dropped
            minutes = int(gap // TimeConstants.SECONDS_PER_MINUTE)

            windows.append(
                WakeWindow(
                    start_time=current.end_time,
                    end_time=following.start_time,
                    duration_seconds=gap,
                    ordinal=ordinal,
                    quality=classify_wake_window(minutes, target),
                )
            )

        logger.debug(
            f"Derived {len(windows)} wake windows from {len(completed)} "
            f"completed sleeps for baby {baby.id}"
        )
        return windows
