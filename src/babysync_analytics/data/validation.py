"""
Sanity checks for logged events.

These rules flag questionable entries for the caregiver; they never reject
data, and the analytics engines do not consult them.
"""

from ..constants import ValidationThresholds
from ..models import FeedEvent, FeedMethod, SleepEvent, VolumeUnit


def validate_sleep_event(event: SleepEvent) -> list[str]:
    """Return a list of problems with a sleep event (empty if none)."""
    errors: list[str] = []

    if event.end_time is not None and event.end_time < event.start_time:
        errors.append("End time must be after start time")

    minutes = event.duration_minutes
    if minutes is not None and minutes > ValidationThresholds.MAX_SLEEP_MINUTES:
        errors.append("Sleep duration seems too long")

    return errors


def validate_feed_event(event: FeedEvent) -> list[str]:
    """Return a list of problems with a feed event (empty if none)."""
    errors: list[str] = []

    if event.method == FeedMethod.BOTTLE:
        volume = event.volume_in(VolumeUnit.OZ)
        if volume is None:
            errors.append("Volume is required for bottle feeding")
        elif volume <= 0 or volume > ValidationThresholds.MAX_BOTTLE_VOLUME_OZ:
            errors.append(
                "Volume must be between 0 and "
                f"{ValidationThresholds.MAX_BOTTLE_VOLUME_OZ:g} oz"
            )

    elif event.method == FeedMethod.BREAST:
        duration = event.duration_minutes
        if duration is None:
            errors.append("Duration is required for breastfeeding")
        elif duration <= 0 or duration > ValidationThresholds.MAX_BREASTFEED_MINUTES:
            errors.append(
                "Duration must be between 0 and "
                f"{ValidationThresholds.MAX_BREASTFEED_MINUTES} minutes"
            )
        if event.side is None:
            errors.append("Side is required for breastfeeding")

    elif event.method == FeedMethod.SOLIDS:
        if not event.food_type:
            errors.append("Food type is required for solid feeding")

    elif event.method == FeedMethod.MIXED:
        if event.volume is None and event.duration_minutes is None:
            errors.append("Either volume or duration is required for mixed feeding")

    return errors
