"""
Date range resolution.

Maps a symbolic range selector plus a reference timestamp to a concrete
half-open interval ``[start, end)``. Weeks start on Monday. Every selector also
carries a nominal day count used only as an averaging denominator; months
always count as 30 days.
"""

import logging
from datetime import datetime, timedelta

from ..constants import NominalDayCounts, TimeConstants
from ..exceptions import DateRangeError
from ..models import DateInterval, DateRangeSelector

logger = logging.getLogger(__name__)

_NOMINAL_DAY_COUNTS: dict[DateRangeSelector, int] = {
    DateRangeSelector.TODAY: NominalDayCounts.TODAY,
    DateRangeSelector.WEEK: NominalDayCounts.WEEK,
    DateRangeSelector.MONTH: NominalDayCounts.MONTH,
}


def start_of_day(moment: datetime) -> datetime:
    """Midnight of the calendar day containing moment (tzinfo preserved)."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(moment: datetime) -> datetime:
    """Midnight of the Monday on or before moment."""
    offset = (moment.weekday() - TimeConstants.WEEK_START_WEEKDAY) % 7
    return start_of_day(moment) - timedelta(days=offset)


def start_of_month(moment: datetime) -> datetime:
    return start_of_day(moment).replace(day=1)


def start_of_next_month(moment: datetime) -> datetime:
    first = start_of_month(moment)
    if first.month == 12:
        return first.replace(year=first.year + 1, month=1)
    return first.replace(month=first.month + 1)


def nominal_day_count(selector: DateRangeSelector) -> int | None:
    """Averaging denominator for a selector; None for custom ranges."""
    return _NOMINAL_DAY_COUNTS.get(selector)


class DateRangeResolver:
    """Resolves range selectors against a single reference timestamp."""

    def resolve(
        self,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> DateInterval:
        """
        Resolve a selector to a half-open interval.

        Args:
            selector: Symbolic range choice
            reference_time: The pass's single reference timestamp
            custom_start: Inclusive start, only used for CUSTOM
            custom_end: Exclusive end, only used for CUSTOM

        Returns:
            Resolved DateInterval with its nominal day count

        Raises:
            DateRangeError: If custom bounds are given with end before start
        """
        selector = DateRangeSelector(selector)

        if selector == DateRangeSelector.TODAY:
            start = start_of_day(reference_time)
            end = start + timedelta(days=1)
        elif selector == DateRangeSelector.WEEK:
            start = start_of_week(reference_time)
            end = start + timedelta(days=TimeConstants.DAYS_PER_WEEK)
        elif selector == DateRangeSelector.MONTH:
            start = start_of_month(reference_time)
            end = start_of_next_month(reference_time)
        else:
            return self._resolve_custom(reference_time, custom_start, custom_end)

        return DateInterval(
            start=start,
            end=end,
            selector=selector,
            day_count=_NOMINAL_DAY_COUNTS[selector],
        )

    def _resolve_custom(
        self,
        reference_time: datetime,
        custom_start: datetime | None,
        custom_end: datetime | None,
    ) -> DateInterval:
        if custom_start is None or custom_end is None:
            logger.warning(
                "Custom range requested without bounds; "
                f"using empty interval at {reference_time.isoformat()}"
            )
            return DateInterval(
                start=reference_time,
                end=reference_time,
                selector=DateRangeSelector.CUSTOM,
                day_count=0,
            )

        if custom_end < custom_start:
            raise DateRangeError(
                f"Custom range ends ({custom_end}) before it starts ({custom_start})"
            )

        interval = DateInterval(
            start=custom_start,
            end=custom_end,
            selector=DateRangeSelector.CUSTOM,
            day_count=0,
        )
        # Every calendar day touched counts, and a zero-length range still counts one
        day_count = max(len(interval.days()), 1)
        return interval.model_copy(update={"day_count": day_count})
