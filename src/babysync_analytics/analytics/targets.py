"""
Age-dependent target ranges.

Piecewise lookup tables mapping an infant's age in whole months to a target
range for daily sleep hours, daily feeding volume (fl oz) and wake-window
minutes. Bracket bounds are inclusive; ages past the last bracket fall into
it, and negative ages fall into the first one.
"""

from ..models import TargetRange

# (max_age_months, lower, upper); the final bracket has no upper age
_SLEEP_HOURS: list[tuple[int | None, float, float]] = [
    (2, 14.0, 17.0),
    (5, 12.0, 15.0),
    (11, 12.0, 15.0),
    (23, 11.0, 14.0),
    (None, 10.0, 13.0),
]

_FEEDING_VOLUME_OZ: list[tuple[int | None, float, float]] = [
    (1, 18.0, 32.0),
    (3, 24.0, 36.0),
    (5, 25.0, 40.0),
    (8, 24.0, 32.0),
    (11, 20.0, 30.0),
    (None, 16.0, 24.0),
]

_WAKE_WINDOW_MINUTES: list[tuple[int | None, float, float]] = [
    (1, 30, 90),
    (3, 60, 120),
    (5, 90, 150),
    (8, 0, 0),  # ordinal-dependent, see _SIX_TO_EIGHT_MONTHS
    (11, 150, 240),
    (18, 240, 360),
    (None, 300, 420),
]

# Ordinal -> (lower, upper) for 6-8 months; third and later windows share one
_SIX_TO_EIGHT_MONTHS: dict[int, tuple[float, float]] = {
    1: (120, 150),
    2: (150, 180),
}
_SIX_TO_EIGHT_MONTHS_LATER: tuple[float, float] = (90, 120)


def _lookup(
    table: list[tuple[int | None, float, float]], age_months: int
) -> tuple[int | None, float, float]:
    for row in table:
        max_age = row[0]
        if max_age is None or age_months <= max_age:
            return row
    return table[-1]


class AgeTargetTables:
    """Pure lookups of age-bracketed target ranges."""

    @staticmethod
    def sleep_hours(age_months: int) -> TargetRange:
        """Recommended total sleep per day, in hours."""
        _, lower, upper = _lookup(_SLEEP_HOURS, age_months)
        return TargetRange(lower=lower, upper=upper)

    @staticmethod
    def feeding_volume(age_months: int) -> TargetRange:
        """Recommended feeding volume per day, in fluid ounces."""
        _, lower, upper = _lookup(_FEEDING_VOLUME_OZ, age_months)
        return TargetRange(lower=lower, upper=upper)

    @staticmethod
    def wake_window_minutes(age_months: int, ordinal: int) -> TargetRange:
        """
        Recommended length of a wake window, in minutes.

        Args:
            age_months: Whole months of age
            ordinal: 1-based index of the window in the retained sequence

        Returns:
            Inclusive target range in minutes
        """
        max_age, lower, upper = _lookup(_WAKE_WINDOW_MINUTES, age_months)
        if max_age == 8:
            lower, upper = _SIX_TO_EIGHT_MONTHS.get(
                ordinal, _SIX_TO_EIGHT_MONTHS_LATER
            )
        return TargetRange(lower=lower, upper=upper)
