"""
Reference-time sources.

Every computation pass samples its clock exactly once and threads that single
timestamp through range resolution, age calculation and all engines.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Supplies the reference timestamp for a computation pass."""

    def now(self) -> datetime:
        """Return the current reference time."""
        ...


class SystemClock:
    """Wall-clock time; naive local time unless a timezone is given."""

    def __init__(self, tz: timezone | None = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Always returns the same instant; used for reproducible reports and tests."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
