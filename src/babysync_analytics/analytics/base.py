"""
Base classes and protocols for range-based analytics engines.

Defines the interface the sleep and feeding engines follow and the helpers
they share: interval resolution, half-open filtering and guarded division.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any, Protocol, TypeVar

from ..models import BabyProfile, DateInterval, DateRangeSelector
from ..settings import Settings
from .date_ranges import DateRangeResolver

T = TypeVar("T")


class RangeEngineProtocol(Protocol):
    """Protocol for engines aggregating events over a resolved date range."""

    def compute(
        self,
        events: Iterable[Any],
        baby: BabyProfile,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> Any:
        """Aggregate events for baby over the resolved range."""
        ...


class BaseRangeEngine(ABC):
    """
    Abstract base class for range-based analytics engines.

    Engines hold no per-call state; every input, including the reference
    timestamp, arrives as a call parameter.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        resolver: DateRangeResolver | None = None,
    ):
        """
        Initialize engine with settings.

        Args:
            settings: Application settings; defaults are used when omitted
            resolver: Date range resolver; a default one is created if omitted
        """
        self.settings = settings or Settings()
        self.resolver = resolver or DateRangeResolver()

    @abstractmethod
    def compute(
        self,
        events: Iterable[Any],
        baby: BabyProfile,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None = None,
        custom_end: datetime | None = None,
    ) -> Any:
        """
        Aggregate events over the resolved range.

        Args:
            events: Already-materialized events for the baby
            baby: Profile the events belong to
            selector: Symbolic date range
            reference_time: Single reference timestamp for this pass
            custom_start: Inclusive start for CUSTOM ranges
            custom_end: Exclusive end for CUSTOM ranges

        Returns:
            Immutable result object
        """
        raise NotImplementedError("Subclasses must implement compute()")

    def _resolve(
        self,
        selector: DateRangeSelector,
        reference_time: datetime,
        custom_start: datetime | None,
        custom_end: datetime | None,
    ) -> DateInterval:
        return self.resolver.resolve(
            selector, reference_time, custom_start=custom_start, custom_end=custom_end
        )

    @staticmethod
    def _filter_in_interval(
        events: Iterable[T], interval: DateInterval, key: Callable[[T], datetime]
    ) -> list[T]:
        """Keep events whose key time lies in ``[start, end)``."""
        return [event for event in events if interval.contains(key(event))]

    @staticmethod
    def _averaging_days(interval: DateInterval) -> int:
        """Nominal day count, never below one."""
        return max(interval.day_count, 1)

    @staticmethod
    def _safe_divide(numerator: float, denominator: float) -> float:
        """Divide, returning 0.0 instead of failing on a zero denominator."""
        return numerator / denominator if denominator else 0.0
