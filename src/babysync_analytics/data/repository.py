"""
Repository pattern for event data access.

This module provides a high-level interface for querying loaded events.
"""

import logging
from typing import Protocol

from ..models import BabyProfile, EventType, FeedEvent, SleepEvent
from ..settings import Settings
from .loader import AnyEvent, EventDataLoader

logger = logging.getLogger(__name__)


class RepositoryProtocol(Protocol):
    """Protocol for repositories."""

    def get_sleep_events(self, baby_id: str) -> list[SleepEvent]:
        """Get all sleep events for a baby."""
        ...

    def get_feed_events(self, baby_id: str) -> list[FeedEvent]:
        """Get all feed events for a baby."""
        ...


class EventRepository:
    """
    Repository for event data access.

    Loads events once and answers per-baby, per-type queries from the cache.
    """

    def __init__(self, loader: EventDataLoader, settings: Settings):
        """
        Initialize the repository.

        Args:
            loader: Data loader instance
            settings: Application settings
        """
        self.loader = loader
        self.settings = settings
        self.logger = logging.getLogger(__name__)
        self._events_cache: list[AnyEvent] | None = None
        self._babies_cache: dict[str, BabyProfile] | None = None

    def get_all_events(self) -> list[AnyEvent]:
        if self._events_cache is None:
            self._events_cache = self.loader.load_events()
        return list(self._events_cache)

    def get_events_for_baby(self, baby_id: str) -> list[AnyEvent]:
        return [event for event in self.get_all_events() if event.baby_id == baby_id]

    def get_events_by_type(self, baby_id: str, event_type: EventType) -> list[AnyEvent]:
        return [
            event
            for event in self.get_events_for_baby(baby_id)
            if event.type == event_type.value
        ]

    def get_sleep_events(self, baby_id: str) -> list[SleepEvent]:
        return [
            event
            for event in self.get_events_for_baby(baby_id)
            if isinstance(event, SleepEvent)
        ]

    def get_feed_events(self, baby_id: str) -> list[FeedEvent]:
        return [
            event
            for event in self.get_events_for_baby(baby_id)
            if isinstance(event, FeedEvent)
        ]

    def get_baby(self, baby_id: str) -> BabyProfile | None:
        """
        Get a baby profile by id.

        Args:
            baby_id: Profile identifier

        Returns:
            The profile, or None if it is not in the babies file
        """
        if self._babies_cache is None:
            self._babies_cache = self.loader.load_babies()
        return self._babies_cache.get(baby_id)

    def invalidate_cache(self) -> None:
        """Clear cached events and profiles, forcing reload on next access."""
        self._events_cache = None
        self._babies_cache = None
        self.logger.debug("Event cache invalidated")
