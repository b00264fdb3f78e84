"""
Data access layer.

This package contains modules for loading, checking, and querying event data.
"""

from .loader import EventDataLoader, as_local_naive, parse_event_row
from .repository import EventRepository
from .validation import validate_feed_event, validate_sleep_event

__all__ = [
    "EventDataLoader",
    "EventRepository",
    "as_local_naive",
    "parse_event_row",
    "validate_feed_event",
    "validate_sleep_event",
]
