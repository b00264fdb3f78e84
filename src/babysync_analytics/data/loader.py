"""
Data loading functionality.

This module loads exported event logs and baby profiles from files and turns
them into typed models. Event files may be semicolon-separated CSV or JSON;
every row carries a ``type`` column selecting the event variant.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol, TypeVar

import pandas as pd
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..constants import CSVConstants, FileExtensions
from ..exceptions import DataLoadError, InvalidDataError
from ..models import (
    BabyProfile,
    DiaperEvent,
    FeedEvent,
    MilestoneEvent,
    SleepEvent,
    parse_event,
)
from ..settings import Settings
from .validation import validate_feed_event, validate_sleep_event

logger = logging.getLogger(__name__)

AnyEvent = FeedEvent | SleepEvent | DiaperEvent | MilestoneEvent
ModelT = TypeVar("ModelT", bound=BaseModel)


class DataLoaderProtocol(Protocol):
    """Protocol for data loaders."""

    def load_events(self) -> list[AnyEvent]:
        """Load all events."""
        ...

    def load_babies(self) -> dict[str, BabyProfile]:
        """Load baby profiles keyed by id."""
        ...


def as_local_naive(moment: datetime) -> datetime:
    """Aware timestamps as naive local time; naive ones pass through unchanged."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def _with_local_times(model: ModelT) -> ModelT:
    """Copy of model with its aware datetime fields made naive local."""
    updates = {
        name: as_local_naive(value)
        for name, value in model
        if isinstance(value, datetime) and value.tzinfo is not None
    }
    return model.model_copy(update=updates) if updates else model


def parse_event_row(record: dict[str, Any], index: int) -> AnyEvent:
    """
    Build a typed event from one exported row.

    Timestamps carrying a UTC offset are converted to naive local time, the
    same convention as the CLI's reference time and the system clock.

    Raises:
        InvalidDataError: If the row does not describe a valid event
    """
    try:
        event = parse_event(record)
    except PydanticValidationError as e:
        raise InvalidDataError(f"Row {index} is not a valid event: {e}") from e
    return _with_local_times(event)


def _records_from_frame(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a frame to row dicts, dropping empty cells."""
    records = df.astype(object).where(df.notna(), None).to_dict(orient="records")
    return [
        {key: value for key, value in record.items() if value is not None}
        for record in records
    ]


class EventDataLoader:
    """
    Handles loading of event and profile data from files.

    Rows that cannot be parsed into an event are skipped with a warning;
    rows that parse but fail the caregiver sanity checks are kept and logged.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the data loader.

        Args:
            settings: Application settings containing data paths
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def load_events(self, events_file: Path | None = None) -> list[AnyEvent]:
        """
        Load events from a CSV or JSON export.

        Args:
            events_file: File to read; defaults to settings.events_file

        Returns:
            Parsed events in file order

        Raises:
            DataLoadError: If the file is missing or unreadable
        """
        path = events_file or self.settings.events_file
        if not path.exists():
            raise DataLoadError(f"Events file not found: {path}")

        try:
            self.logger.info(f"Loading events from {path}")
            records = self._read_records(path)
        except Exception as e:
            raise DataLoadError(f"Failed to load events: {e}") from e

        events: list[AnyEvent] = []
        for index, record in enumerate(records):
            try:
                event = parse_event_row(record, index)
            except InvalidDataError as e:
                self.logger.warning(f"Skipping invalid event row: {e}")
                continue
            self._log_problems(event, index)
            events.append(event)

        self.logger.info(f"Loaded {len(events)} of {len(records)} events")
        return events

    def load_babies(self, babies_file: Path | None = None) -> dict[str, BabyProfile]:
        """
        Load baby profiles from a JSON file holding one profile or a list.

        Args:
            babies_file: File to read; defaults to settings.babies_file

        Returns:
            Profiles keyed by id

        Raises:
            DataLoadError: If the file is missing or a profile is invalid
        """
        path = babies_file or self.settings.babies_file
        if not path.exists():
            raise DataLoadError(f"Babies file not found: {path}")

        try:
            with open(path, encoding=CSVConstants.DEFAULT_ENCODING) as f:
                raw = json.load(f)
            if isinstance(raw, dict):
                raw = [raw]
            babies = [
                _with_local_times(BabyProfile.model_validate(item)) for item in raw
            ]
        except Exception as e:
            raise DataLoadError(f"Failed to load baby profiles: {e}") from e

        self.logger.info(f"Loaded {len(babies)} baby profiles")
        return {baby.id: baby for baby in babies}

    def _read_records(self, path: Path) -> list[dict[str, Any]]:
        if path.suffix.lower() == FileExtensions.JSON:
            with open(path, encoding=CSVConstants.DEFAULT_ENCODING) as f:
                raw = json.load(f)
            return [
                {key: value for key, value in item.items() if value is not None}
                for item in raw
            ]

        df = pd.read_csv(
            path,
            sep=CSVConstants.DEFAULT_SEPARATOR,
            encoding=CSVConstants.DEFAULT_ENCODING,
            dtype=str,
        )
        return _records_from_frame(df)

    def _log_problems(self, event: AnyEvent, index: int) -> None:
        if isinstance(event, SleepEvent):
            problems = validate_sleep_event(event)
        elif isinstance(event, FeedEvent):
            problems = validate_feed_event(event)
        else:
            problems = []
        for problem in problems:
            self.logger.warning(f"Event row {index} ({event.type}): {problem}")
