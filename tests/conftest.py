"""
Shared pytest fixtures for BabySync Analytics tests.

This module provides reusable fixtures for:
- Reference times and baby profiles
- Sleep and feed event factories
- Settings configurations
- Exported event files
"""

import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import yaml

from babysync_analytics.models import (
    BabyProfile,
    DiaperEvent,
    DiaperType,
    FeedEvent,
    FeedMethod,
    MilestoneEvent,
    SleepEvent,
)
from babysync_analytics.settings import Settings

# ============================================================================
# Time & Profile Fixtures
# ============================================================================


@pytest.fixture
def reference_time() -> datetime:
    """Wednesday 2024-05-15 18:00, the reference instant for most tests."""
    return datetime(2024, 5, 15, 18, 0)


@pytest.fixture
def make_baby():
    """Build a baby profile aged a whole number of months at reference_time."""

    def _make(age_months: int, reference: datetime = datetime(2024, 5, 15, 18, 0)):
        year = reference.year
        month = reference.month - age_months
        while month < 1:
            month += 12
            year -= 1
        return BabyProfile(
            id="baby-1",
            name="Robin",
            date_of_birth=datetime(year, month, 1, 0, 0),
        )

    return _make


@pytest.fixture
def baby_4_months(make_baby) -> BabyProfile:
    return make_baby(4)


# ============================================================================
# Event Factories
# ============================================================================


@pytest.fixture
def make_sleep():
    """Build a sleep event from a start time and an optional length in minutes."""

    def _make(
        start: datetime,
        minutes: float | None = None,
        night: bool = False,
        baby_id: str = "baby-1",
    ) -> SleepEvent:
        end = start + timedelta(minutes=minutes) if minutes is not None else None
        return SleepEvent(
            baby_id=baby_id,
            start_time=start,
            end_time=end,
            is_night_sleep=night,
        )

    return _make


@pytest.fixture
def make_feed():
    """Build a feed event."""

    def _make(
        timestamp: datetime,
        method: FeedMethod = FeedMethod.BOTTLE,
        volume: float | None = None,
        **kwargs,
    ) -> FeedEvent:
        return FeedEvent(
            baby_id=kwargs.pop("baby_id", "baby-1"),
            timestamp=timestamp,
            method=method,
            volume=volume,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_day_events(make_sleep, make_feed) -> list:
    """A realistic Wednesday: night sleep, two naps, feeds, diapers, a milestone."""
    day = datetime(2024, 5, 15)
    return [
        make_sleep(day - timedelta(hours=4), minutes=10 * 60, night=True),
        make_sleep(day + timedelta(hours=9), minutes=90),
        make_sleep(day + timedelta(hours=13), minutes=60),
        make_sleep(day + timedelta(hours=19)),  # ongoing
        make_feed(day + timedelta(hours=7), volume=4.0),
        make_feed(day + timedelta(hours=11), volume=5.0),
        make_feed(day + timedelta(hours=15), FeedMethod.SOLIDS, food_type="pear"),
        DiaperEvent(
            baby_id="baby-1",
            timestamp=day + timedelta(hours=8),
            diaper_type=DiaperType.WET,
        ),
        DiaperEvent(
            baby_id="baby-1",
            timestamp=day + timedelta(hours=12),
            diaper_type=DiaperType.BOTH,
        ),
        MilestoneEvent(
            baby_id="baby-1",
            timestamp=day + timedelta(hours=16),
            title="Rolled over",
        ),
    ]


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample data."""
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(
            {
                "data_dir": "data",
                "events_file": "events.csv",
                "babies_file": "babies.json",
                "output_dir": "reports",
                "volume_unit": "ml",
            },
            f,
        )
    return config_path


# ============================================================================
# Exported Data Fixtures
# ============================================================================


@pytest.fixture
def events_csv(tmp_path: Path) -> Path:
    """Write a small semicolon-separated event export."""
    path = tmp_path / "events.csv"
    lines = [
        "type;id;baby_id;timestamp;start_time;end_time;is_night_sleep;"
        "method;volume;unit;diaper_type;title",
        "sleep;s1;baby-1;;2024-05-15T09:00:00;2024-05-15T10:30:00;False;;;;;",
        "sleep;s2;baby-1;;2024-05-15T12:30:00;2024-05-15T13:30:00;False;;;;;",
        "sleep;s3;baby-1;;2024-05-15T19:00:00;;True;;;;;",
        "feed;f1;baby-1;2024-05-15T07:00:00;;;;bottle;4;oz;;",
        "feed;f2;baby-1;2024-05-15T10:00:00;;;;bottle;6;oz;;",
        "feed;f3;baby-2;2024-05-15T10:00:00;;;;bottle;3;oz;;",
        "diaper;d1;baby-1;2024-05-15T08:00:00;;;;;;;wet;",
        "milestone;m1;baby-1;2024-05-15T16:00:00;;;;;;;;First smile",
        "feed;bad;baby-1;2024-05-15T11:00:00;;;;teleport;;;;",
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def babies_json(tmp_path: Path) -> Path:
    path = tmp_path / "babies.json"
    path.write_text(
        json.dumps(
            [
                {"id": "baby-1", "name": "Robin", "date_of_birth": "2024-01-01T00:00:00"},
                {"id": "baby-2", "name": "Sam", "date_of_birth": "2023-06-01T00:00:00"},
            ]
        ),
        encoding="utf-8",
    )
    return path
