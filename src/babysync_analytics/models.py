"""
Data models for the BabySync Analytics package.

This module defines the event variants consumed by the analytics engines, the
baby profile they are computed for, and the immutable result objects they
return. All models are Pydantic models; inputs and results are frozen.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated, Any, Literal, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .constants import TimeConstants, UnitConversions


# ============================================================================
# Enumerations
# ============================================================================


class EventType(str, Enum):
    """Kinds of events a caregiver can log."""

    FEED = "feed"
    SLEEP = "sleep"
    DIAPER = "diaper"
    MILESTONE = "milestone"


class SleepQuality(str, Enum):
    """Caregiver's rating of a finished sleep."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class FeedMethod(str, Enum):
    """How a feed was given."""

    BOTTLE = "bottle"
    BREAST = "breast"
    SOLIDS = "solids"
    MIXED = "mixed"


class VolumeUnit(str, Enum):
    """Units a feed volume can be recorded in."""

    OZ = "oz"
    ML = "ml"


class BreastSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class DiaperType(str, Enum):
    WET = "wet"
    DIRTY = "dirty"
    BOTH = "both"


class MilestoneCategory(str, Enum):
    PHYSICAL = "Physical"
    COGNITIVE = "Cognitive"
    SOCIAL = "Social & Emotional"
    LANGUAGE = "Language"
    OTHER = "Other"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class DateRangeSelector(str, Enum):
    """Symbolic report ranges resolved against a reference timestamp."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


class WakeWindowQuality(str, Enum):
    """Classification of a wake window against its age target."""

    SHORT = "short"
    OPTIMAL = "optimal"
    LONG = "long"
    TOO_LONG = "too_long"


# ============================================================================
# Baby Profile
# ============================================================================


class BabyProfile(BaseModel):
    """
    Profile of the infant the events belong to.

    Age is always computed against an explicit reference timestamp so that a
    single computation pass never sees two different "nows".
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Profile identifier shared by caregivers")
    name: str = Field("", description="Display name")
    date_of_birth: datetime = Field(..., description="Date and time of birth")
    gender: Gender | None = Field(None, description="Optional gender")

    def age_in_months(self, reference_time: datetime) -> int:
        """Whole calendar months elapsed between birth and reference_time."""
        dob = self.date_of_birth
        months = (reference_time.year - dob.year) * 12 + (
            reference_time.month - dob.month
        )
        if (reference_time.day, reference_time.time()) < (dob.day, dob.time()):
            months -= 1
        return months

    def age_in_days(self, reference_time: datetime) -> int:
        """Whole days elapsed between birth and reference_time."""
        return (reference_time - self.date_of_birth).days

    def age_in_weeks(self, reference_time: datetime) -> int:
        return self.age_in_days(reference_time) // TimeConstants.DAYS_PER_WEEK


# ============================================================================
# Events
# ============================================================================


class BabyEventProtocol(Protocol):
    """Capability shared by every event variant."""

    id: str | None
    baby_id: str
    type: str
    timestamp: datetime
    created_by: str
    notes: str | None


class SleepEvent(BaseModel):
    """A sleep interval; ``end_time`` is absent while the sleep is ongoing."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(None, description="Event identifier")
    baby_id: str = Field(..., description="Owning baby profile")
    type: Literal["sleep"] = "sleep"
    timestamp: datetime = Field(..., description="When the event was logged")
    created_by: str = Field("", description="Caregiver who logged the event")
    notes: str | None = Field(None, description="Free-form notes")

    start_time: datetime = Field(..., description="When the sleep started")
    end_time: datetime | None = Field(None, description="When the sleep ended")
    quality: SleepQuality | None = Field(None, description="Rating once ended")
    is_night_sleep: bool = Field(False, description="Night sleep rather than nap")
    nap_number: int | None = Field(None, description="Caregiver's nap label")

    @model_validator(mode="before")
    @classmethod
    def default_timestamp(cls, data: Any) -> Any:
        """Use the start time as the log timestamp when none is given."""
        if isinstance(data, dict) and data.get("timestamp") is None:
            data = {**data, "timestamp": data.get("start_time")}
        return data

    @property
    def is_ongoing(self) -> bool:
        return self.end_time is None

    @property
    def is_nap(self) -> bool:
        return not self.is_night_sleep

    @property
    def duration(self) -> float | None:
        """Duration in seconds, or None while ongoing."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def duration_minutes(self) -> int | None:
        if self.duration is None:
            return None
        return int(self.duration // TimeConstants.SECONDS_PER_MINUTE)

    @property
    def duration_hours(self) -> float | None:
        if self.duration is None:
            return None
        return self.duration / TimeConstants.SECONDS_PER_HOUR


class FeedEvent(BaseModel):
    """A single feed; which optional fields are present depends on the method."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(None, description="Event identifier")
    baby_id: str = Field(..., description="Owning baby profile")
    type: Literal["feed"] = "feed"
    timestamp: datetime = Field(..., description="When the feed happened")
    created_by: str = Field("", description="Caregiver who logged the event")
    notes: str | None = Field(None, description="Free-form notes")

    method: FeedMethod = Field(..., description="Feeding method")
    volume: float | None = Field(None, description="Volume given, in `unit`")
    unit: VolumeUnit = Field(VolumeUnit.OZ, description="Unit of `volume`")
    side: BreastSide | None = Field(None, description="Breast side used")
    duration_minutes: int | None = Field(None, description="Feed length in minutes")
    food_type: str | None = Field(None, description="Food given for solids")

    @property
    def has_volume(self) -> bool:
        return self.volume is not None

    def volume_in(self, unit: VolumeUnit) -> float | None:
        """Recorded volume converted to `unit`, or None if none was recorded."""
        if self.volume is None:
            return None
        if self.unit == unit:
            return self.volume
        if unit == VolumeUnit.ML:
            return self.volume * UnitConversions.ML_PER_OZ
        return self.volume / UnitConversions.ML_PER_OZ


class DiaperEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = Field(None, description="Event identifier")
    baby_id: str = Field(..., description="Owning baby profile")
    type: Literal["diaper"] = "diaper"
    timestamp: datetime = Field(..., description="When the change happened")
    created_by: str = Field("", description="Caregiver who logged the event")
    notes: str | None = Field(None, description="Free-form notes")

    diaper_type: DiaperType = Field(..., description="Wet, dirty or both")


class MilestoneEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = Field(None, description="Event identifier")
    baby_id: str = Field(..., description="Owning baby profile")
    type: Literal["milestone"] = "milestone"
    timestamp: datetime = Field(..., description="When the milestone was reached")
    created_by: str = Field("", description="Caregiver who logged the event")
    notes: str | None = Field(None, description="Free-form notes")

    title: str = Field(..., description="Short milestone title")
    description: str | None = Field(None, description="Longer description")
    category: MilestoneCategory = Field(MilestoneCategory.OTHER)


BabyEvent = Annotated[
    Union[FeedEvent, SleepEvent, DiaperEvent, MilestoneEvent],
    Field(discriminator="type"),
]

_event_adapter: TypeAdapter = TypeAdapter(BabyEvent)


def parse_event(data: dict[str, Any]) -> FeedEvent | SleepEvent | DiaperEvent | MilestoneEvent:
    """Build the event variant selected by the mapping's ``type`` key."""
    return _event_adapter.validate_python(data)


# ============================================================================
# Derived Value Objects
# ============================================================================


class TargetRange(BaseModel):
    """Inclusive numeric target range for an age bracket."""

    model_config = ConfigDict(frozen=True)

    lower: float = Field(..., description="Inclusive lower bound")
    upper: float = Field(..., description="Inclusive upper bound")

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


class DateInterval(BaseModel):
    """A resolved half-open report interval ``[start, end)``."""

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Inclusive start")
    end: datetime = Field(..., description="Exclusive end")
    selector: DateRangeSelector = Field(..., description="Selector it came from")
    day_count: int = Field(..., description="Nominal averaging denominator")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def days(self) -> list[datetime]:
        """Midnight of every calendar day overlapping the interval."""
        days: list[datetime] = []
        if self.is_empty:
            return days
        day = self.start.replace(hour=0, minute=0, second=0, microsecond=0)
        while day < self.end:
            days.append(day)
            day += timedelta(days=1)
        return days


class WakeWindow(BaseModel):
    """Awake time between the end of one sleep and the start of the next."""

    model_config = ConfigDict(frozen=True)

    start_time: datetime = Field(..., description="End of the previous sleep")
    end_time: datetime = Field(..., description="Start of the next sleep")
    duration_seconds: float = Field(..., description="Gap length in seconds")
    ordinal: int = Field(..., description="1-based index among retained windows")
    quality: WakeWindowQuality = Field(..., description="Classification vs target")

    @property
    def duration_minutes(self) -> int:
        return int(self.duration_seconds // TimeConstants.SECONDS_PER_MINUTE)


class DailySleep(BaseModel):
    """Sleep totals for a single calendar day (seconds)."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="Midnight of the day")
    total_sleep: float = Field(0.0, description="All completed sleep")
    nap_sleep: float = Field(0.0, description="Completed naps")
    night_sleep: float = Field(0.0, description="Completed night sleep")
    nap_count: int = Field(0, description="Completed naps started that day")

    @property
    def total_hours(self) -> float:
        return self.total_sleep / TimeConstants.SECONDS_PER_HOUR

    @property
    def nap_hours(self) -> float:
        return self.nap_sleep / TimeConstants.SECONDS_PER_HOUR

    @property
    def night_hours(self) -> float:
        return self.night_sleep / TimeConstants.SECONDS_PER_HOUR


class DailyFeeding(BaseModel):
    """Feeding totals for a single calendar day."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="Midnight of the day")
    count: int = Field(0, description="Feeds that day")
    total_volume: float = Field(0.0, description="Recorded volume that day")
    average_interval: float = Field(0.0, description="Mean gap between feeds (s)")


class DaySummary(BaseModel):
    """Counts and totals across all event kinds for one calendar day."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="Midnight of the day")
    total_feedings: int = Field(0)
    total_volume: float = Field(0.0)
    nap_count: int = Field(0)
    day_sleep_hours: float = Field(0.0)
    night_sleep_hours: float = Field(0.0)
    diaper_count: int = Field(0)
    milestones: int = Field(0)

    @property
    def total_sleep_hours(self) -> float:
        return self.day_sleep_hours + self.night_sleep_hours


# ============================================================================
# Analytics Results
# ============================================================================


class SleepAnalyticsResult(BaseModel):
    """Sleep statistics for one baby over one resolved date range."""

    model_config = ConfigDict(frozen=True)

    baby_id: str = Field(..., description="Profile the statistics describe")
    date_range: DateInterval = Field(..., description="Resolved report interval")
    total_sleep_hours: float = Field(0.0, description="Completed sleep, hours")
    average_daily_sleep: float = Field(0.0, description="Hours per nominal day")
    night_sleep_average: float = Field(0.0, description="Night hours per day")
    nap_average: float = Field(0.0, description="Nap hours per day")
    nap_count: int = Field(0, description="Completed naps in range")
    average_naps_per_day: float = Field(0.0, description="Naps per nominal day")
    longest_sleep: float = Field(0.0, description="Longest completed sleep (s)")
    shortest_sleep: float = Field(0.0, description="Shortest completed sleep (s)")
    average_wakeups: float | None = Field(
        None, description="Night wakeups per day; not available from sleep logs"
    )
    ongoing_sleep_count: int = Field(0, description="Ongoing sleeps in range")
    wake_windows: tuple[WakeWindow, ...] = Field(
        default=(), description="Wake windows over the full sleep history"
    )
    sleep_by_day: tuple[DailySleep, ...] = Field(
        default=(), description="Per-calendar-day breakdown"
    )


class FeedingAnalyticsResult(BaseModel):
    """Feeding statistics for one baby over one resolved date range."""

    model_config = ConfigDict(frozen=True)

    baby_id: str = Field(..., description="Profile the statistics describe")
    date_range: DateInterval = Field(..., description="Resolved report interval")
    volume_unit: VolumeUnit = Field(VolumeUnit.OZ, description="Unit of volumes")
    total_feedings: int = Field(0, description="Feeds in range")
    average_feedings_per_day: float = Field(0.0, description="Feeds per day")
    total_volume: float = Field(0.0, description="Sum of recorded volumes")
    average_daily_volume: float = Field(0.0, description="Volume per nominal day")
    average_volume_per_feed: float = Field(0.0, description="Volume per feed")
    recorded_volume_feedings: int = Field(0, description="Feeds with a volume")
    average_interval_between_feeds: float = Field(
        0.0, description="Mean gap between consecutive feeds (s)"
    )
    feedings_by_method: dict[FeedMethod, int] = Field(
        default_factory=dict, description="Feed counts per method"
    )
    feedings_by_day: tuple[DailyFeeding, ...] = Field(
        default=(), description="Per-calendar-day breakdown"
    )
