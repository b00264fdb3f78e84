"""
Constants used throughout the BabySync Analytics package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600
    DAYS_PER_WEEK: Final[int] = 7

    # Weeks start on Monday (datetime.weekday() == 0)
    WEEK_START_WEEKDAY: Final[int] = 0


# === Nominal Day Counts ===
class NominalDayCounts:
    """Averaging denominators for the fixed range selectors."""

    TODAY: Final[int] = 1
    WEEK: Final[int] = 7
    MONTH: Final[int] = 30  # Not the literal month length


# === Wake Windows ===
class WakeWindowConstants:
    """Guards and margins used when deriving wake windows."""

    # Gaps at or beyond this are treated as missing data, not a wake window
    MAX_GAP_SECONDS: Final[int] = 12 * TimeConstants.SECONDS_PER_HOUR

    # Minutes above the target upper bound still classified as "long"
    LONG_BUFFER_MINUTES: Final[int] = 30


# === Event Validation ===
class ValidationThresholds:
    """Thresholds for sanity-checking logged events."""

    MAX_SLEEP_MINUTES: Final[int] = 720
    MAX_BOTTLE_VOLUME_OZ: Final[float] = 12.0
    MAX_BREASTFEED_MINUTES: Final[int] = 60


# === Units ===
class UnitConversions:
    """Volume unit conversion factors."""

    ML_PER_OZ: Final[float] = 29.5735


# === CSV Parsing ===
class CSVConstants:
    """Constants for CSV file parsing."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"


# === File Extensions ===
class FileExtensions:
    """Common file extensions."""

    JSON: Final[str] = ".json"
