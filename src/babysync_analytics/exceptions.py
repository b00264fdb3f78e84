"""
Custom exceptions for the BabySync Analytics package.

The analytics engines are total and never raise; these exceptions belong to
the layers around them (configuration, loading, argument checking).
"""


class BabySyncAnalyticsError(Exception):
    """Base exception for all BabySync Analytics errors."""


class ConfigurationError(BabySyncAnalyticsError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(BabySyncAnalyticsError):
    """Raised when data validation fails."""


class InvalidDataError(ValidationError):
    """Raised when input data is invalid or missing required fields."""


class DateRangeError(ValidationError):
    """Raised when caller-supplied date range bounds are inconsistent."""


class DataLoadError(BabySyncAnalyticsError):
    """Raised when there is an error loading event or profile files."""
