"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import DateRangeSelector, VolumeUnit


class Settings(BaseSettings):
    """
    Application settings for BabySync Analytics.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values from a YAML config file passed to load_settings()
    2. Environment variables (e.g., BABYSYNC_VOLUME_UNIT)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BABYSYNC_", env_file=".env", extra="ignore"
    )

    # --- File Paths ---
    data_dir: Path = Path("data")
    events_file: Path = Path("events.csv")
    babies_file: Path = Path("babies.json")
    output_dir: Path = Path("reports")

    # --- Reporting ---
    # Unit every recorded feed volume is normalised into before summing
    volume_unit: VolumeUnit = VolumeUnit.OZ

    # Divide total volume by feeds that recorded a volume instead of all feeds
    average_volume_over_recorded_feeds: bool = False

    default_range: DateRangeSelector = DateRangeSelector.WEEK


def _resolve_path(value: str, base_dir: Path) -> str:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        with open(config_file, encoding="utf-8") as f:
            yaml_settings = yaml.safe_load(f) or {}

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping of settings"
            )

        # Relative data_dir is taken relative to the config file
        data_dir = Path(
            _resolve_path(yaml_settings.get("data_dir", "."), config_file.parent)
        )
        yaml_settings["data_dir"] = str(data_dir)

        # Join relative input paths with data_dir
        for key in ("events_file", "babies_file"):
            if key in yaml_settings:
                yaml_settings[key] = _resolve_path(yaml_settings[key], data_dir)

        if "output_dir" in yaml_settings:
            yaml_settings["output_dir"] = _resolve_path(
                yaml_settings["output_dir"], config_file.parent
            )

        return Settings(**yaml_settings)

    return Settings()
