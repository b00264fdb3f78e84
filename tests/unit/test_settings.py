"""Unit tests for Settings module."""

from pathlib import Path

import pytest
import yaml

from babysync_analytics.exceptions import ConfigurationError
from babysync_analytics.models import DateRangeSelector, VolumeUnit
from babysync_analytics.settings import Settings, load_settings


class TestSettingsBasicLoading:
    """Test basic settings loading from different sources."""

    def test_load_from_env_vars(self, monkeypatch):
        """Test that settings are correctly loaded from environment variables."""
        monkeypatch.setenv("BABYSYNC_VOLUME_UNIT", "ml")
        monkeypatch.setenv("BABYSYNC_DEFAULT_RANGE", "month")
        monkeypatch.setenv("BABYSYNC_AVERAGE_VOLUME_OVER_RECORDED_FEEDS", "true")

        settings = load_settings()

        assert settings.volume_unit == VolumeUnit.ML
        assert settings.default_range == DateRangeSelector.MONTH
        assert settings.average_volume_over_recorded_feeds is True

    def test_load_from_yaml(self, temp_config_file: Path):
        """Test that settings are correctly loaded from a YAML file."""
        config_data = {
            "volume_unit": "ml",
            "default_range": "today",
            "data_dir": "test_data",
        }
        with open(temp_config_file, "w") as f:
            yaml.dump(config_data, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.volume_unit == VolumeUnit.ML
        assert settings.default_range == DateRangeSelector.TODAY

    def test_yaml_overrides_env_vars(self, monkeypatch, temp_config_file: Path):
        """Test that YAML settings override environment variables."""
        monkeypatch.setenv("BABYSYNC_VOLUME_UNIT", "ml")

        with open(temp_config_file, "w") as f:
            yaml.dump({"volume_unit": "oz"}, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.volume_unit == VolumeUnit.OZ

    def test_default_values(self):
        """Test that settings use default values when no config is provided."""
        settings = Settings()

        assert settings.volume_unit == VolumeUnit.OZ
        assert settings.average_volume_over_recorded_feeds is False
        assert settings.default_range == DateRangeSelector.WEEK
        assert settings.data_dir == Path("data")


class TestSettingsPathResolution:
    """Test path resolution and handling."""

    def test_relative_paths_resolved(self, sample_config_file: Path):
        """Test that input files are joined with data_dir next to the config."""
        settings = load_settings(config_file=sample_config_file)
        base = sample_config_file.parent

        assert settings.data_dir == base / "data"
        assert settings.events_file == base / "data" / "events.csv"
        assert settings.babies_file == base / "data" / "babies.json"
        assert settings.output_dir == base / "reports"
        assert settings.volume_unit == VolumeUnit.ML

    def test_absolute_paths_preserved(self, temp_config_file: Path, tmp_path: Path):
        """Test that absolute paths are preserved."""
        abs_data_dir = tmp_path / "absolute_data"
        abs_data_dir.mkdir()

        config_data = {
            "data_dir": str(abs_data_dir),
            "events_file": str(tmp_path / "elsewhere.csv"),
        }
        with open(temp_config_file, "w") as f:
            yaml.dump(config_data, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.data_dir == abs_data_dir
        assert settings.events_file == tmp_path / "elsewhere.csv"


class TestSettingsValidation:
    """Test settings validation and constraints."""

    def test_invalid_volume_unit_rejected(self):
        """Test that an unknown unit is a validation error."""
        with pytest.raises(ValueError):
            Settings(volume_unit="cups")

    def test_invalid_range_rejected(self):
        with pytest.raises(ValueError):
            Settings(default_range="fortnight")


class TestSettingsEdgeCases:
    """Test edge cases and error handling."""

    def test_missing_config_file_raises_error(self):
        """Test that missing config file raises appropriate error."""
        with pytest.raises(FileNotFoundError):
            load_settings(config_file=Path("nonexistent.yaml"))

    def test_invalid_yaml_raises_error(self, temp_config_file: Path):
        """Test that invalid YAML content raises error."""
        with open(temp_config_file, "w") as f:
            f.write("invalid: yaml: content: [")

        with pytest.raises(yaml.YAMLError):
            load_settings(config_file=temp_config_file)

    def test_non_mapping_config_raises_error(self, temp_config_file: Path):
        """Test that a YAML list instead of a mapping is rejected."""
        with open(temp_config_file, "w") as f:
            f.write("- volume_unit\n- ml\n")

        with pytest.raises(ConfigurationError):
            load_settings(config_file=temp_config_file)

    def test_empty_config_file_uses_defaults(self, temp_config_file: Path):
        """Test that empty config file falls back to defaults."""
        with open(temp_config_file, "w") as f:
            f.write("")

        settings = load_settings(config_file=temp_config_file)

        assert settings.volume_unit == VolumeUnit.OZ
        assert settings.default_range == DateRangeSelector.WEEK
