"""Tests for settings models."""

import pytest
from pydantic import ValidationError

from pyasdf.config.settings import (
    DurationOrNever,
    Settings,
    default_concurrency,
    processing_units,
)


class TestDurationOrNever:
    """Tests for the plugin repository check interval."""

    def test_default_values(self) -> None:
        """Test the default interval is sixty minutes."""
        duration = DurationOrNever()

        assert duration.never is False
        assert duration.every == 60

    def test_is_immutable(self) -> None:
        """Test that durations cannot be changed after creation."""
        duration = DurationOrNever()

        with pytest.raises(ValidationError):
            duration.every = 5


class TestSettings:
    """Tests for the Settings model."""

    def test_default_values(self) -> None:
        """Test default settings."""
        settings = Settings()

        assert settings.loaded is False
        assert settings.legacy_version_file is False
        assert settings.always_keep_download is False
        assert settings.disable_plugin_short_name_repository is False
        assert settings.concurrency == default_concurrency()
        assert settings.plugin_repository_last_check_duration == DurationOrNever()
        assert settings.hooks == {}

    def test_default_concurrency_is_processing_units(self) -> None:
        """Test default concurrency is the processing unit count as text."""
        assert processing_units() >= 1
        assert default_concurrency() == str(processing_units())

    def test_is_immutable(self) -> None:
        """Test that settings cannot be changed after creation."""
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.concurrency = "3"
