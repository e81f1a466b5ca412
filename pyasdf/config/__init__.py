"""Configuration system for pyasdf."""

from pyasdf.config.errors import (
    AsdfConfigError,
    ConfigFileError,
    HomeDirectoryUnavailable,
)
from pyasdf.config.loader import load_settings
from pyasdf.config.runtime import Config, load_config
from pyasdf.config.settings import DurationOrNever, Settings

__all__ = [
    "AsdfConfigError",
    "Config",
    "ConfigFileError",
    "DurationOrNever",
    "HomeDirectoryUnavailable",
    "Settings",
    "load_config",
    "load_settings",
]
