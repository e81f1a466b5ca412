"""Errors raised while resolving asdf configuration."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyasdf.config.settings import Settings


class AsdfConfigError(Exception):
    """Base class for configuration errors."""


class HomeDirectoryUnavailable(AsdfConfigError):
    """The user's home directory could not be determined."""


class ConfigFileError(AsdfConfigError):
    """The settings file could not be opened.

    The all-defaults settings are attached so callers that only care about
    "loaded or defaulted" can keep going without re-deriving them.
    """

    def __init__(self, path: str, settings: "Settings", reason: str):
        self.path = path
        self.settings = settings
        super().__init__(f"Unable to open settings file {path!r}: {reason}")
