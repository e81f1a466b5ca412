"""Runtime configuration: resolved paths and settings accessors."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pyasdf.config.environment import (
    CONFIG_FILE_VAR,
    DATA_DIR_VAR,
    TOOL_VERSIONS_FILENAME_VAR,
    EnvLookup,
    os_environment,
)
from pyasdf.config.errors import ConfigFileError, HomeDirectoryUnavailable
from pyasdf.config.loader import load_settings
from pyasdf.config.settings import DurationOrNever, Settings

logger = structlog.get_logger()

DEFAULT_DATA_DIR = ".asdf"
DEFAULT_CONFIG_FILE = ".asdfrc"
DEFAULT_TOOL_VERSIONS_FILENAME = ".tool-versions"


@dataclass(frozen=True)
class Config:
    """Paths resolved for one CLI invocation.

    Settings are not stored here: every accessor re-reads ``config_file`` so
    edits to the file and the environment are always picked up.
    """

    home: str = ""
    data_dir: str = ""
    config_file: str = ""
    default_tool_versions_filename: str = DEFAULT_TOOL_VERSIONS_FILENAME
    env: EnvLookup = field(default=os_environment, repr=False, compare=False)

    def settings(self) -> Settings:
        """Load the current settings, falling back to defaults.

        Returns:
            Settings from ``config_file``, or defaults if it does not exist

        Raises:
            ConfigFileError: If the file exists but cannot be read
        """
        return load_settings_or_defaults(self.config_file, self.env)

    def legacy_version_file(self) -> bool:
        return self.settings().legacy_version_file

    def always_keep_download(self) -> bool:
        return self.settings().always_keep_download

    def plugin_repository_last_check_duration(self) -> DurationOrNever:
        return self.settings().plugin_repository_last_check_duration

    def disable_plugin_short_name_repository(self) -> bool:
        return self.settings().disable_plugin_short_name_repository

    def concurrency(self) -> str:
        return self.settings().concurrency

    def get_hook(self, name: str) -> str:
        """Get the command configured for a hook.

        Args:
            name: Hook name, e.g. ``pre_asdf_plugin_add``

        Returns:
            The command string, or an empty string if the hook is not set
        """
        return self.settings().hooks.get(name, "")


def load_settings_or_defaults(path: str, env: EnvLookup = os_environment) -> Settings:
    """Load settings, treating a missing file as an empty one."""
    try:
        return load_settings(path, env)
    except ConfigFileError as e:
        if path and not isinstance(e.__cause__, FileNotFoundError):
            raise
        logger.debug("settings_file_missing", path=path)
        return e.settings


def load_config(env: EnvLookup = os_environment) -> Config:
    """Resolve asdf paths from the environment.

    Args:
        env: Environment lookup, ``os.environ`` by default

    Returns:
        Config with home, data directory and settings file resolved

    Raises:
        HomeDirectoryUnavailable: If no home directory can be found
    """
    home = home_directory(env)

    data_dir = env(DATA_DIR_VAR)
    if data_dir:
        data_dir = expand_tilde(data_dir, home)
    else:
        data_dir = os.path.join(home, DEFAULT_DATA_DIR)

    config_file = env(CONFIG_FILE_VAR) or os.path.join(home, DEFAULT_CONFIG_FILE)
    tool_versions = env(TOOL_VERSIONS_FILENAME_VAR) or DEFAULT_TOOL_VERSIONS_FILENAME

    return Config(
        home=home,
        data_dir=data_dir,
        config_file=config_file,
        default_tool_versions_filename=tool_versions,
        env=env,
    )


def home_directory(env: EnvLookup = os_environment) -> str:
    """Get the user's home directory.

    ``HOME`` wins; otherwise the user database is consulted.
    """
    home = env("HOME")
    if home:
        return home

    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnavailable(
            "Unable to determine the user's home directory"
        ) from e


def expand_tilde(path: str, home: str) -> str:
    """Replace a leading ``~`` with the home directory."""
    if path.startswith("~"):
        return home + path[1:]
    return path
