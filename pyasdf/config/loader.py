"""Loader for the line-oriented asdfrc settings file."""

from collections.abc import Iterable
from typing import Any, Optional

import structlog

from pyasdf.config.environment import CONCURRENCY_VAR, EnvLookup, os_environment
from pyasdf.config.errors import ConfigFileError
from pyasdf.config.settings import (
    DurationOrNever,
    Settings,
    default_concurrency,
)

logger = structlog.get_logger()

BOOLEAN_KEYS = {
    "legacy_version_file",
    "always_keep_download",
    "disable_plugin_short_name_repository",
}
CONCURRENCY_KEY = "concurrency"
CHECK_DURATION_KEY = "plugin_repository_last_check_duration"
SETTING_KEYS = BOOLEAN_KEYS | {CONCURRENCY_KEY, CHECK_DURATION_KEY}

COMMENT_PREFIXES = ("#", ";")


def load_settings(path: str, env: EnvLookup = os_environment) -> Settings:
    """Load settings from an asdfrc file.

    Args:
        path: Path of the settings file
        env: Environment lookup used for overrides

    Returns:
        Parsed settings with ``loaded`` set

    Raises:
        ConfigFileError: If the file cannot be opened. The error carries the
            defaulted settings in ``settings``.
    """
    try:
        # Undecodable bytes become U+FFFD
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            values = parse_lines(f)
    except OSError as e:
        defaults = apply_env_overrides(Settings(loaded=False), env)
        raise ConfigFileError(path, defaults, e.strerror or str(e)) from e

    logger.debug("settings_loaded", path=path, hooks=len(values["hooks"]))
    return apply_env_overrides(Settings(loaded=True, **values), env)


def parse_lines(lines: Iterable[str]) -> dict[str, Any]:
    """Parse ``key = value`` lines into Settings field values.

    Unknown keys become hooks. Lines without a key are skipped.

    Args:
        lines: Iterable of text lines

    Returns:
        Keyword arguments for Settings
    """
    values: dict[str, Any] = {}
    hooks: dict[str, str] = {}

    for raw in lines:
        pair = _split_line(raw)
        if pair is None:
            continue
        key, value = pair

        if key in BOOLEAN_KEYS:
            values[key] = value == "yes"
        elif key == CONCURRENCY_KEY:
            values[key] = value
        elif key == CHECK_DURATION_KEY:
            values[key] = parse_check_duration(value)
        else:
            hooks[key] = value

    values["hooks"] = hooks
    return values


def _split_line(raw: str) -> Optional[tuple[str, str]]:
    line = raw.strip()
    if not line or line.startswith(COMMENT_PREFIXES) or line.startswith("["):
        return None

    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def parse_check_duration(value: str) -> DurationOrNever:
    """Parse a plugin repository check interval.

    Args:
        value: ``never`` or a positive number of minutes

    Returns:
        Parsed interval, or the default one if the value is not usable
    """
    if value == "never":
        return DurationOrNever(never=True, every=0)

    if not (value.isascii() and value.isdigit()):
        return DurationOrNever()

    minutes = int(value)
    if minutes == 0:
        return DurationOrNever()
    return DurationOrNever(every=minutes)


def apply_env_overrides(settings: Settings, env: EnvLookup) -> Settings:
    """Apply environment overrides on top of file values and defaults."""
    concurrency = env(CONCURRENCY_VAR)
    if concurrency is None:
        return settings

    if concurrency == "auto":
        return settings.model_copy(update={"concurrency": default_concurrency()})
    if concurrency.isascii() and concurrency.isdigit():
        return settings.model_copy(update={"concurrency": concurrency})

    logger.warning(
        "invalid_concurrency_override", variable=CONCURRENCY_VAR, value=concurrency
    )
    return settings
