"""Settings parsed from the asdfrc file."""

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHECK_DURATION_MINUTES = 60


def processing_units() -> int:
    """Get the number of processing units available to this process."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0))
    return os.cpu_count() or 1


def default_concurrency() -> str:
    """Get the default concurrency level as a string."""
    return str(processing_units())


class DurationOrNever(BaseModel):
    """Either "never recheck" or "recheck every N minutes"."""

    model_config = ConfigDict(frozen=True)

    never: bool = False
    every: int = Field(
        default=DEFAULT_CHECK_DURATION_MINUTES, description="Interval in minutes"
    )


class Settings(BaseModel):
    """Typed view of an asdfrc file.

    ``loaded`` tells an empty file (True) apart from a missing one (False).
    """

    model_config = ConfigDict(frozen=True)

    loaded: bool = False
    legacy_version_file: bool = False
    always_keep_download: bool = False
    disable_plugin_short_name_repository: bool = False
    concurrency: str = Field(default_factory=default_concurrency)
    plugin_repository_last_check_duration: DurationOrNever = Field(
        default_factory=DurationOrNever
    )
    hooks: dict[str, str] = Field(default_factory=dict)
