"""Version information for pyasdf."""

from importlib.metadata import PackageNotFoundError, version


def _get_version() -> str:
    """Read the installed distribution version."""
    try:
        return version("pyasdf")
    except PackageNotFoundError:
        # Running from a source checkout without an install
        return "0.0.0"


__version__ = _get_version()
