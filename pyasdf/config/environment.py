"""Environment variable access."""

import os
from typing import Callable, Optional

# Anything that maps a variable name to its value, or None when unset.
EnvLookup = Callable[[str], Optional[str]]

DATA_DIR_VAR = "ASDF_DATA_DIR"
CONFIG_FILE_VAR = "ASDF_CONFIG_FILE"
CONCURRENCY_VAR = "ASDF_CONCURRENCY"
TOOL_VERSIONS_FILENAME_VAR = "ASDF_DEFAULT_TOOL_VERSIONS_FILENAME"


def os_environment(name: str) -> Optional[str]:
    """Look up a variable in the live process environment."""
    return os.environ.get(name)
