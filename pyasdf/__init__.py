"""
pyasdf - Runtime configuration for the asdf version manager.

Resolves asdf's directories and reads the asdfrc settings file.
"""

from pyasdf.__version__ import __version__
from pyasdf.config import Config, Settings, load_config, load_settings

__all__ = [
    "__version__",
    "Config",
    "Settings",
    "load_config",
    "load_settings",
]
