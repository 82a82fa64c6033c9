"""Configuration module for envreload_library.

Provides reload settings loading from YAML and environment variables.

Public Interface:
    - ReloadSettings: Settings model
    - load_config: Load configuration
    - create_default_config: Create default config file
    - write_config: Write a config file pinning the target directory
    - get_config_path: Get config file path
"""

from .loader import create_default_config
from .loader import get_config_path
from .loader import load_config
from .loader import write_config
from .settings import ReloadSettings

__all__ = [
    "ReloadSettings",
    "load_config",
    "create_default_config",
    "write_config",
    "get_config_path",
]
