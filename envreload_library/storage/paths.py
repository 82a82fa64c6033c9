"""Path resolution for envreload storage locations.

This module provides path resolution based on the ENVRELOAD_HOME environment
variable, with config and log directories inside that root.

Contract:
- Inputs: Environment variables (ENVRELOAD_HOME, ENVRELOAD_CONFIG_DIR, ENVRELOAD_LOG_DIR)
- Outputs: Resolved Path objects
- Side Effects: Creates directories if they don't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get ENVRELOAD_HOME from environment.

    Returns:
        Path to root directory (default: ~/.envreload)
    """
    root = os.environ.get("ENVRELOAD_HOME", "~/.envreload")
    return Path(root).expanduser().resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($ENVRELOAD_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("ENVRELOAD_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).expanduser().resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_log_dir() -> Path:
    """Get log directory.

    Returns:
        Path to log directory ($ENVRELOAD_HOME/logs)

    Environment Variables:
        ENVRELOAD_LOG_DIR: Override log directory location
        (falls back to $ENVRELOAD_HOME/logs if not set)

    Example:
        >>> log_dir = get_log_dir()
        >>> assert log_dir.name == "logs" or "ENVRELOAD_LOG_DIR" in os.environ
    """
    log_dir: Path = get_home_dir() / "logs"

    env_override: str | None = os.environ.get("ENVRELOAD_LOG_DIR")
    if env_override is not None:
        log_dir = Path(env_override).expanduser().resolve()

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
