"""Configuration loading for envreload.

This module handles loading reload settings from a YAML file and
environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: ReloadSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import ReloadSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "ENVRELOAD_"

DEFAULT_CONFIG = """# envreload configuration
# Environment variables (ENVRELOAD_<KEY>) override values in this file

# Project directory whose hook cache is force-reloaded
# Set with: envreload config init --target /path/to/project
# target_directory: "/path/to/project"

# Hook layout, relative to target_directory
config_marker: ".envrc"
artifact_dir: ".direnv"
artifact_pattern: "*.rc"
manifest_name: "manifest"

# Hook executor: <executor_command> <target_directory> <executor_args>
executor_command: ["direnv", "exec"]
executor_args: ["true"]
force_env_var: "_nix_direnv_force_reload"
force_env_value: "1"

# When no profile artifacts are found: ignore, warn or error
empty_artifacts: "warn"

log_level: "warning"
# Also append logs to $ENVRELOAD_HOME/logs/envreload.log
log_to_file: false
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to envreload.yaml in config dir

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.name == "envreload.yaml"
    """
    return get_config_dir() / "envreload.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist.

    Example:
        >>> create_default_config()
        >>> assert get_config_path().exists()
    """
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def write_config(target_directory: Path, config_path: Path | None = None, force: bool = False) -> Path:
    """Write a config file that pins the target directory.

    Args:
        target_directory: Project directory to reload
        config_path: Destination (default: envreload.yaml in config dir)
        force: Overwrite an existing file

    Returns:
        Path of the written config file

    Raises:
        FileExistsError: If the file exists and force is False
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists() and not force:
        raise FileExistsError(f"Config file already exists: {config_path}")

    resolved = Path(target_directory).expanduser().resolve()
    data = yaml.safe_load(DEFAULT_CONFIG) or {}
    data["target_directory"] = str(resolved)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        "# envreload configuration\n" + yaml.safe_dump(data, sort_keys=False),
        encoding="utf-8",
    )
    logger.info(f"Wrote config for {resolved}: {config_path}")
    return config_path


def load_config(config_path: Path | None = None) -> ReloadSettings:
    """Load reload settings from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with ENVRELOAD_ (e.g., ENVRELOAD_TARGET_DIRECTORY).

    Args:
        config_path: Optional config file path (default: envreload.yaml in config dir)

    Returns:
        Validated reload settings

    Example:
        >>> settings = load_config()
        >>> assert isinstance(settings, ReloadSettings)
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")
    else:
        logger.warning(f"Config file not found: {config_path}")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping, got {type(yaml_settings).__name__}")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars,
    # so precedence is defaults < YAML < env vars. Env names match
    # case-insensitively, as in ReloadSettings.
    env_keys = {name.upper() for name in os.environ}
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"{ENV_PREFIX}{str(key).upper()}"
        if env_key not in env_keys:
            filtered_yaml[key] = value

    settings = ReloadSettings(**filtered_yaml)

    logger.debug(
        f"Reload configuration loaded: target_directory={settings.target_directory}, "
        f"executor={' '.join(settings.executor_command)}"
    )

    return settings
