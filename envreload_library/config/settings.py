"""Settings model for envreload.

This module defines the configuration for a forced reload: which project
directory is reloaded, where the hook tool keeps its config marker and
profile artifacts, and how the hook executor is invoked.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from ..models.reload import EmptyArtifactPolicy
from ..models.reload import ReloadTarget


class ReloadSettings(BaseSettings):
    """Configuration for the reload coordinator.

    The target directory is configuration, not a call-time argument: it is
    written once (``envreload config init``) and read on every reload.

    Attributes:
        target_directory: Project root to reload (default: unset)
        config_marker: Hook config file, relative to the target (default: .envrc)
        artifact_dir: Hook cache directory, relative to the target (default: .direnv)
        artifact_pattern: Glob for profile artifacts in artifact_dir (default: *.rc)
        manifest_name: Artifact manifest file name in artifact_dir (default: manifest)
        executor_command: Hook executor prefix, target is appended (default: direnv exec)
        executor_args: Arguments after the target (default: true)
        force_env_var: Environment flag requesting a forced rebuild
        force_env_value: Value of the forced rebuild flag
        empty_artifacts: What to do when no artifacts are found (default: warn)
        log_level: Logging level (default: warning)
        log_to_file: Also append logs to envreload.log in the log dir (default: False)

    Example:
        >>> settings = ReloadSettings(target_directory="/proj")
        >>> assert settings.config_marker == ".envrc"
        >>> assert settings.executor_command == ["direnv", "exec"]
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVRELOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    target_directory: str | None = None

    config_marker: str = ".envrc"
    artifact_dir: str = ".direnv"
    artifact_pattern: str = "*.rc"
    manifest_name: str = "manifest"

    executor_command: list[str] = ["direnv", "exec"]
    executor_args: list[str] = ["true"]
    force_env_var: str = "_nix_direnv_force_reload"
    force_env_value: str = "1"

    empty_artifacts: EmptyArtifactPolicy = EmptyArtifactPolicy.WARN
    log_level: str = "warning"
    log_to_file: bool = False

    @field_validator("target_directory")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path.

        The directory does not have to exist; a moved project is reported
        by the coordinator, not rejected here.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string, or None when unset
        """
        if v is None or not v.strip():
            return None
        return str(Path(v).expanduser().resolve())

    @field_validator("executor_command")
    @classmethod
    def require_executor(cls, v: list[str]) -> list[str]:
        """Reject an empty executor command."""
        if not v:
            raise ValueError("executor_command must name at least the executable")
        return v

    def resolve_target(self) -> ReloadTarget:
        """Resolve the configured paths into a ReloadTarget.

        Returns:
            ReloadTarget with absolute paths

        Raises:
            ValueError: If no target directory is configured
        """
        if self.target_directory is None:
            raise ValueError("No target directory configured")

        directory = Path(self.target_directory)
        artifact_dir = directory / self.artifact_dir
        return ReloadTarget(
            directory=directory,
            config_marker=directory / self.config_marker,
            artifact_dir=artifact_dir,
            artifact_pattern=self.artifact_pattern,
            manifest=artifact_dir / self.manifest_name,
        )
