"""Reload models.

Contract:
- Inputs: Resolved paths and timestamps
- Outputs: Validated model instances
- Side Effects: None (pure data structures)
"""

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import Field

from envreload_library.models.base import CamelCaseModel


class ErrorKind(str, Enum):
    """Why a forced reload failed.

    - MISSING_DIRECTORY: Target directory absent or moved; nothing was touched
    - REBUILD_FAILED: Hook executor exited non-zero; no timestamps were updated
    - NO_ARTIFACTS: No profile artifacts found under the ``error`` policy;
      the config marker was already re-stamped
    """

    MISSING_DIRECTORY = "missing_directory"
    REBUILD_FAILED = "rebuild_failed"
    NO_ARTIFACTS = "no_artifacts"


class EmptyArtifactPolicy(str, Enum):
    """Handling of an empty profile artifact set."""

    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"


class ReloadTarget(CamelCaseModel):
    """Resolved filesystem layout of one hook-managed project."""

    directory: Path = Field(description="Project root (must exist)")
    config_marker: Path = Field(description="Hook config file whose mtime signals staleness")
    artifact_dir: Path = Field(description="Directory holding generated profile artifacts")
    artifact_pattern: str = Field(default="*.rc", description="Glob for artifacts when no manifest exists")
    manifest: Path = Field(description="Hook manifest listing artifact paths, one per line")


class ReloadResult(CamelCaseModel):
    """Outcome of a successful forced reload."""

    directory: Path = Field(description="Project root that was reloaded")
    config_marker: Path = Field(description="Re-stamped config marker")
    marker_mtime_ns: int = Field(description="New config marker mtime in nanoseconds")
    artifacts: list[Path] = Field(default_factory=list, description="Artifacts re-stamped to the marker mtime")
    started_at: datetime = Field(description="When the reload started")
    finished_at: datetime = Field(description="When the reload finished")

    @property
    def duration_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()
