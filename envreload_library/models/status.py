"""Freshness status models."""

from datetime import datetime
from pathlib import Path
from typing import Literal

from pydantic import Field

from envreload_library.models.base import CamelCaseModel

Freshness = Literal["fresh", "stale", "missing"]


class ArtifactStatus(CamelCaseModel):
    """Freshness of one profile artifact relative to the config marker."""

    path: Path = Field(..., description="Artifact path")
    modified: datetime | None = Field(None, description="Artifact mtime, None if missing")
    status: Freshness = Field(
        ...,
        description="fresh=not older than marker, stale=older than marker, missing=not on disk",
    )


class ReloadStatus(CamelCaseModel):
    """Freshness of a hook-managed project."""

    directory: Path = Field(..., description="Project root")
    status: Freshness = Field(..., description="Overall status")
    marker_modified: datetime | None = Field(None, description="Config marker mtime, None if missing")
    artifacts: list[ArtifactStatus] = Field(default_factory=list, description="Per-artifact status")
    reason: str | None = Field(None, description="Why the project is not fresh")
