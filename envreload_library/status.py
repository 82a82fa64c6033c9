"""Status service for querying hook cache freshness.

Provides read-only queries comparing profile artifact mtimes with the
config marker mtime, the same comparison the hook tool makes on shell entry.
"""

from __future__ import annotations

import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from .artifacts.resolver import ArtifactResolver
from .models.reload import EmptyArtifactPolicy
from .models.reload import ReloadTarget
from .models.status import ArtifactStatus
from .models.status import ReloadStatus
from .timestamps import mtime_ns

logger = logging.getLogger(__name__)


def _to_datetime(ns: int | None) -> datetime | None:
    if ns is None:
        return None
    return datetime.fromtimestamp(ns / 1_000_000_000, tz=UTC)


class ReloadStatusService:
    """Service for querying reload freshness (read-only)."""

    def __init__(self, target: ReloadTarget) -> None:
        """Initialize status service.

        Args:
            target: Resolved project layout
        """
        self.target = target
        # Status never fails on an empty set, it reports it
        self.resolver = ArtifactResolver(EmptyArtifactPolicy.IGNORE)

    def get_status(self) -> ReloadStatus:
        """Get freshness of the target's hook cache.

        Returns:
            missing if the directory, marker or all artifacts are absent,
            stale if any artifact is older than the marker, fresh otherwise
        """
        target = self.target

        if not target.directory.is_dir():
            return ReloadStatus(
                directory=target.directory,
                status="missing",
                reason=f"Target directory not found: {target.directory}",
            )

        marker_ns = mtime_ns(target.config_marker)
        artifacts = self.resolver.resolve(target)
        artifact_statuses = [self._artifact_status(path, marker_ns) for path in artifacts]

        if marker_ns is None:
            status, reason = "missing", f"Config marker not found: {target.config_marker}"
        elif not artifact_statuses:
            status, reason = "missing", f"No profile artifacts in {target.artifact_dir}"
        elif any(a.status == "stale" for a in artifact_statuses):
            stale = sum(1 for a in artifact_statuses if a.status == "stale")
            status, reason = "stale", f"{stale} artifact(s) older than {target.config_marker.name}"
        else:
            status, reason = "fresh", None

        logger.debug(f"Status for {target.directory}: {status}")
        return ReloadStatus(
            directory=target.directory,
            status=status,
            marker_modified=_to_datetime(marker_ns),
            artifacts=artifact_statuses,
            reason=reason,
        )

    def is_fresh(self) -> bool:
        return self.get_status().status == "fresh"

    def _artifact_status(self, path: Path, marker_ns: int | None) -> ArtifactStatus:
        artifact_ns = mtime_ns(path)
        if artifact_ns is None:
            status = "missing"
        elif marker_ns is not None and artifact_ns < marker_ns:
            status = "stale"
        else:
            status = "fresh"
        return ArtifactStatus(path=path, modified=_to_datetime(artifact_ns), status=status)
