"""Forced reload coordination.

Contract:
- Inputs: ReloadTarget, hook executor, artifact resolver
- Outputs: ReloadResult, or a ReloadError
- Side Effects: Runs the hook executor, updates marker and artifact mtimes
"""

import logging
from datetime import UTC
from datetime import datetime

from .artifacts.resolver import ArtifactResolver
from .config.settings import ReloadSettings
from .errors import MissingDirectoryError
from .execution.executor import HookExecutor
from .execution.executor import RebuildExecutor
from .models.reload import ReloadResult
from .models.reload import ReloadTarget
from .timestamps import copy_times
from .timestamps import touch

logger = logging.getLogger(__name__)


class ReloadCoordinator:
    """Forces a hook cache rebuild and records it via timestamps.

    Sequence:
    1. Check the target directory exists (nothing is touched if not)
    2. Run the hook executor with the forced-reload flag
    3. Touch the config marker
    4. Copy the marker's mtime onto every profile artifact

    A failing step aborts the rest; earlier timestamp updates are kept.
    Afterwards the hook tool sees artifacts no older than its marker and
    skips the rebuild on the next shell entry.

    Example:
        >>> settings = load_config()
        >>> coordinator = ReloadCoordinator.from_settings(settings)
        >>> result = coordinator.force_reload()
    """

    def __init__(
        self,
        target: ReloadTarget,
        executor: RebuildExecutor,
        resolver: ArtifactResolver | None = None,
    ) -> None:
        """Initialize reload coordinator.

        Args:
            target: Resolved project layout (fixed for the coordinator's lifetime)
            executor: Hook executor used for the forced rebuild
            resolver: Artifact resolver (default: warn on empty set)
        """
        self._target = target
        self.executor = executor
        self.resolver = resolver or ArtifactResolver()

    @property
    def target(self) -> ReloadTarget:
        return self._target

    @classmethod
    def from_settings(cls, settings: ReloadSettings) -> "ReloadCoordinator":
        """Create coordinator from ReloadSettings.

        Raises:
            ValueError: If no target directory is configured
        """
        return cls(
            target=settings.resolve_target(),
            executor=HookExecutor.from_settings(settings),
            resolver=ArtifactResolver(settings.empty_artifacts),
        )

    def check_preconditions(self) -> None:
        """Raise MissingDirectoryError unless the target directory exists."""
        directory = self._target.directory
        if not directory.is_dir():
            logger.debug(f"Target directory missing: {directory}")
            raise MissingDirectoryError(directory)

    def force_reload(self) -> ReloadResult:
        """Force a hook cache rebuild for the target directory.

        Returns:
            ReloadResult describing the re-stamped files

        Raises:
            MissingDirectoryError: Target directory missing; nothing touched
            RebuildFailedError: Executor failed; no timestamps updated
            NoArtifactsError: No artifacts under the error policy; marker already touched
        """
        started_at = datetime.now(UTC)
        target = self._target

        self.check_preconditions()

        self.executor.rebuild(target.directory)

        marker_mtime_ns = touch(target.config_marker)

        artifacts = self.resolver.resolve(target)
        copy_times(target.config_marker, artifacts)

        result = ReloadResult(
            directory=target.directory,
            config_marker=target.config_marker,
            marker_mtime_ns=marker_mtime_ns,
            artifacts=artifacts,
            started_at=started_at,
            finished_at=datetime.now(UTC),
        )
        logger.info(
            f"Reloaded {target.directory}: re-stamped {len(artifacts)} artifact(s) "
            f"in {result.duration_seconds:.2f}s"
        )
        return result
