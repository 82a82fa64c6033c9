"""Reload errors.

Every failure of a forced reload is a ReloadError carrying an ErrorKind.
Nothing here is retried; callers decide how to surface the error.
"""

from pathlib import Path

from .models.reload import ErrorKind


class ReloadError(Exception):
    """Base class for forced reload failures."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class MissingDirectoryError(ReloadError):
    """Target directory does not exist or is not a directory."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"Cannot find source directory: {directory}", ErrorKind.MISSING_DIRECTORY)
        self.directory = directory


class RebuildFailedError(ReloadError):
    """Hook executor exited with a non-zero status."""

    def __init__(self, directory: Path, returncode: int, command: list[str] | None = None) -> None:
        super().__init__(
            f"Hook executor failed for {directory} with exit status {returncode}",
            ErrorKind.REBUILD_FAILED,
        )
        self.directory = directory
        self.returncode = returncode
        self.command = command or []


class NoArtifactsError(ReloadError):
    """No profile artifacts were found to re-stamp."""

    def __init__(self, artifact_dir: Path) -> None:
        super().__init__(f"No profile artifacts found in {artifact_dir}", ErrorKind.NO_ARTIFACTS)
        self.artifact_dir = artifact_dir
