"""envreload library layer.

Business logic for forcing a directory-hook cache rebuild. The envreload
CLI is a thin wrapper around it.

Public Interface:
    - ReloadCoordinator: Force a rebuild and re-stamp hook files
    - ReloadStatusService: Query hook cache freshness
    - ReloadError and subclasses: Failure kinds
    Modules:
    - config: Settings loading
    - storage: Config and log directories
    - models: Shared data structures
    - execution: Hook executor
    - artifacts: Profile artifact resolution
"""

from .coordinator import ReloadCoordinator
from .errors import MissingDirectoryError
from .errors import NoArtifactsError
from .errors import RebuildFailedError
from .errors import ReloadError
from .status import ReloadStatusService

__all__ = [
    "ReloadCoordinator",
    "ReloadStatusService",
    "ReloadError",
    "MissingDirectoryError",
    "RebuildFailedError",
    "NoArtifactsError",
]
