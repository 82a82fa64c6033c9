"""Models for envreload library."""

from .reload import EmptyArtifactPolicy
from .reload import ErrorKind
from .reload import ReloadResult
from .reload import ReloadTarget
from .status import ArtifactStatus
from .status import ReloadStatus

__all__ = [
    "ArtifactStatus",
    "EmptyArtifactPolicy",
    "ErrorKind",
    "ReloadResult",
    "ReloadStatus",
    "ReloadTarget",
]
