"""Profile artifact resolution."""

from .resolver import ArtifactResolver

__all__ = ["ArtifactResolver"]
