"""Profile artifact resolution.

Profile artifacts are the cache files the hook tool generates. The hook's
own manifest is authoritative when present; otherwise the configured glob
is used. An empty set is handled by EmptyArtifactPolicy.
"""

import logging
from pathlib import Path

from ..errors import NoArtifactsError
from ..models.reload import EmptyArtifactPolicy
from ..models.reload import ReloadTarget

logger = logging.getLogger(__name__)


class ArtifactResolver:
    """Resolves the set of profile artifacts for a target."""

    def __init__(self, policy: EmptyArtifactPolicy = EmptyArtifactPolicy.WARN) -> None:
        self.policy = EmptyArtifactPolicy(policy)

    def resolve(self, target: ReloadTarget) -> list[Path]:
        """Resolve artifacts and apply the empty-set policy.

        Args:
            target: Resolved reload target

        Returns:
            Artifact paths, possibly empty under the ignore/warn policies

        Raises:
            NoArtifactsError: If nothing was found and the policy is ERROR
        """
        if target.manifest.is_file():
            artifacts = self.read_manifest(target.manifest)
            source = f"manifest {target.manifest}"
        else:
            artifacts = self.glob(target.artifact_dir, target.artifact_pattern)
            source = f"{target.artifact_dir / target.artifact_pattern}"

        logger.debug(f"Resolved {len(artifacts)} artifact(s) from {source}")

        if not artifacts:
            if self.policy == EmptyArtifactPolicy.ERROR:
                raise NoArtifactsError(target.artifact_dir)
            if self.policy == EmptyArtifactPolicy.WARN:
                logger.warning(f"No profile artifacts found ({source}), nothing to re-stamp")

        return artifacts

    def read_manifest(self, manifest: Path) -> list[Path]:
        """Read artifact paths from a manifest.

        One path per line; blank lines and ``#`` comments are skipped.
        Relative paths are resolved against the manifest's directory.
        Listed files that do not exist are skipped with a warning.
        """
        artifacts: list[Path] = []
        seen: set[Path] = set()
        for raw in manifest.read_text(encoding="utf-8").splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            path = Path(line).expanduser()
            if not path.is_absolute():
                path = manifest.parent / path

            if path in seen:
                continue
            seen.add(path)

            if not path.is_file():
                logger.warning(f"Manifest {manifest} lists missing artifact: {path}")
                continue
            artifacts.append(path)
        return artifacts

    def glob(self, artifact_dir: Path, pattern: str) -> list[Path]:
        if not artifact_dir.is_dir():
            return []
        return sorted(p for p in artifact_dir.glob(pattern) if p.is_file())
