"""Unit tests for ArtifactResolver."""

from pathlib import Path

import pytest

from envreload_library.artifacts import ArtifactResolver
from envreload_library.errors import NoArtifactsError
from envreload_library.models.reload import EmptyArtifactPolicy
from envreload_library.models.reload import ErrorKind
from envreload_library.models.reload import ReloadTarget


@pytest.mark.unit
class TestArtifactResolver:
    """Tests for ArtifactResolver."""

    @pytest.fixture
    def resolver(self) -> ArtifactResolver:
        return ArtifactResolver()

    # --- Glob fallback ---

    def test_glob_returns_sorted_rc_files(self, resolver: ArtifactResolver, target: ReloadTarget) -> None:
        """Test glob fallback finds regular *.rc files in sorted order."""
        artifacts = resolver.resolve(target)

        assert [p.name for p in artifacts] == ["flake-profile.rc", "nix-profile.rc"]

    def test_glob_skips_directories(self, resolver: ArtifactResolver, target: ReloadTarget) -> None:
        """Test directories matching the pattern are not artifacts."""
        (target.artifact_dir / "dir.rc").mkdir()

        artifacts = resolver.resolve(target)

        assert all(p.is_file() for p in artifacts)
        assert target.artifact_dir / "dir.rc" not in artifacts

    def test_glob_missing_artifact_dir(self, resolver: ArtifactResolver, tmp_path: Path) -> None:
        """Test a missing artifact directory yields no artifacts."""
        target = ReloadTarget(
            directory=tmp_path,
            config_marker=tmp_path / ".envrc",
            artifact_dir=tmp_path / ".direnv",
            manifest=tmp_path / ".direnv" / "manifest",
        )

        assert resolver.resolve(target) == []

    # --- Manifest ---

    def test_manifest_takes_precedence_over_glob(self, resolver: ArtifactResolver, target: ReloadTarget) -> None:
        """Test the manifest is authoritative when present."""
        target.manifest.write_text("nix-profile.rc\n")

        artifacts = resolver.resolve(target)

        assert artifacts == [target.artifact_dir / "nix-profile.rc"]

    def test_manifest_skips_comments_blanks_and_duplicates(
        self, resolver: ArtifactResolver, target: ReloadTarget
    ) -> None:
        """Test manifest parsing ignores noise."""
        target.manifest.write_text("# generated\n\nflake-profile.rc\nflake-profile.rc\n  nix-profile.rc  \n")

        artifacts = resolver.resolve(target)

        assert [p.name for p in artifacts] == ["flake-profile.rc", "nix-profile.rc"]

    def test_manifest_accepts_absolute_paths(
        self, resolver: ArtifactResolver, target: ReloadTarget, tmp_path: Path
    ) -> None:
        """Test absolute manifest entries are used as-is."""
        outside = tmp_path / "elsewhere.rc"
        outside.write_text("")
        target.manifest.write_text(f"{outside}\n")

        assert resolver.resolve(target) == [outside]

    def test_manifest_missing_entry_warns(self, resolver: ArtifactResolver, target: ReloadTarget, caplog) -> None:
        """Test listed artifacts that don't exist are skipped with a warning."""
        target.manifest.write_text("gone.rc\nnix-profile.rc\n")

        artifacts = resolver.resolve(target)

        assert [p.name for p in artifacts] == ["nix-profile.rc"]
        assert "lists missing artifact" in caplog.text

    # --- Empty set policy ---

    def test_empty_warn_policy(self, target: ReloadTarget, caplog) -> None:
        """Test WARN logs and returns an empty set."""
        target.manifest.write_text("# nothing yet\n")

        artifacts = ArtifactResolver(EmptyArtifactPolicy.WARN).resolve(target)

        assert artifacts == []
        assert "No profile artifacts found" in caplog.text

    def test_empty_ignore_policy(self, target: ReloadTarget, caplog) -> None:
        """Test IGNORE returns an empty set silently."""
        target.manifest.write_text("")

        artifacts = ArtifactResolver(EmptyArtifactPolicy.IGNORE).resolve(target)

        assert artifacts == []
        assert "No profile artifacts found" not in caplog.text

    def test_empty_error_policy(self, target: ReloadTarget) -> None:
        """Test ERROR raises NoArtifactsError."""
        target.manifest.write_text("")

        with pytest.raises(NoArtifactsError) as exc_info:
            ArtifactResolver(EmptyArtifactPolicy.ERROR).resolve(target)

        assert exc_info.value.kind == ErrorKind.NO_ARTIFACTS

    def test_policy_accepts_string(self) -> None:
        """Test policy can be given by its config value."""
        assert ArtifactResolver("error").policy == EmptyArtifactPolicy.ERROR
