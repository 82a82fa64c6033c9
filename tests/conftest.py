"""
Shared pytest fixtures for the envreload test suite.

Provides fixtures for:
- Isolated ENVRELOAD_HOME storage
- A hook-managed project directory with stale timestamps
- Fake and subprocess-backed hook executors
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from envreload_library.errors import RebuildFailedError
from envreload_library.models.reload import ReloadTarget

# Well in the past so a reload always moves timestamps forward
OLD_MTIME_NS = 1_600_000_000 * 1_000_000_000

# Executor stand-in: records the forced-reload flag, regenerates one
# artifact, then exits with the status given as its last argument.
# Invoked as: python -c FAKE_HOOK <directory> <exit status>
FAKE_HOOK = """
import os, pathlib, sys
directory = pathlib.Path(sys.argv[1])
(directory / "hook-env").write_text(os.environ.get("_nix_direnv_force_reload", ""))
status = int(sys.argv[2]) if len(sys.argv) > 2 else 0
if status == 0:
    (directory / ".direnv" / "flake-profile.rc").write_text("export REBUILT=1\\n")
sys.exit(status)
"""


class RecordingExecutor:
    """In-process executor that records calls and can simulate failure."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[Path] = []

    def rebuild(self, directory: Path) -> None:
        self.calls.append(directory)
        if self.returncode != 0:
            raise RebuildFailedError(directory, self.returncode)


def set_mtime(path: Path, ns: int = OLD_MTIME_NS) -> None:
    os.utime(path, ns=(ns, ns))


@pytest.fixture(autouse=True)
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ENVRELOAD_HOME at a temp directory and clear other overrides.

    This ensures tests use isolated storage and don't read the real
    user config or environment.

    Returns:
        Path to temporary storage directory
    """
    for key in list(os.environ):
        if key.startswith("ENVRELOAD_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "envreload-home"
    monkeypatch.setenv("ENVRELOAD_HOME", str(home))
    return home


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a hook-managed project with stale timestamps.

    Layout:
        proj/.envrc
        proj/.direnv/flake-profile.rc
        proj/.direnv/nix-profile.rc
        proj/.direnv/flake-inputs/  (not an artifact)
    """
    root = tmp_path / "proj"
    cache = root / ".direnv"
    cache.mkdir(parents=True)
    (cache / "flake-inputs").mkdir()

    marker = root / ".envrc"
    marker.write_text("use flake\n")
    set_mtime(marker)

    for name in ("flake-profile.rc", "nix-profile.rc"):
        artifact = cache / name
        artifact.write_text(f"# {name}\n")
        set_mtime(artifact, OLD_MTIME_NS - 5_000_000_000)

    return root


@pytest.fixture
def target(project: Path) -> ReloadTarget:
    """ReloadTarget for the project fixture with default layout."""
    return ReloadTarget(
        directory=project,
        config_marker=project / ".envrc",
        artifact_dir=project / ".direnv",
        artifact_pattern="*.rc",
        manifest=project / ".direnv" / "manifest",
    )


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def fake_hook_command() -> Generator[list[str], None, None]:
    """Executor command running FAKE_HOOK with the current interpreter."""
    yield [sys.executable, "-c", FAKE_HOOK]


@pytest.fixture
def failing_executor() -> RecordingExecutor:
    return RecordingExecutor(returncode=1)
