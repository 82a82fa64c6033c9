"""Hook executor invocation.

Runs the external directory-hook executor once, scoped to the target
directory, with the forced-reload flag in its environment.

Contract:
- Inputs: Target directory, executor command, forced-reload flag
- Outputs: None on success
- Side Effects: Runs the hook executor, which rebuilds its own cache
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

from ..config.settings import ReloadSettings
from ..errors import RebuildFailedError

logger = logging.getLogger(__name__)

# Exit status a shell reports for a command it cannot find
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class RebuildExecutor(Protocol):
    """Anything that can force a hook cache rebuild for a directory."""

    def rebuild(self, directory: Path) -> None: ...


class HookExecutor:
    """Subprocess-backed hook executor.

    Builds ``<command> <directory> <args>`` and runs it synchronously with
    the inherited environment plus one forced-reload flag. Output goes
    straight to the caller's terminal. There is no timeout: if the hook
    hangs, the reload hangs.

    Example:
        >>> executor = HookExecutor(["direnv", "exec"], ["true"], "_nix_direnv_force_reload")
        >>> executor.build_command(Path("/proj"))
        ['direnv', 'exec', '/proj', 'true']
    """

    def __init__(
        self,
        command: list[str],
        args: list[str] | None = None,
        force_env_var: str = "_nix_direnv_force_reload",
        force_env_value: str = "1",
    ) -> None:
        """Initialize hook executor.

        Args:
            command: Executor prefix, e.g. ["direnv", "exec"]
            args: Arguments placed after the directory, e.g. ["true"]
            force_env_var: Environment variable signalling a forced rebuild
            force_env_value: Value of that variable
        """
        if not command:
            raise ValueError("Executor command cannot be empty")
        self.command = list(command)
        self.args = list(args or [])
        self.force_env_var = force_env_var
        self.force_env_value = force_env_value

    @classmethod
    def from_settings(cls, settings: ReloadSettings) -> "HookExecutor":
        """Create executor from ReloadSettings."""
        return cls(
            command=settings.executor_command,
            args=settings.executor_args,
            force_env_var=settings.force_env_var,
            force_env_value=settings.force_env_value,
        )

    def build_command(self, directory: Path) -> list[str]:
        return [*self.command, str(directory), *self.args]

    def build_env(self) -> dict[str, str]:
        env = os.environ.copy()
        env[self.force_env_var] = self.force_env_value
        return env

    def rebuild(self, directory: Path) -> None:
        """Run the executor and block until it exits.

        Args:
            directory: Project directory the hook runs for

        Raises:
            RebuildFailedError: If the executor exits non-zero or cannot be started
        """
        cmd = self.build_command(directory)
        logger.info(f"Forcing hook rebuild: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, env=self.build_env(), check=False)
        except FileNotFoundError as e:
            logger.error(f"Hook executor not found: {cmd[0]}")
            raise RebuildFailedError(directory, COMMAND_NOT_FOUND, cmd) from e
        except PermissionError as e:
            logger.error(f"Hook executor not executable: {cmd[0]}")
            raise RebuildFailedError(directory, COMMAND_NOT_EXECUTABLE, cmd) from e

        if result.returncode != 0:
            logger.error(f"Hook rebuild failed for {directory} (exit status {result.returncode})")
            raise RebuildFailedError(directory, result.returncode, cmd)

        logger.debug(f"Hook rebuild finished for {directory}")
