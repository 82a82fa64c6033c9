"""Hook executor for envreload_library.

Contract:
- Inputs: Target directory, executor settings
- Outputs: None, or RebuildFailedError
- Side Effects: Runs the external hook executor
"""

from .executor import HookExecutor
from .executor import RebuildExecutor

__all__ = ["HookExecutor", "RebuildExecutor"]
