"""Timestamp bookkeeping for hook files.

Only modification and access times are touched; file contents are never
read or written.
"""

import logging
import os
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def mtime_ns(path: Path) -> int | None:
    """Get modification time in nanoseconds, or None if path is missing."""
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


def touch(path: Path) -> int:
    """Set path's atime and mtime to now, like ``touch``.

    The new mtime is always strictly greater than the previous one, even on
    filesystems whose clock granularity would otherwise repeat a timestamp.
    A missing file is created empty.

    Args:
        path: File to touch

    Returns:
        New mtime in nanoseconds
    """
    previous = mtime_ns(path)
    if previous is None:
        logger.warning(f"{path} does not exist, creating it")
        path.touch()
        previous = mtime_ns(path)

    now = time.time_ns()
    if previous is not None and now <= previous:
        now = previous + 1

    os.utime(path, ns=(now, now))
    # Coarse filesystems truncate the stamp, bump until it lands after previous
    stamped = path.stat().st_mtime_ns
    step = 1
    while previous is not None and stamped <= previous:
        now += step
        step *= 10
        os.utime(path, ns=(now, now))
        stamped = path.stat().st_mtime_ns
    logger.debug(f"Touched {path}: mtime_ns={stamped}")
    return stamped


def copy_times(reference: Path, targets: list[Path]) -> list[Path]:
    """Copy reference's atime and mtime onto every target, like ``touch -r``.

    Args:
        reference: File whose timestamps are copied
        targets: Files to re-stamp

    Returns:
        The re-stamped targets

    Raises:
        FileNotFoundError: If reference or a target is missing
    """
    stat = reference.stat()
    for target in targets:
        os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns))
        logger.debug(f"Re-stamped {target} from {reference}")
    return targets
