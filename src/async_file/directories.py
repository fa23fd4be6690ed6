"""Directory creation, existence checks and recursive deletion."""

from __future__ import annotations

import errno
import logging
import os
import stat as stat_mod
from pathlib import Path

from async_file import primitives
from async_file.options import DEFAULT_DIRECTORY_MODE
from async_file.types import StrPath

logger = logging.getLogger(__name__)


class PathConflictError(NotADirectoryError):
    """A non-directory occupies a path that should be a directory."""

    def __init__(self, path: StrPath) -> None:
        super().__init__(errno.ENOTDIR, f"{path} is already a file", str(path))


async def create_directory(path: StrPath, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """Create a directory and any missing ancestors (``mkdir -p``).

    The path is made absolute first. Missing ancestors are collected on a
    stack while walking up, then created on the way back down. A path that
    already exists is accepted if it is a directory, including one created
    concurrently by another process.

    Args:
        path: Directory to create.
        mode: Permission bits for directories actually created (before umask).

    Raises:
        PathConflictError: If a non-directory already occupies the path.
        NotADirectoryError: If a non-directory occupies an ancestor.
        OSError: Any other failure from mkdir, unchanged. Directories created
            before the failure are left in place.
    """
    pending = [Path(os.path.abspath(path))]
    while pending:
        current = pending[-1]
        try:
            await primitives.mkdir(current, mode)
        except FileNotFoundError:
            parent = current.parent
            if parent == current:
                raise
            pending.append(parent)
            continue
        except FileExistsError:
            info = await primitives.stat(current)
            if not stat_mod.S_ISDIR(info.st_mode):
                raise PathConflictError(current) from None
            logger.debug("Directory already exists: %s", current)
        else:
            logger.debug("Created directory %s", current)
        pending.pop()


async def exists(path: StrPath) -> bool:
    """Check whether a filesystem entry exists at ``path``.

    Symlinks are not followed, so a dangling link counts as existing.

    Raises:
        OSError: For any failure other than "not found" (permission denied,
            a regular file used as a directory, ...).
    """
    try:
        await primitives.lstat(path)
    except FileNotFoundError:
        return False
    return True


async def delete(path: StrPath) -> None:
    """Delete a file, a symlink or a whole directory tree.

    Deleting a path that does not exist is a no-op. A symlink is removed
    itself; its target is never touched.
    """
    try:
        info = await primitives.lstat(path)
    except FileNotFoundError:
        logger.debug("Nothing to delete at %s", path)
        return

    try:
        if stat_mod.S_ISDIR(info.st_mode):
            await primitives.rmtree(path)
        else:
            await primitives.unlink(path)
    except FileNotFoundError:
        # removed by someone else after the lstat
        logger.debug("Already gone: %s", path)
        return
    logger.debug("Deleted %s", path)


mkdirp = create_directory
rimraf = delete
