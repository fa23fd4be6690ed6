"""Async wrappers over the host filesystem calls.

Every blocking call is pushed to the event loop's default executor with
aiofiles' ``wrap`` helper, so these coroutines accept exactly the arguments
of the ``os`` function they wrap and raise exactly what it raises. Whole-file
reads and writes go through ``aiofiles.open``.
"""

from __future__ import annotations

import os
import shutil
from typing import Any, Callable

import aiofiles
from aiofiles.ospath import wrap

from async_file.options import DEFAULT_FILE_MODE
from async_file.types import OpenFlags

__all__ = [
    "access",
    "append_file",
    "chmod",
    "link",
    "lstat",
    "mkdir",
    "read_file",
    "readdir",
    "readlink",
    "realpath",
    "rename",
    "rmdir",
    "rmtree",
    "stat",
    "symlink",
    "truncate",
    "unlink",
    "utimes",
    "write_file",
]

access = wrap(os.access)
chmod = wrap(os.chmod)
link = wrap(os.link)
lstat = wrap(os.lstat)
mkdir = wrap(os.mkdir)
readdir = wrap(os.listdir)
readlink = wrap(os.readlink)
realpath = wrap(os.path.realpath)
rename = wrap(os.rename)
rmdir = wrap(os.rmdir)
rmtree = wrap(shutil.rmtree)
stat = wrap(os.stat)
symlink = wrap(os.symlink)
truncate = wrap(os.truncate)
unlink = wrap(os.unlink)
utimes = wrap(os.utime)


def _opener(flags: OpenFlags, mode: int) -> Callable[[str, int], int]:
    """Build an opener that uses our flags instead of the ones open() derives."""

    def opener(path: str, _flags: int) -> int:
        return os.open(path, flags.os_flags, mode)

    return opener


def _open(file: Any, flags: OpenFlags, mode: int | None, fd_mode: str) -> Any:
    # Descriptors belong to the caller: never closed, flags ignored
    if isinstance(file, int):
        return aiofiles.open(file, fd_mode, closefd=False)
    if mode is None:
        mode = DEFAULT_FILE_MODE
    return aiofiles.open(file, flags.python_mode, opener=_opener(flags, mode))


async def read_file(file: Any, flags: OpenFlags | str = OpenFlags.READ) -> bytes:
    """Read the entire contents of a file.

    Args:
        file: Path or open file descriptor.
        flags: Open flags used when ``file`` is a path.

    Returns:
        The file's bytes.
    """
    flags = OpenFlags.parse(flags)
    async with _open(file, flags, None, "rb") as f:
        if flags.is_append and not isinstance(file, int):
            await f.seek(0)
        return await f.read()


async def _write(
    file: Any, data: bytes | str, flags: OpenFlags, mode: int | None, fd_mode: str
) -> None:
    if isinstance(data, str):
        data = data.encode("utf-8")
    async with _open(file, flags, mode, fd_mode) as f:
        await f.write(data)


async def write_file(
    file: Any,
    data: bytes | str,
    flags: OpenFlags | str = OpenFlags.WRITE,
    mode: int | None = DEFAULT_FILE_MODE,
) -> None:
    """Write data to a file, replacing it by default.

    Args:
        file: Path or open file descriptor.
        data: Bytes, or text to be encoded as UTF-8.
        flags: Open flags used when ``file`` is a path.
        mode: Permission bits applied only if the file is created.
    """
    await _write(file, data, OpenFlags.parse(flags), mode, "wb")


async def append_file(
    file: Any,
    data: bytes | str,
    flags: OpenFlags | str = OpenFlags.APPEND,
    mode: int | None = DEFAULT_FILE_MODE,
) -> None:
    """Append data to a file, creating it if needed."""
    await _write(file, data, OpenFlags.parse(flags), mode, "ab")
