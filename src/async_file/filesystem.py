"""Filesystem facade for dependency injection.

AsyncFileSystem bundles the module-level coroutines behind one object so
that consumers can receive it (or a test double) through the FileSystem
protocol.
"""

from __future__ import annotations

from async_file import directories, text
from async_file.options import DEFAULT_DIRECTORY_MODE
from async_file.types import Encoding, OpenFlags, StrPath


class AsyncFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    async def read_text(
        self,
        path: StrPath,
        encoding: Encoding | str | None = Encoding.UTF8,
        flags: OpenFlags | str | None = OpenFlags.READ,
    ) -> str:
        """Read text content from a file."""
        return await text.read_text_file(path, encoding, flags)

    async def write_text(
        self,
        path: StrPath,
        content: str,
        encoding: Encoding | str | None = Encoding.UTF8,
        flags: OpenFlags | str | None = OpenFlags.WRITE,
        mode: int | str | None = None,
    ) -> None:
        """Write text content to a file."""
        await text.write_text_file(path, content, encoding, flags, mode)

    async def exists(self, path: StrPath) -> bool:
        """Check if a path exists."""
        return await directories.exists(path)

    async def create_directory(self, path: StrPath, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
        """Create a directory and its missing parents."""
        await directories.create_directory(path, mode)

    async def delete(self, path: StrPath) -> None:
        """Remove a file or directory tree."""
        await directories.delete(path)
