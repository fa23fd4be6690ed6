"""Protocol definitions for core abstractions.

Consumers such as the CLI depend on the FileSystem protocol rather than on
the module-level functions, so test doubles can be injected without
patching imports. Implementations satisfy the protocol structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from async_file.types import Encoding, OpenFlags, StrPath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for asynchronous filesystem operations."""

    async def read_text(
        self,
        path: StrPath,
        encoding: Encoding | str | None = Encoding.UTF8,
        flags: OpenFlags | str | None = OpenFlags.READ,
    ) -> str:
        """Read a whole file as text.

        Args:
            path: File to read.
            encoding: Text encoding.
            flags: Open flags.

        Returns:
            The decoded contents.
        """
        ...

    async def write_text(
        self,
        path: StrPath,
        content: str,
        encoding: Encoding | str | None = Encoding.UTF8,
        flags: OpenFlags | str | None = OpenFlags.WRITE,
        mode: int | str | None = None,
    ) -> None:
        """Write (or append) text to a file.

        Args:
            path: File to write.
            content: Text to write.
            encoding: Text encoding.
            flags: Open flags; the append family appends.
            mode: Permission bits for a newly created file.
        """
        ...

    async def exists(self, path: StrPath) -> bool:
        """Check whether an entry exists, without following symlinks."""
        ...

    async def create_directory(self, path: StrPath, mode: int = 0o777) -> None:
        """Create a directory and all missing ancestors."""
        ...

    async def delete(self, path: StrPath) -> None:
        """Delete a file or a directory tree; missing paths are ignored."""
        ...
