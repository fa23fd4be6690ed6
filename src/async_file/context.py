"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be tested
with a substituted filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from async_file.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from async_file.filesystem import AsyncFileSystem

    return AsyncFileSystem()


@dataclass
class AppContext:
    """Container for CLI dependencies.

    The filesystem is typed by the FileSystem protocol, so any object with
    matching coroutine methods (including AsyncMock-based doubles) works.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    console: Console = field(default_factory=Console)


def create_context() -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.
    """
    return AppContext()
