"""Shared test fixtures."""

from __future__ import annotations

import io
import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from async_file.context import AppContext


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a small UTF-8 text file."""
    path = tmp_path / "test1.txt"
    path.write_bytes(b"Lorem ipsum dolor sit amet")
    return path


@pytest.fixture
def current_umask() -> int:
    """Return the process umask without changing it."""
    old = os.umask(0)
    os.umask(old)
    return old


@pytest.fixture
def populated_tree(tmp_path: Path) -> Path:
    """Create a directory tree with nested files and subdirectories."""
    root = tmp_path / "temp6"
    (root / "dir1" / "dir2").mkdir(parents=True)
    (root / "dir3").mkdir()
    (root / "a.txt").write_text("aaa")
    (root / "dir1" / "dir2" / "b.txt").write_text("bbb")
    (root / "dir1" / "dir2" / "g.txt").write_text("ggg")
    for name in ("c", "d", "e", "f"):
        (root / "dir3" / f"{name}.txt").write_text(name * 3)
    return root


# ============================================================================
# Mock FileSystem / Context Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem whose methods are awaitable.

    The mock records every call without touching real files.
    """
    fs = MagicMock()
    fs.read_text = AsyncMock(return_value="")
    fs.write_text = AsyncMock(return_value=None)
    fs.exists = AsyncMock(return_value=False)
    fs.create_directory = AsyncMock(return_value=None)
    fs.delete = AsyncMock(return_value=None)
    return fs


@pytest.fixture
def console_output() -> io.StringIO:
    """Buffer that captures console output."""
    return io.StringIO()


@pytest.fixture
def mock_context(mock_filesystem: MagicMock, console_output: io.StringIO) -> AppContext:
    """Create an AppContext with a mock filesystem and a captured console."""
    console = Console(file=console_output, force_terminal=False, width=200)
    return AppContext(filesystem=mock_filesystem, console=console)
