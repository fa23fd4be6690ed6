"""Tests for the application context."""

from __future__ import annotations

from unittest.mock import MagicMock

from rich.console import Console

from async_file.context import AppContext, create_context
from async_file.filesystem import AsyncFileSystem


class TestAppContext:
    """Tests for AppContext construction."""

    def test_defaults(self) -> None:
        """Test the default filesystem and console are created."""
        ctx = AppContext()

        assert isinstance(ctx.filesystem, AsyncFileSystem)
        assert isinstance(ctx.console, Console)

    def test_injected_filesystem(self, mock_filesystem: MagicMock) -> None:
        """Test a test double can be injected."""
        ctx = AppContext(filesystem=mock_filesystem)

        assert ctx.filesystem is mock_filesystem


class TestCreateContext:
    """Tests for the create_context factory."""

    def test_wires_real_filesystem(self) -> None:
        """Test the factory uses the production filesystem."""
        ctx = create_context()

        assert isinstance(ctx.filesystem, AsyncFileSystem)
        assert isinstance(ctx.console, Console)

    def test_builds_fresh_context_each_call(self) -> None:
        """Test each call gets its own filesystem and console."""
        first = create_context()
        second = create_context()

        assert first.filesystem is not second.filesystem
        assert first.console is not second.console
