"""CLI commands using Typer."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from async_file.context import AppContext

import typer
from rich.markup import escape

from async_file import __version__
from async_file.context import create_context
from async_file.options import parse_mode

app = typer.Typer(
    name="async-file",
    help="Filesystem operations backed by the async-file library",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"async-file v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Filesystem operations backed by the async-file library."""
    pass


def _show_success(ctx: AppContext, message: str) -> None:
    ctx.console.print(f"[green]✓[/green] {escape(message)}")


def _show_error(ctx: AppContext, message: str) -> None:
    ctx.console.print(f"[red]✗[/red] {escape(message)}")


def _fail(ctx: AppContext, error: Exception) -> typer.Exit:
    """Report an error and build the exit to raise."""
    _show_error(ctx, str(error))
    return typer.Exit(1)


@app.command("mkdirp")
def mkdirp_command(
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    mode: Annotated[str, typer.Option("--mode", "-m", help="Permission bits (octal)")] = "777",
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()

    try:
        mode_bits = parse_mode(mode)
        asyncio.run(ctx.filesystem.create_directory(path, mode_bits))
    except (OSError, ValueError) as e:
        raise _fail(ctx, e) from e
    _show_success(ctx, f"Created '{path}'")


@app.command("rm")
def rm_command(
    path: Annotated[Path, typer.Argument(help="File or directory to delete")],
    _context=None,
) -> None:
    """Delete a file or a directory tree."""
    ctx = _context or create_context()

    try:
        asyncio.run(ctx.filesystem.delete(path))
    except OSError as e:
        raise _fail(ctx, e) from e
    _show_success(ctx, f"Deleted '{path}'")


@app.command("exists")
def exists_command(
    path: Annotated[Path, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Print whether a path exists; exit code 1 when it does not."""
    ctx = _context or create_context()

    try:
        found = asyncio.run(ctx.filesystem.exists(path))
    except OSError as e:
        raise _fail(ctx, e) from e
    ctx.console.print("true" if found else "false")
    if not found:
        raise typer.Exit(1)


@app.command("cat")
def cat_command(
    path: Annotated[Path, typer.Argument(help="File to read")],
    encoding: Annotated[str, typer.Option("--encoding", "-e", help="Text encoding")] = "utf8",
    flags: Annotated[str, typer.Option("--flags", "-f", help="Open flags")] = "r",
    _context=None,
) -> None:
    """Print a file's text content."""
    ctx = _context or create_context()

    try:
        content = asyncio.run(ctx.filesystem.read_text(path, encoding, flags))
    except (OSError, ValueError) as e:
        raise _fail(ctx, e) from e
    ctx.console.out(content, end="", highlight=False)


@app.command("write")
def write_command(
    path: Annotated[Path, typer.Argument(help="File to write")],
    text: Annotated[str, typer.Argument(help="Text to write")],
    encoding: Annotated[str, typer.Option("--encoding", "-e", help="Text encoding")] = "utf8",
    flags: Annotated[str, typer.Option("--flags", "-f", help="Open flags")] = "w",
    append: Annotated[bool, typer.Option("--append", "-a", help="Shortcut for --flags a")] = False,
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Permission bits for a new file (octal)")
    ] = None,
    _context=None,
) -> None:
    """Write text to a file, or append it."""
    ctx = _context or create_context()
    if append:
        flags = "a"

    try:
        asyncio.run(ctx.filesystem.write_text(path, text, encoding, flags, mode))
    except (OSError, ValueError) as e:
        raise _fail(ctx, e) from e
    verb = "Appended to" if flags.startswith("a") else "Wrote"
    _show_success(ctx, f"{verb} '{path}'")


if __name__ == "__main__":
    app()
