"""Whole-file text reads and writes with encoding and open-flag defaults."""

from __future__ import annotations

from async_file import primitives
from async_file.options import DEFAULT_READ_FLAGS, DEFAULT_WRITE_FLAGS, FileOptions
from async_file.types import Encoding, OpenFlags, StrPath


async def read_text_file(
    file: StrPath | int,
    encoding: Encoding | str | None = Encoding.UTF8,
    flags: OpenFlags | str | None = OpenFlags.READ,
) -> str:
    """Read a whole file as text.

    Args:
        file: Path or open file descriptor.
        encoding: Text encoding. None means UTF-8.
        flags: Open flags. None means read-only.

    Returns:
        The decoded file contents.
    """
    options = FileOptions(
        encoding=encoding,
        flags=flags if flags is not None else DEFAULT_READ_FLAGS,
    )
    data = await primitives.read_file(file, options.flags)
    return options.decode(data)


async def write_text_file(
    file: StrPath | int,
    data: str,
    encoding: Encoding | str | None = Encoding.UTF8,
    flags: OpenFlags | str | None = OpenFlags.WRITE,
    mode: int | str | None = None,
) -> None:
    """Write text to a file, appending when ``flags`` is an append mode.

    Args:
        file: Path or open file descriptor.
        data: Text to write.
        encoding: Text encoding. None means UTF-8.
        flags: Open flags. None means truncate-and-write.
        mode: Permission bits (int or octal string) for a newly created file.
    """
    options = FileOptions(
        encoding=encoding,
        flags=flags if flags is not None else DEFAULT_WRITE_FLAGS,
        mode=mode,
    )
    payload = options.encode(data)
    if options.flags.is_append:
        await primitives.append_file(file, payload, options.flags, options.mode)
    else:
        await primitives.write_file(file, payload, options.flags, options.mode)
