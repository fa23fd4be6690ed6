"""Shared data types for async-file."""

from __future__ import annotations

import os
from enum import Enum

__all__ = ["Encoding", "OpenFlags", "StrPath"]

StrPath = str | os.PathLike[str]

_O_BINARY = getattr(os, "O_BINARY", 0)
_O_SYNC = getattr(os, "O_SYNC", 0)


class Encoding(str, Enum):
    """Text encodings understood by the text accessors.

    The values follow the conventional buffer encoding names. Any other
    Python codec name is accepted wherever an Encoding is.
    """

    ASCII = "ascii"
    BASE64 = "base64"
    BINARY = "binary"
    HEX = "hex"
    UCS2 = "ucs2"
    UTF16LE = "utf16le"
    UTF8 = "utf8"


class OpenFlags(str, Enum):
    """Symbolic open modes.

    Each member carries its flag string as the value and knows the binary
    Python mode and the ``os.open`` flags that implement it.
    """

    READ = "r"
    READ_WRITE = "r+"
    READ_SYNC = "rs"
    READ_WRITE_SYNC = "rs+"
    WRITE = "w"
    WRITE_NO_OVERWRITE = "wx"
    CREATE = "w+"
    CREATE_NO_OVERWRITE = "wx+"
    APPEND = "a"
    APPEND_NO_OVERWRITE = "ax"
    APPEND_READ = "a+"
    APPEND_READ_NO_OVERWRITE = "ax+"

    @classmethod
    def parse(cls, value: OpenFlags | str) -> OpenFlags:
        """Coerce a flag string into a member.

        Raises:
            ValueError: If the string is not a known flag.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown open flags: {value!r}") from None

    @property
    def is_append(self) -> bool:
        """True for the append family (a, ax, a+, ax+)."""
        return self.value.startswith("a")

    @property
    def python_mode(self) -> str:
        """Binary mode string for the built-in open()."""
        plus = "+" if self.value.endswith("+") else ""
        return f"{self.value[0]}{plus}b"

    @property
    def os_flags(self) -> int:
        """Flags for os.open()."""
        readable_writable = self.value.endswith("+")
        head = self.value[0]
        if head == "r":
            flags = os.O_RDWR if readable_writable else os.O_RDONLY
            if "s" in self.value:
                flags |= _O_SYNC
        elif head == "w":
            flags = (os.O_RDWR if readable_writable else os.O_WRONLY) | os.O_CREAT | os.O_TRUNC
        else:
            flags = (os.O_RDWR if readable_writable else os.O_WRONLY) | os.O_CREAT | os.O_APPEND
        if "x" in self.value:
            flags |= os.O_EXCL
        return flags | _O_BINARY
