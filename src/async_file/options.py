"""Defaults and per-call options for file access."""

from __future__ import annotations

import base64
import binascii
import codecs

from pydantic import BaseModel, ConfigDict, field_validator

from async_file.types import Encoding, OpenFlags

# Defaults applied when a caller passes nothing (or None)
DEFAULT_ENCODING = Encoding.UTF8
DEFAULT_DIRECTORY_MODE = 0o777
DEFAULT_FILE_MODE = 0o666
DEFAULT_READ_FLAGS = OpenFlags.READ
DEFAULT_WRITE_FLAGS = OpenFlags.WRITE

# Buffer-style encoding names mapped onto Python codecs
_CODEC_ALIASES = {
    Encoding.ASCII.value: "ascii",
    Encoding.BINARY.value: "latin-1",
    Encoding.UCS2.value: "utf-16-le",
    Encoding.UTF16LE.value: "utf-16-le",
    Encoding.UTF8.value: "utf-8",
    "latin1": "latin-1",
    "ucs-2": "utf-16-le",
    "utf-16le": "utf-16-le",
}

# Encodings that represent raw bytes as text instead of decoding them
_BYTE_TEXT_ENCODINGS = (Encoding.BASE64.value, Encoding.HEX.value)

# ascii reads keep only the low seven bits of each byte
_SEVEN_BIT = bytes(b & 0x7F for b in range(256))


def normalize_encoding(encoding: Encoding | str | None) -> str:
    """Resolve an encoding name to ``base64``, ``hex`` or a Python codec name.

    Args:
        encoding: Encoding member, buffer-style name or Python codec name.
            None selects the default (UTF-8).

    Returns:
        Normalized encoding name.

    Raises:
        ValueError: If the encoding is unknown.
    """
    if encoding is None:
        encoding = DEFAULT_ENCODING
    name = encoding.value if isinstance(encoding, Encoding) else str(encoding)
    key = name.lower()
    if key in _BYTE_TEXT_ENCODINGS:
        return key
    if key in _CODEC_ALIASES:
        return _CODEC_ALIASES[key]
    try:
        return codecs.lookup(key).name
    except LookupError:
        raise ValueError(f"Unknown encoding: {name!r}") from None


def decode_text(data: bytes, encoding: Encoding | str | None = None) -> str:
    """Turn file bytes into text.

    Decoding never fails: undecodable bytes become U+FFFD, and ascii
    strips the high bit of every byte.
    """
    name = normalize_encoding(encoding)
    if name == Encoding.BASE64.value:
        return base64.b64encode(data).decode("ascii")
    if name == Encoding.HEX.value:
        return data.hex()
    if name == "ascii":
        data = data.translate(_SEVEN_BIT)
    return data.decode(name, errors="replace")


def encode_text(text: str, encoding: Encoding | str | None = None) -> bytes:
    """Turn text into the bytes to be written."""
    name = normalize_encoding(encoding)
    try:
        if name == Encoding.BASE64.value:
            return base64.b64decode(text, validate=True)
        if name == Encoding.HEX.value:
            return bytes.fromhex(text)
    except binascii.Error as e:
        raise ValueError(f"Invalid {name} data: {e}") from e
    return text.encode(name)


def parse_mode(mode: int | str | None) -> int | None:
    """Parse permission bits given as an int or an octal string."""
    if mode is None or isinstance(mode, int):
        return mode
    try:
        return int(mode, 8)
    except ValueError:
        raise ValueError(f"Invalid permission mode: {mode!r}") from None


class FileOptions(BaseModel):
    """Options for a single whole-file read or write.

    Strings are accepted for every field and coerced: encodings are
    normalized, flags become OpenFlags members and octal mode strings
    become ints.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = normalize_encoding(DEFAULT_ENCODING)
    flags: OpenFlags = DEFAULT_READ_FLAGS
    mode: int | None = None

    @field_validator("encoding", mode="before")
    @classmethod
    def check_encoding(cls, value: Encoding | str | None) -> str:
        return normalize_encoding(value)

    @field_validator("flags", mode="before")
    @classmethod
    def check_flags(cls, value: OpenFlags | str) -> OpenFlags:
        return OpenFlags.parse(value)

    @field_validator("mode", mode="before")
    @classmethod
    def check_mode(cls, value: int | str | None) -> int | None:
        return parse_mode(value)

    def encode(self, text: str) -> bytes:
        """Encode text with this option set's encoding."""
        return encode_text(text, self.encoding)

    def decode(self, data: bytes) -> str:
        """Decode bytes with this option set's encoding."""
        return decode_text(data, self.encoding)
