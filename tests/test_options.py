"""Tests for encodings, open flags and FileOptions."""

from __future__ import annotations

import os

import pytest

from async_file.options import (
    FileOptions,
    decode_text,
    encode_text,
    normalize_encoding,
    parse_mode,
)
from async_file.types import Encoding, OpenFlags

_ACCESS_MASK = os.O_RDONLY | os.O_WRONLY | os.O_RDWR


class TestOpenFlags:
    """Tests for OpenFlags."""

    def test_parse_string(self) -> None:
        """Test flag strings map to members."""
        assert OpenFlags.parse("ax+") is OpenFlags.APPEND_READ_NO_OVERWRITE
        assert OpenFlags.parse(OpenFlags.READ) is OpenFlags.READ

    def test_parse_unknown(self) -> None:
        """Test unknown flag strings raise ValueError."""
        with pytest.raises(ValueError, match="Unknown open flags"):
            OpenFlags.parse("rw")

    @pytest.mark.parametrize(
        "flags",
        [OpenFlags.APPEND, OpenFlags.APPEND_NO_OVERWRITE, OpenFlags.APPEND_READ, OpenFlags.APPEND_READ_NO_OVERWRITE],
    )
    def test_append_family(self, flags: OpenFlags) -> None:
        """Test the a* flags report is_append."""
        assert flags.is_append

    def test_non_append(self) -> None:
        """Test read and write flags are not appends."""
        assert not OpenFlags.WRITE.is_append
        assert not OpenFlags.READ_WRITE.is_append

    def test_python_modes(self) -> None:
        """Test the binary modes handed to open()."""
        assert OpenFlags.READ.python_mode == "rb"
        assert OpenFlags.READ_WRITE_SYNC.python_mode == "r+b"
        assert OpenFlags.WRITE_NO_OVERWRITE.python_mode == "wb"
        assert OpenFlags.CREATE.python_mode == "w+b"
        assert OpenFlags.APPEND_READ.python_mode == "a+b"

    def test_os_flags(self) -> None:
        """Test the os.open flags for representative members."""
        assert OpenFlags.READ.os_flags & _ACCESS_MASK == os.O_RDONLY
        assert OpenFlags.WRITE.os_flags & (os.O_CREAT | os.O_TRUNC) == os.O_CREAT | os.O_TRUNC
        assert OpenFlags.WRITE_NO_OVERWRITE.os_flags & os.O_EXCL
        assert OpenFlags.APPEND_READ.os_flags & _ACCESS_MASK == os.O_RDWR
        assert OpenFlags.APPEND.os_flags & os.O_APPEND
        assert not OpenFlags.APPEND.os_flags & os.O_TRUNC


class TestEncodings:
    """Tests for encoding helpers."""

    def test_normalize_aliases(self) -> None:
        """Test buffer-style names map to Python codecs."""
        assert normalize_encoding(Encoding.UTF8) == "utf-8"
        assert normalize_encoding("ucs2") == "utf-16-le"
        assert normalize_encoding(Encoding.BINARY) == "latin-1"
        assert normalize_encoding(None) == "utf-8"

    def test_normalize_python_codec(self) -> None:
        """Test any registered Python codec is accepted."""
        assert normalize_encoding("cp1252") == "cp1252"

    def test_normalize_unknown(self) -> None:
        """Test unknown encodings raise ValueError."""
        with pytest.raises(ValueError, match="Unknown encoding"):
            normalize_encoding("klingon")

    def test_base64_text(self) -> None:
        """Test base64 represents bytes as text both ways."""
        assert decode_text(b"hello", "base64") == "aGVsbG8="
        assert encode_text("aGVsbG8=", Encoding.BASE64) == b"hello"

    def test_hex_text(self) -> None:
        """Test hex represents bytes as text both ways."""
        assert decode_text(b"\x01\xab", "hex") == "01ab"
        assert encode_text("01ab", "hex") == b"\x01\xab"

    def test_invalid_hex(self) -> None:
        """Test malformed hex raises ValueError."""
        with pytest.raises(ValueError):
            encode_text("zz", "hex")


class TestParseMode:
    """Tests for parse_mode."""

    def test_int_passthrough(self) -> None:
        """Test ints are returned unchanged."""
        assert parse_mode(0o755) == 0o755

    def test_octal_strings(self) -> None:
        """Test octal strings with and without prefixes."""
        assert parse_mode("644") == 0o644
        assert parse_mode("0644") == 0o644
        assert parse_mode("0o600") == 0o600

    def test_none(self) -> None:
        """Test None stays None."""
        assert parse_mode(None) is None

    def test_invalid(self) -> None:
        """Test non-octal strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid permission mode"):
            parse_mode("999")


class TestFileOptions:
    """Tests for FileOptions."""

    def test_defaults(self) -> None:
        """Test defaults are UTF-8, read flags and no mode."""
        options = FileOptions()

        assert options.encoding == "utf-8"
        assert options.flags is OpenFlags.READ
        assert options.mode is None

    def test_coerces_strings(self) -> None:
        """Test string fields are coerced."""
        options = FileOptions(encoding="utf16le", flags="a+", mode="600")

        assert options.encoding == "utf-16-le"
        assert options.flags is OpenFlags.APPEND_READ
        assert options.mode == 0o600

    def test_none_encoding(self) -> None:
        """Test a None encoding falls back to UTF-8."""
        assert FileOptions(encoding=None).encoding == "utf-8"

    def test_invalid_flags(self) -> None:
        """Test invalid flags fail validation."""
        with pytest.raises(ValueError):
            FileOptions(flags="bogus")

    def test_round_trip_helpers(self) -> None:
        """Test encode and decode use the configured encoding."""
        options = FileOptions(encoding=Encoding.UCS2)

        assert options.encode("ab") == b"a\x00b\x00"
        assert options.decode(b"a\x00b\x00") == "ab"
