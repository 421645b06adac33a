"""File reader module for redactcheck.

This module reads candidate files and decides whether their content is
text. Binary detection looks at the first few kilobytes (null bytes,
control characters, UTF-16 layout); text decoding tries UTF-8 first and
falls back to charset-normalizer. Content that cannot be decoded as text
is reported as binary and never reaches the classifier rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from charset_normalizer import from_bytes

from redactcheck.core.exceptions import FileReadError

logger = logging.getLogger(__name__)

BINARY_DETECTION_SIZE = 8192  # Bytes to check for binary detection
CONTROL_CHAR_THRESHOLD = 0.1  # Fraction of control bytes that marks a file as binary

_TEXT_BOMS = (b"\xff\xfe", b"\xfe\xff", b"\xef\xbb\xbf", b"\xff\xfe\x00\x00", b"\x00\x00\xfe\xff")


class FileType(str, Enum):
    """File type classification."""

    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True)
class FileContent:
    """Content and characteristics of a read file.

    Attributes:
        path: Path to the file.
        file_type: Whether the file is text or binary.
        encoding: Encoding used to decode the text (None for binary).
        size: File size in bytes.
        text: Decoded content (None for binary).
    """

    path: Path
    file_type: FileType
    encoding: str | None
    size: int
    text: str | None = None

    @property
    def is_binary(self) -> bool:
        return self.file_type is FileType.BINARY


def is_binary_content(data: bytes) -> bool:
    """Check if byte content appears to be binary.

    Args:
        data: Byte data to check, usually the head of a file.

    Returns:
        True if content appears to be binary.
    """
    if not data:
        return False

    # Unicode BOMs indicate text encodings, not binary
    if data.startswith(_TEXT_BOMS):
        return False

    if b"\x00" in data:
        # UTF-16 without a BOM also carries null bytes
        return _utf16_byte_order(data) is None

    # Exclude tab, newline and carriage return
    control_chars = sum(1 for byte in data if byte < 32 and byte not in (9, 10, 13))
    return control_chars > len(data) * CONTROL_CHAR_THRESHOLD


def _utf16_byte_order(data: bytes) -> str | None:
    """Return the UTF-16 codec for BOM-less UTF-16 text, or None."""
    if len(data) < 4:
        return None

    # ASCII in UTF-16 LE is char + 0x00, in BE 0x00 + char
    null_at_odd = sum(1 for i in range(1, len(data), 2) if data[i] == 0)
    null_at_even = sum(1 for i in range(0, len(data), 2) if data[i] == 0)

    total_pairs = len(data) // 2
    if null_at_odd / total_pairs > 0.7:
        return "utf-16-le"
    if null_at_even / total_pairs > 0.7:
        return "utf-16-be"
    return None


def _bom_encoding(data: bytes) -> str | None:
    """Return the codec named by a UTF-16 or UTF-32 BOM."""
    # UTF-32 LE starts with the UTF-16 LE BOM, so check it first
    if data.startswith((b"\xff\xfe\x00\x00", b"\x00\x00\xfe\xff")):
        return "utf-32"
    if data.startswith((b"\xff\xfe", b"\xfe\xff")):
        return "utf-16"
    return None


def decode_text(data: bytes) -> tuple[str, str] | None:
    """Decode bytes as text.

    UTF-16 and UTF-32 are decoded from their BOM, or for BOM-less UTF-16
    from the position of the null bytes. Anything else is tried as UTF-8
    and then handed to charset-normalizer.

    Args:
        data: Full file content.

    Returns:
        Tuple of (text, encoding), or None if the content is not
        text-decodable.
    """
    encoding = _bom_encoding(data)
    if encoding is None and b"\x00" in data[:BINARY_DETECTION_SIZE]:
        encoding = _utf16_byte_order(data[:BINARY_DETECTION_SIZE])
    if encoding is not None:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            logger.debug("Content is not valid %s", encoding)

    try:
        return data.decode("utf-8-sig"), "utf-8"
    except UnicodeDecodeError:
        pass

    best = from_bytes(data).best()
    if best is None:
        return None
    return str(best), best.encoding


def read_file(path: Path) -> FileContent:
    """Read a file and classify its content as text or binary.

    Args:
        path: Path to a regular file.

    Returns:
        FileContent with the decoded text, or with ``file_type`` BINARY
        when the content is not text.

    Raises:
        FileReadError: If the file cannot be read.
    """
    try:
        data = path.read_bytes()
    except PermissionError as e:
        raise FileReadError(f"Permission denied: {e}", path=str(path), permission_denied=True) from e
    except OSError as e:
        raise FileReadError(f"Error reading file: {e}", path=str(path)) from e

    size = len(data)
    if size == 0:
        return FileContent(path=path, file_type=FileType.TEXT, encoding="utf-8", size=0, text="")

    if is_binary_content(data[:BINARY_DETECTION_SIZE]):
        logger.debug("Binary content detected: %s", path)
        return FileContent(path=path, file_type=FileType.BINARY, encoding=None, size=size)

    decoded = decode_text(data)
    if decoded is None:
        logger.debug("Content is not text-decodable: %s", path)
        return FileContent(path=path, file_type=FileType.BINARY, encoding=None, size=size)

    text, encoding = decoded
    return FileContent(path=path, file_type=FileType.TEXT, encoding=encoding, size=size, text=text)
