"""Text encoding and path helpers."""

from __future__ import annotations

__all__ = ["to_wide_string", "to_utf8_string", "extract_file_name"]


def to_wide_string(data: bytes) -> str:
    """Decode UTF-8 bytes to text; invalid input raises UnicodeDecodeError."""
    return bytes(data).decode("utf-8")


def to_utf8_string(text: str) -> bytes:
    """Encode text as UTF-8; unencodable input raises UnicodeEncodeError."""
    return text.encode("utf-8")


def extract_file_name(file_path: str) -> str:
    """Everything after the last forward or back slash."""
    last_slash = max(file_path.rfind("/"), file_path.rfind("\\"))
    return file_path[last_slash + 1:]