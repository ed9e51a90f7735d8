"""Conversions between character offsets and UTF-8 byte offsets."""

from __future__ import annotations


def byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def is_continuation_byte(value: int) -> bool:
    return value & 0xC0 == 0x80


def is_char_boundary(data: bytes, index: int) -> bool:
    """Return ``True`` when ``index`` does not split a UTF-8 sequence in ``data``."""

    if index == 0 or index == len(data):
        return True
    if index < 0 or index > len(data):
        return False
    return not is_continuation_byte(data[index])


def char_to_byte_pos(text: str, char_pos: int) -> int:
    """Map a character offset to a byte offset, clamped to the end of ``text``."""

    if char_pos <= 0:
        return 0
    return byte_len(text[:char_pos])


def byte_to_char_pos(text: str, byte_pos: int) -> int:
    """Map a byte offset to a character offset, clamped to the end of ``text``.

    A byte offset in the middle of a code point counts only the complete
    characters before it.
    """

    data = text.encode("utf-8")
    clamped = max(0, min(byte_pos, len(data)))
    return len(data[:clamped].decode("utf-8", errors="ignore"))


def find_safe_utf8_boundary(text: str, pos: int) -> int:
    """Clamp ``pos`` to ``text`` and step left until it sits on a character boundary."""

    data = text.encode("utf-8")
    if pos >= len(data):
        return len(data)
    safe = max(pos, 0)
    while safe > 0 and is_continuation_byte(data[safe]):
        safe -= 1
    return safe


__all__ = [
    "byte_len",
    "byte_to_char_pos",
    "char_to_byte_pos",
    "find_safe_utf8_boundary",
    "is_char_boundary",
    "is_continuation_byte",
]
