"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .offsets import is_char_boundary
from .sync import SelectionValidationError


def ensure_offsets(data: bytes, start: int, end: int) -> tuple[int, int]:
    if start < 0 or end < 0:
        raise SelectionValidationError("Negative offset", start=start, end=end)
    if start > end:
        raise SelectionValidationError("Start after end", start=start, end=end)
    if end > len(data):
        raise SelectionValidationError("Offset out of range", start=start, end=end)
    if not (is_char_boundary(data, start) and is_char_boundary(data, end)):
        raise SelectionValidationError(
            "Offset splits a UTF-8 sequence", start=start, end=end
        )
    return start, end
