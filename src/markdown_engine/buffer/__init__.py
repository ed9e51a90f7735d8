"""Selection values, offset helpers and text surfaces."""

from .offsets import (
    byte_len,
    byte_to_char_pos,
    char_to_byte_pos,
    find_safe_utf8_boundary,
)
from .selection import Selection, line_end_at, line_start_at
from .surface import MemorySurface
from .sync import SelectionValidationError, SurfaceSnapshot, TextSurface
from .validation import ensure_offsets

__all__ = [
    "Selection",
    "MemorySurface",
    "SurfaceSnapshot",
    "TextSurface",
    "SelectionValidationError",
    "byte_len",
    "byte_to_char_pos",
    "char_to_byte_pos",
    "ensure_offsets",
    "find_safe_utf8_boundary",
    "line_end_at",
    "line_start_at",
]
