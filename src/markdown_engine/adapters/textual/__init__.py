"""Textual adapter surface."""

from .controller import (
    EditorHooks,
    MarkdownEditorController,
    TextAreaSurface,
    index_to_location,
    location_to_index,
    normalize_key,
)

__all__ = [
    "EditorHooks",
    "MarkdownEditorController",
    "TextAreaSurface",
    "index_to_location",
    "location_to_index",
    "normalize_key",
]
