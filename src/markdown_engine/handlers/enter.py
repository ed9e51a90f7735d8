"""Enter-key handling with markdown list continuation.

Pressing Enter on a list item starts the next item at the same indentation:
numbers count up, checkboxes restart unchecked, bullets repeat. Pressing it on
an item with no content removes the marker instead, ending the list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from markdown_engine.buffer import (
    Selection,
    TextSurface,
    byte_len,
    find_safe_utf8_boundary,
)
from markdown_engine.runtime.telemetry import span

_NUMBERED = re.compile(r"([0-9]+)\. ")
CHECKBOX_MARKERS = ("- [ ] ", "- [x] ", "- [X] ")
BULLET_MARKERS = ("- ", "* ")
UNCHECKED = CHECKBOX_MARKERS[0]


class ListKind(Enum):
    NUMBERED = "numbered"
    CHECKBOX = "checkbox"
    BULLET = "bullet"


@dataclass(frozen=True, slots=True)
class ListMarker:
    kind: ListKind
    marker: str
    number: int = 0

    @property
    def length(self) -> int:
        return byte_len(self.marker)

    def next_marker(self) -> str:
        if self.kind is ListKind.NUMBERED:
            return f"{self.number + 1}. "
        if self.kind is ListKind.CHECKBOX:
            return UNCHECKED
        return self.marker


@dataclass(frozen=True, slots=True)
class EnterResult:
    """New text and the byte offset of the caret in it."""

    text: str
    caret: int

    def __iter__(self) -> Iterator[object]:
        yield self.text
        yield self.caret


def detect_list_marker(content: str) -> Optional[ListMarker]:
    """Classify a left-trimmed line by its list marker."""

    match = _NUMBERED.match(content)
    if match:
        return ListMarker(ListKind.NUMBERED, match.group(0), int(match.group(1)))
    for marker in CHECKBOX_MARKERS:
        if content.startswith(marker):
            return ListMarker(ListKind.CHECKBOX, marker)
    for marker in BULLET_MARKERS:
        if content.startswith(marker):
            return ListMarker(ListKind.BULLET, marker)
    return None


def has_content_after_marker(content: str, marker_length: int) -> bool:
    data = content.encode("utf-8")
    if marker_length >= len(data):
        return False
    return bool(data[marker_length:].decode("utf-8", errors="ignore").strip())


def insert_text_at_position(text: str, position: int, insert: str) -> EnterResult:
    safe = find_safe_utf8_boundary(text, position)
    data = text.encode("utf-8")
    new_text = data[:safe].decode("utf-8") + insert + data[safe:].decode("utf-8")
    return EnterResult(new_text, safe + byte_len(insert))


def remove_list_marker(text: str, marker_start: int, marker_length: int) -> EnterResult:
    data = text.encode("utf-8")
    safe_start = find_safe_utf8_boundary(text, marker_start)
    safe_end = find_safe_utf8_boundary(text, min(safe_start + marker_length, len(data)))
    new_text = data[:safe_start].decode("utf-8") + data[safe_end:].decode("utf-8")
    return EnterResult(new_text, safe_start)


def handle_enter(selection: Selection) -> EnterResult:
    """Compute the result of pressing Enter at ``selection.start``."""

    text = selection.full_text
    cursor = selection.start
    line = selection.current_line()
    line_start, _ = selection.line_bounds()

    content = line.lstrip()
    if not content:
        return insert_text_at_position(text, cursor, "\n")

    marker = detect_list_marker(content)
    if marker is None:
        return insert_text_at_position(text, cursor, "\n")

    indent = line[: len(line) - len(content)]
    if has_content_after_marker(content, marker.length):
        return insert_text_at_position(text, cursor, f"\n{indent}{marker.next_marker()}")
    return remove_list_marker(text, line_start + byte_len(indent), marker.length)


def handle_enter_for_lists(surface: TextSurface) -> str:
    """Apply ``handle_enter`` to ``surface`` and return its new text."""

    with span("handlers::enter", component="handlers") as handle:
        selection = surface.read_selection()
        result = handle_enter(selection)
        handle.add_metadata("caret", result.caret)
        return surface.write(result.text, result.caret, result.caret)


__all__ = [
    "EnterResult",
    "ListKind",
    "ListMarker",
    "detect_list_marker",
    "find_safe_utf8_boundary",
    "handle_enter",
    "handle_enter_for_lists",
    "has_content_after_marker",
    "insert_text_at_position",
    "remove_list_marker",
]
