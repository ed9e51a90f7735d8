"""Adapter boundary types for exchanging text and selections with host widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .selection import Selection


@dataclass(slots=True)
class SurfaceSnapshot:
    """Host-friendly view of a surface: text plus a character-offset selection."""

    text: str
    start: int
    end: int
    focused: bool = False


class TextSurface(Protocol):
    """Protocol describing how formatters exchange data with an editing widget.

    Surfaces speak character offsets to their host and byte offsets to the
    engine.
    """

    def read_selection(self) -> "Selection":
        """Return the current text and selection as a byte-offset ``Selection``."""
        ...

    def write(self, text: str, start: int, end: int) -> str:
        """Replace the text, select ``[start, end)`` (bytes), focus, return ``text``."""
        ...


class SelectionValidationError(RuntimeError):
    """Raised when a selection is built from offsets that do not fit its text."""

    def __init__(
        self, message: str, *, start: int | None = None, end: int | None = None
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end
