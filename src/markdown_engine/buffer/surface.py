"""In-memory text surface used by scripts, tests and headless hosts."""

from __future__ import annotations

from typing import Optional

from markdown_engine.runtime.telemetry import span

from .offsets import byte_to_char_pos, char_to_byte_pos, is_char_boundary
from .selection import Selection
from .sync import SelectionValidationError, SurfaceSnapshot


class MemorySurface:
    """Holds text and a character-offset selection the way a text widget does."""

    def __init__(
        self,
        text: str = "",
        start: Optional[int] = None,
        end: Optional[int] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.text = text
        self.selection_start = len(text) if start is None else start
        self.selection_end = self.selection_start if end is None else end
        self.focused = False
        self.writes = 0
        self._logger_name = logger_name

    @classmethod
    def from_selection(cls, selection: Selection) -> "MemorySurface":
        text = selection.full_text
        return cls(
            text,
            byte_to_char_pos(text, selection.start),
            byte_to_char_pos(text, selection.end),
        )

    def select(self, start: int, end: Optional[int] = None) -> None:
        self.selection_start = start
        self.selection_end = start if end is None else end

    def focus(self) -> None:
        self.focused = True

    def snapshot(self) -> SurfaceSnapshot:
        return SurfaceSnapshot(
            text=self.text,
            start=self.selection_start,
            end=self.selection_end,
            focused=self.focused,
        )

    def read_selection(self) -> Selection:
        start = char_to_byte_pos(self.text, self.selection_start)
        end = char_to_byte_pos(self.text, max(self.selection_end, self.selection_start))
        return Selection(self.text, start, end)

    def write(self, text: str, start: int, end: int) -> str:
        with span(
            "surface::write",
            logger_name=self._logger_name,
            component="surface",
            metadata={"start": start, "end": end},
        ):
            data = text.encode("utf-8")
            for offset in (start, end):
                clamped = max(0, min(offset, len(data)))
                if not is_char_boundary(data, clamped):
                    raise SelectionValidationError(
                        "Write offset splits a UTF-8 sequence", start=start, end=end
                    )
            self.text = text
            self.selection_start = byte_to_char_pos(text, start)
            self.selection_end = byte_to_char_pos(text, end)
            self.writes += 1
            self.focus()
            return text


__all__ = ["MemorySurface"]
