"""Selection value type and byte-offset line queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .offsets import byte_len
from .validation import ensure_offsets

TextLike = Union[str, bytes]


def _as_bytes(value: TextLike) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def line_start_at(value: TextLike, idx: int) -> int:
    """Byte index of the start of the line containing ``idx``."""

    return _as_bytes(value).rfind(b"\n", 0, idx) + 1


def line_end_at(value: TextLike, idx: int) -> int:
    """Byte index of the newline ending the line containing ``idx`` (or the text end)."""

    data = _as_bytes(value)
    found = data.find(b"\n", idx)
    return len(data) if found == -1 else found


@dataclass(frozen=True, slots=True)
class Selection:
    """Text plus a ``[start, end)`` byte range into its UTF-8 encoding.

    ``selected_text`` is ``None`` for a bare caret. ``before`` and ``after``
    hold the text on either side of the range.
    """

    full_text: str
    start: int
    end: int
    data: bytes = field(init=False, repr=False, compare=False)
    selected_text: Optional[str] = field(init=False, repr=False, compare=False)
    before: str = field(init=False, repr=False, compare=False)
    after: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        data = self.full_text.encode("utf-8")
        ensure_offsets(data, self.start, self.end)
        object.__setattr__(self, "data", data)
        object.__setattr__(
            self,
            "selected_text",
            None if self.start == self.end else data[self.start : self.end].decode("utf-8"),
        )
        object.__setattr__(self, "before", data[: self.start].decode("utf-8"))
        object.__setattr__(self, "after", data[self.end :].decode("utf-8"))

    @classmethod
    def caret(cls, full_text: str, position: int) -> "Selection":
        return cls(full_text, position, position)

    @classmethod
    def matching(cls, full_text: str, selected_text: Optional[str]) -> "Selection":
        """Select the first occurrence of ``selected_text``.

        ``None`` puts the caret at the end of the text; text that does not
        occur puts it at the start.
        """

        data = full_text.encode("utf-8")
        if selected_text is None:
            return cls(full_text, len(data), len(data))
        needle = selected_text.encode("utf-8")
        pos = data.find(needle)
        if pos == -1:
            return cls(full_text, 0, 0)
        return cls(full_text, pos, pos + len(needle))

    @property
    def length(self) -> int:
        return len(self.data)

    def slice(self, start: int, end: Optional[int] = None) -> str:
        stop = len(self.data) if end is None else end
        return self.data[start:stop].decode("utf-8")

    def inner_text(self) -> str:
        return self.selected_text or ""

    def is_empty(self) -> bool:
        return self.start == self.end

    def is_multiline(self) -> bool:
        return "\n" in self.inner_text()

    def current_line(self) -> str:
        return self.slice(
            line_start_at(self.data, self.start), line_end_at(self.data, self.start)
        )

    def line_bounds(self) -> tuple[int, int]:
        """Byte bounds of the lines touched by the selection.

        A selection ending at the end of the text keeps that end as its bound.
        """

        start = line_start_at(self.data, self.start)
        if self.end == len(self.data):
            return start, len(self.data)
        return start, line_end_at(self.data, self.end)

    def selected_lines(self) -> list[str]:
        start, end = self.line_bounds()
        return self.slice(start, end).split("\n")

    def replace_range(self, start: int, end: int, replacement: str) -> str:
        return self.slice(0, start) + replacement + self.slice(end)

    def line_index_of(self, pos: int) -> int:
        return self.data.count(b"\n", 0, pos)


__all__ = ["Selection", "byte_len", "line_end_at", "line_start_at"]
