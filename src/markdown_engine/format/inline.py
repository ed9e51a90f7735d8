"""Toggle inline markers such as ``**`` or ``_`` around words, selections or lines."""

from __future__ import annotations

from markdown_engine.buffer import Selection, byte_len

from .base import FormatResult, SelectionFormatter

_ASCII_WHITESPACE = b" \t\n\r\x0b\x0c"


def _last_space_end(text: str) -> int:
    """Byte offset just past the last whitespace character of ``text`` (0 if none)."""

    for index in range(len(text) - 1, -1, -1):
        if text[index].isspace():
            return byte_len(text[: index + 1])
    return 0


def _first_space(text: str) -> int:
    """Byte offset of the first whitespace character of ``text`` (its length if none)."""

    for index, char in enumerate(text):
        if char.isspace():
            return byte_len(text[:index])
    return byte_len(text)


class Inline(SelectionFormatter):
    """Wraps or unwraps ``prefix``/``suffix`` markers.

    Single-line selections and bare carets work on a word: the selection
    itself, or the whitespace-delimited word under the caret. Multi-line
    selections toggle the markers on every touched line.
    """

    name = "inline"

    def __init__(self, selection: Selection, prefix: str, suffix: str) -> None:
        super().__init__(selection)
        self.prefix = prefix
        self.suffix = suffix
        self._prefix = prefix.encode("utf-8")
        self._suffix = suffix.encode("utf-8")

    def format(self) -> FormatResult:
        if self.selection.is_multiline():
            return self._line_mode()
        return self._word_mode()

    def _has_prefix_before(self, pos: int) -> bool:
        lp = len(self._prefix)
        return pos >= lp and self.selection.data[pos - lp : pos] == self._prefix

    def _has_suffix_after(self, pos: int) -> bool:
        data = self.selection.data
        ls = len(self._suffix)
        return pos + ls <= len(data) and data[pos : pos + ls] == self._suffix

    def _is_wrapped(self, start: int, end: int) -> bool:
        return self._has_prefix_before(start) and self._has_suffix_after(end)

    def _word_bounds_at_cursor(self) -> tuple[int, int]:
        sel = self.selection
        cursor = sel.start
        start = _last_space_end(sel.before)
        end = cursor + _first_space(sel.after)
        return start, end

    def _word_mode(self) -> FormatResult:
        sel = self.selection
        data = sel.data
        has_selection = sel.selected_text is not None
        lp, ls = len(self._prefix), len(self._suffix)

        if has_selection:
            start, end = sel.start, sel.end
        else:
            start, end = self._word_bounds_at_cursor()

        while end > start and data[end - 1] in _ASCII_WHITESPACE:
            end -= 1

        if has_selection:
            selected = data[sel.start : sel.end]
            if (
                len(selected) >= lp + ls
                and selected.startswith(self._prefix)
                and selected.endswith(self._suffix)
            ):
                return self._unwrap_full_selection()

            if self._is_wrapped(start, end):
                outer_start = start - lp
                outer_end = end + ls
                text = sel.slice(0, outer_start) + sel.slice(start, end) + sel.slice(outer_end)
                return FormatResult(text, outer_start, outer_start + (end - start))

        if self._has_prefix_before(start):
            start -= lp
        if self._has_suffix_after(end):
            end += ls

        if not has_selection and end - start >= lp + ls:
            segment = data[start:end]
            if segment.startswith(self._prefix) and segment.endswith(self._suffix):
                return self._unwrap_word(start + lp, end - ls)

        if self._is_wrapped(start, end):
            return self._unwrap_word(start, end)
        return self._wrap_word(start, end)

    def _unwrap_full_selection(self) -> FormatResult:
        sel = self.selection
        inner = sel.slice(sel.start + len(self._prefix), sel.end - len(self._suffix))
        text = sel.before + inner + sel.after
        return FormatResult(text, sel.start, sel.start + byte_len(inner))

    def _wrap_word(self, start: int, end: int) -> FormatResult:
        sel = self.selection
        text = (
            sel.slice(0, start)
            + self.prefix
            + sel.slice(start, end)
            + self.suffix
            + sel.slice(end)
        )
        lp = len(self._prefix)
        if sel.selected_text is not None:
            new_start = start + lp
            return FormatResult(text, new_start, new_start + (end - start))

        caret = start + lp + max(sel.start - start, 0)
        return FormatResult(text, caret, caret)

    def _unwrap_word(self, start: int, end: int) -> FormatResult:
        sel = self.selection
        real_start = start - len(self._prefix)
        real_end = end + len(self._suffix)
        text = sel.slice(0, real_start) + sel.slice(start, end) + sel.slice(real_end)

        cursor = sel.start
        if start <= cursor <= end:
            caret = real_start + (cursor - start)
        else:
            caret = real_start
        return FormatResult(text, caret, caret)

    def _is_line_wrapped(self, line: str) -> bool:
        trimmed = line.rstrip()
        return trimmed.startswith(self.prefix) and trimmed.endswith(self.suffix)

    def _add(self, line: str) -> str:
        trimmed = line.rstrip()
        return f"{self.prefix}{trimmed}{self.suffix}{line[len(trimmed):]}"

    def _remove(self, line: str) -> str:
        trimmed = line.rstrip()
        if not self._is_line_wrapped(line):
            return line
        inner = trimmed[len(self.prefix) : len(trimmed) - len(self.suffix)]
        return inner + line[len(trimmed) :]

    def _line_mode(self) -> FormatResult:
        sel = self.selection
        line_start, line_end = sel.line_bounds()
        lines = sel.selected_lines()

        if all(self._is_line_wrapped(line) for line in lines):
            new_lines = [self._remove(line) for line in lines]
        else:
            new_lines = [self._add(line) for line in lines]

        block = "\n".join(new_lines)
        text = sel.replace_range(line_start, line_end, block)
        return FormatResult(text, line_start, line_start + byte_len(block))


__all__ = ["Inline"]
