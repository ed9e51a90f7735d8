"""Wrap content in a fenced code block, or unwrap the block around the caret."""

from __future__ import annotations

from typing import Optional

from markdown_engine.buffer import byte_len

from .base import FormatResult, SelectionFormatter

FENCE = "```"
_FENCE = FENCE.encode("utf-8")
EMPTY_BLOCK = f"{FENCE}\n\n{FENCE}\n"


def append_after_block(result: str, after: str) -> str:
    """Join ``after`` onto a freshly closed block.

    Leading blank lines collapse to a single one; a directly following fence
    is attached without an extra blank line.
    """

    if not after:
        return result
    if after.startswith("\n"):
        while after.startswith("\n\n"):
            after = after[1:]
        return result + after
    if after.startswith(FENCE):
        result += after
        if after.rstrip().endswith(FENCE) and not result.endswith("\n"):
            result += "\n"
        return result
    return f"{result}\n{after}"


def connector_before(before_base: str, removed_newlines: int) -> str:
    if removed_newlines >= 2:
        return "\n"
    if before_base.endswith(" "):
        return ""
    return " "


def connector_after(inner: str, removed_newlines: int) -> str:
    if removed_newlines >= 2:
        return " \n"
    if removed_newlines == 1:
        return " "
    if inner.endswith(" "):
        return ""
    return " "


def _separate_from(before: str) -> str:
    """Newlines that leave exactly one blank line between ``before`` and a new block."""

    if not before or before.endswith("\n\n"):
        return ""
    if before.endswith("\n"):
        return "\n"
    return "\n\n"


class CodeBlock(SelectionFormatter):
    """Toggles a ```` ``` ```` fence pair around the caret line or the selection."""

    name = "code_block"

    def format(self) -> FormatResult:
        block = self.find_surrounding_block()
        if block is not None:
            return self._unwrap_block(*block)
        return self._wrap_block()

    def find_surrounding_block(self) -> Optional[tuple[int, int]]:
        """Byte offsets of the opening and closing fences enclosing the selection."""

        sel = self.selection
        data = sel.data
        close_start = data.find(_FENCE, sel.end)
        if close_start == -1:
            close_start = data.rfind(_FENCE, 0, min(sel.start + 1, len(data)))
            if close_start == -1:
                return None

        open_at = data.rfind(_FENCE, 0, close_start)
        if open_at == -1 or open_at == close_start:
            return None
        if open_at > sel.start or close_start < sel.end:
            return None
        return open_at, close_start

    def _wrap_block(self) -> FormatResult:
        sel = self.selection
        if not sel.full_text:
            return FormatResult(EMPTY_BLOCK, 4, 4)

        if sel.is_empty():
            if not sel.current_line().strip() and sel.start == sel.length:
                result = sel.full_text
                if not result.endswith("\n"):
                    result += "\n"
                caret = byte_len(result) + 4
                return FormatResult(result + EMPTY_BLOCK, caret, caret)
            return self._wrap_line_at_caret()

        if sel.is_multiline():
            return self._wrap_multiline_selection()
        if self._selection_is_whole_line():
            return self._wrap_single_line_selection()
        return self._wrap_inline_selection()

    def _selection_is_whole_line(self) -> bool:
        sel = self.selection
        return (sel.start, sel.end) == sel.line_bounds()

    def _wrap_line_at_caret(self) -> FormatResult:
        sel = self.selection
        line_start, line_end = sel.line_bounds()
        after_index = line_end
        if after_index < sel.length and sel.data[after_index : after_index + 1] == b"\n":
            after_index += 1

        before = sel.slice(0, line_start)
        line = sel.slice(line_start, after_index)
        after = sel.slice(after_index)

        if line.strip() == FENCE:
            return self._insert_empty_block_at_cursor()

        result = before
        if before and not before.endswith("\n\n"):
            result += "\n"
        block_start = byte_len(result)

        if not line.strip():
            caret = block_start + 4
        elif not before:
            caret = block_start + 5
        else:
            caret = block_start + 3

        result += f"{FENCE}\n{line}"
        if not line.endswith("\n"):
            result += "\n"
        result += f"{FENCE}\n"
        return FormatResult(append_after_block(result, after), caret, caret)

    def _insert_empty_block_at_cursor(self) -> FormatResult:
        sel = self.selection
        result = sel.before
        if result and not result.endswith("\n"):
            result += "\n"
        caret = byte_len(result) + 4
        result = append_after_block(result + EMPTY_BLOCK, sel.after)
        return FormatResult(result, caret, caret)

    def _wrap_inline_selection(self) -> FormatResult:
        sel = self.selection
        content = sel.inner_text().strip()

        result = sel.before
        if not result.endswith("\n"):
            result += "\n"
        result += f"{FENCE}\n"
        caret_start = byte_len(result) - 1
        caret_end = caret_start + byte_len(content)
        result += f"{content}\n{FENCE}\n{sel.after}"
        return FormatResult(result, caret_start, caret_end)

    def _wrap_single_line_selection(self) -> FormatResult:
        sel = self.selection
        before, after = sel.before, sel.after
        content = sel.inner_text()

        result = before + _separate_from(before)
        block_start = byte_len(result)
        result = append_after_block(result + f"{FENCE}\n{content}\n{FENCE}\n", after)

        if not before and not after:
            caret = block_start + 2 + byte_len(content)
            return FormatResult(result, caret, caret)

        caret_start = block_start + 4
        return FormatResult(result, caret_start, caret_start + byte_len(content))

    def _wrap_multiline_selection(self) -> FormatResult:
        sel = self.selection
        before = sel.before
        selected = sel.inner_text()
        content = selected if selected.endswith("\n") else selected + "\n"

        result = before + _separate_from(before)
        caret_start = byte_len(result) + 4
        result = append_after_block(result + f"{FENCE}\n{content}{FENCE}\n", sel.after)
        return FormatResult(result, caret_start, caret_start + byte_len(selected))

    def _unwrap_block(self, open_at: int, close_start: int) -> FormatResult:
        sel = self.selection
        close_end = close_start + len(_FENCE)
        raw_content = sel.slice(open_at + len(_FENCE), close_start)
        leading_newlines = len(raw_content) - len(raw_content.lstrip("\n"))
        trimmed_start = open_at + len(_FENCE) + leading_newlines
        inner = raw_content.strip("\n")

        before_segment = sel.slice(0, open_at)
        after_segment = sel.slice(close_end)
        before_base = before_segment.rstrip("\n")
        after_base = after_segment.lstrip("\n")
        removed_before = len(before_segment) - len(before_base)
        removed_after = len(after_segment) - len(after_base)

        result = before_base
        if before_base and inner:
            result += connector_before(before_base, removed_before)
        insertion_index = byte_len(result)
        result += inner
        if after_base and inner:
            result += connector_after(inner, removed_after)
        result += after_base

        offset = min(max(sel.start - trimmed_start, 0), byte_len(inner))
        caret = insertion_index + offset
        return FormatResult(result, caret, caret)


__all__ = [
    "CodeBlock",
    "EMPTY_BLOCK",
    "FENCE",
    "append_after_block",
    "connector_after",
    "connector_before",
]
