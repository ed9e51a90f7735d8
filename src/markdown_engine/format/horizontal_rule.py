"""Insert a ``---`` thematic break after the line holding the selection."""

from __future__ import annotations

from markdown_engine.buffer import line_end_at

from .base import FormatResult, SelectionFormatter

RULE = "---"


def surrounding_newlines(before: str, after: str) -> tuple[str, str]:
    """Newlines needed so the rule sits between blank lines without doubling them."""

    if not before or before.endswith("\n\n"):
        prefix = ""
    elif before.endswith("\n"):
        prefix = "\n"
    else:
        prefix = "\n\n"

    if not after:
        suffix = "\n\n"
    elif after.startswith("\n\n"):
        suffix = ""
    elif after.startswith("\n"):
        suffix = "\n"
    else:
        suffix = "\n\n"
    return prefix, suffix


class HorizontalRule(SelectionFormatter):
    name = "horizontal_rule"

    def _insert_position(self) -> int:
        sel = self.selection
        if sel.is_empty():
            anchor = sel.start
        elif sel.end == 0:
            return 0
        else:
            anchor = sel.end - 1
        line_end = line_end_at(sel.data, anchor)
        return line_end + 1 if line_end < sel.length else line_end

    def format(self) -> FormatResult:
        sel = self.selection
        insert_at = self._insert_position()
        before = sel.slice(0, insert_at)
        after = sel.slice(insert_at)

        prefix, suffix = surrounding_newlines(before, after)
        block = f"{prefix}{RULE}{suffix}"
        text = before + block + after

        start, end = sel.start, sel.end
        if insert_at <= start:
            start += len(block)
            end += len(block)
        elif insert_at < end:
            end += len(block)
        return FormatResult(text, start, end)


__all__ = ["HorizontalRule", "RULE", "surrounding_newlines"]
