"""Cycle heading levels ``#`` through ``#####`` on the selected lines."""

from __future__ import annotations

from markdown_engine.buffer import byte_len

from .base import FormatResult, SelectionFormatter

MAX_LEVEL = 5


def heading_level(line: str) -> int:
    trimmed = line.lstrip()
    return len(trimmed) - len(trimmed.lstrip("#"))


def next_level(level: int) -> int:
    return 1 if level >= MAX_LEVEL else level + 1


def toggle_heading(line: str) -> str:
    """Advance ``line`` one heading level, wrapping ``#####`` back to ``#``."""

    trimmed = line.lstrip()
    indent = line[: len(line) - len(trimmed)]
    level = heading_level(line)
    content = trimmed
    if level and trimmed[level : level + 1] == " ":
        content = trimmed[level + 1 :]
    return f"{indent}{'#' * next_level(level)} {content}"


class Heading(SelectionFormatter):
    name = "heading"

    def format(self) -> FormatResult:
        sel = self.selection
        line_start, line_end = sel.line_bounds()
        lines = sel.selected_lines()

        block = "\n".join(toggle_heading(line) for line in lines)
        text = sel.replace_range(line_start, line_end, block)

        if sel.selected_text is not None and (sel.start, sel.end) == (line_start, line_end):
            return FormatResult(text, line_start, line_start + byte_len(block))

        old_level = heading_level(lines[0])
        delta = next_level(old_level) - old_level
        add_space = 1 if old_level == 0 else 0
        first_line = sel.line_index_of(line_start)

        def adjust(pos: int) -> int:
            offset = sel.line_index_of(pos) - first_line
            return max(pos + delta * (offset + 1) + add_space, 0)

        return FormatResult(text, adjust(sel.start), adjust(sel.end))


__all__ = ["Heading", "heading_level", "next_level", "toggle_heading"]
