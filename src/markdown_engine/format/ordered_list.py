"""Toggle ``1. ``/``2. ``/... numbering on the selected lines."""

from __future__ import annotations

import re

from .base import FormatResult, SelectionFormatter

NUMBERED_LINE = re.compile(r"^\s*\d+\.\s+")

# Caret arithmetic assumes a single-digit marker such as "1. ".
MARKER_LENGTH = 3


class OrderedList(SelectionFormatter):
    """Numbers every selected line from 1, or strips the numbering when all lines carry it."""

    name = "ordered_list"

    def format(self) -> FormatResult:
        sel = self.selection
        block_start, block_end = sel.line_bounds()
        lines = sel.selected_lines()

        numbered = all(NUMBERED_LINE.match(line) for line in lines)
        if numbered:
            new_lines = [NUMBERED_LINE.sub("", line, count=1) for line in lines]
        else:
            new_lines = [f"{index + 1}. {line.lstrip()}" for index, line in enumerate(lines)]

        text = sel.replace_range(block_start, block_end, "\n".join(new_lines))
        start, end = sel.start, sel.end
        count = len(lines)

        if numbered:
            if sel.is_empty() or count == 1:
                start = max(start - MARKER_LENGTH, 0)
                end = max(end - MARKER_LENGTH, 0)
            else:
                end = max(end - MARKER_LENGTH * count, 0)
        elif sel.is_empty():
            start += MARKER_LENGTH
            end = start
        elif count == 1:
            start += MARKER_LENGTH
            end += MARKER_LENGTH
        else:
            end += MARKER_LENGTH * count
        return FormatResult(text, start, end)


__all__ = ["NUMBERED_LINE", "OrderedList"]
