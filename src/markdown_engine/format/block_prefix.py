"""Toggle a line prefix (``- ``, ``> ``, ``- [ ] ``) on every selected line."""

from __future__ import annotations

from markdown_engine.buffer import Selection, byte_len

from .base import FormatResult, SelectionFormatter


class BlockPrefix(SelectionFormatter):
    """Adds ``prefix`` after each line's indentation, or removes it when every line has it."""

    name = "line_prefix"

    def __init__(self, selection: Selection, prefix: str) -> None:
        super().__init__(selection)
        self.prefix = prefix

    def _adjust(self, line: str, add: bool) -> str:
        trimmed = line.lstrip()
        indent = line[: len(line) - len(trimmed)]
        if add:
            return f"{indent}{self.prefix}{trimmed}"
        if trimmed.startswith(self.prefix):
            return indent + trimmed[len(self.prefix) :]
        return line

    def format(self) -> FormatResult:
        sel = self.selection
        block_start, block_end = sel.line_bounds()
        lines = sel.selected_lines()

        remove = all(line.lstrip().startswith(self.prefix) for line in lines)
        block = "\n".join(self._adjust(line, not remove) for line in lines)
        text = sel.replace_range(block_start, block_end, block)

        shift = -byte_len(self.prefix) if remove else byte_len(self.prefix)
        start, end = sel.start, sel.end
        if sel.is_empty():
            start = max(start + shift, 0)
            end = start
        elif len(lines) == 1:
            start = max(start + shift, 0)
            end = max(end + shift, 0)
        else:
            end = max(end + shift * len(lines), 0)
        return FormatResult(text, start, end)


__all__ = ["BlockPrefix"]
