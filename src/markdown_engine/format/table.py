"""Insert a markdown table scaffold built from the selection or the word under the caret."""

from __future__ import annotations

from typing import Callable, List, Optional

from markdown_engine.buffer import Selection, byte_len

from .base import FormatResult, SelectionFormatter

PrettyPrinter = Callable[[str], str]

PLACEHOLDER = "Header"
SEPARATOR_CELL = "|----------"


def build_table_text(headers: List[str]) -> str:
    header_row = "".join(f"| {header} " for header in headers) + "|"
    separator_row = SEPARATOR_CELL * len(headers) + "|"
    cell_row = "".join(f"| Cell{index + 1} " for index in range(len(headers))) + "|"
    return f"{header_row}\n{separator_row}\n{cell_row}\n\n"


def _is_table_row(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("|") and stripped.endswith("|")


def _is_separator_row(line: str) -> bool:
    return _is_table_row(line) and "-" in line


def is_appending_to_table(text: str) -> bool:
    """``True`` when ``text`` ends with a header row, a separator row and a cell row."""

    lines = text.split("\n")
    if len(lines) < 3:
        return False
    header, separator, cells = lines[-3:]
    return _is_table_row(cells) and _is_separator_row(separator) and _is_table_row(header)


def target_header_index(headers: List[str], override: Optional[int]) -> int:
    if not headers:
        return 0
    if override is not None:
        return min(override, len(headers) - 1)
    if len(headers) >= 3:
        return len(headers) - 1
    if headers[0].startswith(f"{PLACEHOLDER}1"):
        return 0
    return 1 if len(headers) > 1 else 0


def header_offset(header_row: str, headers: List[str], target: int) -> int:
    """Byte offset of ``headers[target]`` inside ``header_row``."""

    pos = 0
    for index, header in enumerate(headers):
        found = header_row.find(header, pos)
        if found == -1:
            break
        if index == target:
            return byte_len(header_row[:found])
        pos = found + len(header)

    offset = 0
    for index, header in enumerate(headers):
        offset += 2
        if index == target:
            break
        offset += byte_len(header) + 1
    return offset


class Table(SelectionFormatter):
    """Replaces the selection (or the word at the caret) with a table.

    Selected lines become column headers, plus one placeholder column. The
    resulting selection covers the header the user is most likely to edit
    next.
    """

    name = "table"

    def __init__(
        self, selection: Selection, pretty_print: Optional[PrettyPrinter] = None
    ) -> None:
        super().__init__(selection)
        self.pretty_print = pretty_print

    def format(self) -> FormatResult:
        sel = self.selection
        if sel.selected_text is not None:
            headers, before, after, override = self._from_selection(sel.selected_text)
        else:
            headers, before, after, override = self._from_caret()

        table = build_table_text(headers)
        if self.pretty_print is not None:
            table = self.pretty_print(table)

        text = f"{before}\n\n{table}{after}" if before else f"{table}{after}"

        insertion = byte_len(before) + 2 if before else 0
        index = target_header_index(headers, override)
        header_row = table.split("\n", 1)[0]
        start = insertion + header_offset(header_row, headers, index)
        end = start + byte_len(headers[index])
        return FormatResult(text, start, end)

    def _from_selection(self, selected: str) -> tuple[List[str], str, str, Optional[int]]:
        sel = self.selection
        before = sel.before.rstrip("\n").rstrip()
        after = sel.after.lstrip("\n").lstrip()

        headers = [line.strip() for line in selected.split("\n")]
        headers = [header for header in headers if header]
        if not headers:
            headers = [f"{PLACEHOLDER}1", f"{PLACEHOLDER}2"]
        elif len(headers) == 1:
            headers.append(f"{PLACEHOLDER}2")
        else:
            headers.append(f"{PLACEHOLDER}{len(headers) + 1}")
        return headers, before, after, len(headers) - 1

    def _from_caret(self) -> tuple[List[str], str, str, Optional[int]]:
        sel = self.selection
        before, after = sel.before, sel.after

        if before.endswith("\n") or after.startswith("\n"):
            before_trimmed = before.rstrip()
            override = 0 if is_appending_to_table(before_trimmed) else None
            return (
                [f"{PLACEHOLDER}1", f"{PLACEHOLDER}2"],
                before_trimmed,
                after.lstrip(),
                override,
            )

        before_trim = before.rstrip()
        after_trim = after.lstrip()

        word_start = 0
        for index in range(len(before_trim) - 1, -1, -1):
            if before_trim[index].isspace():
                word_start = index + 1
                break
        before_word = before_trim[word_start:]

        word_length = len(after_trim)
        for index, char in enumerate(after_trim):
            if char.isspace():
                word_length = index
                break
        after_word = after_trim[:word_length]

        header = before_word + after_word or f"{PLACEHOLDER}1"
        before_clean = before_trim[:word_start].rstrip()
        after_clean = after_trim[word_length:].lstrip()
        return [header, f"{PLACEHOLDER}2"], before_clean, after_clean, None


__all__ = [
    "PrettyPrinter",
    "Table",
    "build_table_text",
    "header_offset",
    "is_appending_to_table",
    "target_header_index",
]
