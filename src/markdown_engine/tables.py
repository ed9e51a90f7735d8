"""Detect and align GitHub-style markdown tables.

``format_tables`` rewrites every table in a document with mdformat so its
columns line up; text outside tables, including fenced code, passes through
untouched.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

import mdformat

_DIVIDER_CHARS = frozenset("-:| \t")


def _is_fence(line: str) -> bool:
    return line.lstrip().startswith("```")


def is_table_header(line: str) -> bool:
    stripped = line.strip()
    return "|" in stripped and any(c != "|" and not c.isspace() for c in stripped)


def is_table_divider(line: str) -> bool:
    stripped = line.strip()
    if "-" not in stripped or "|" not in stripped:
        return False
    return all(c in _DIVIDER_CHARS for c in stripped)


def contains_markdown_table(text: str) -> bool:
    """Return ``True`` when ``text`` has a header row followed by a divider outside code fences."""

    lines = text.splitlines()
    in_code = False
    for index, line in enumerate(lines):
        if _is_fence(line):
            in_code = not in_code
            continue
        if in_code:
            continue
        if (
            is_table_header(line)
            and index + 1 < len(lines)
            and is_table_divider(lines[index + 1])
        ):
            return True
    return False


def _table_end(lines: Sequence[str], start: int) -> int:
    end = start + 2
    while end < len(lines) and lines[end].strip() and "|" in lines[end]:
        end += 1
    return end


def iter_table_spans(lines: Sequence[str]) -> Iterable[tuple[int, int]]:
    """Yield ``(first, stop)`` line ranges of every table outside code fences."""

    in_code = False
    index = 0
    while index < len(lines):
        line = lines[index]
        if _is_fence(line):
            in_code = not in_code
        elif (
            not in_code
            and is_table_header(line)
            and index + 1 < len(lines)
            and is_table_divider(lines[index + 1])
        ):
            end = _table_end(lines, index)
            yield index, end
            index = end
            continue
        index += 1


def align_table(lines: Sequence[str]) -> List[str]:
    """Render one table block with mdformat, keeping the header's indentation.

    Blocks mdformat does not parse as a table (for example a divider with the
    wrong column count) are returned unchanged.
    """

    header = lines[0]
    indent = header[: len(header) - len(header.lstrip())]
    block = "\n".join(line.strip() for line in lines)
    rendered = mdformat.text(block, extensions={"tables"}).rstrip("\n").split("\n")
    if len(rendered) != len(lines) or not all(row.startswith("|") for row in rendered):
        return list(lines)
    return [f"{indent}{row}" for row in rendered]


def format_tables(text: str) -> str:
    """Align the columns of every markdown table in ``text``."""

    lines = text.split("\n")
    spans = list(iter_table_spans(lines))
    for first, stop in reversed(spans):
        lines[first:stop] = align_table(lines[first:stop])
    return "\n".join(lines)


__all__ = [
    "align_table",
    "contains_markdown_table",
    "format_tables",
    "is_table_divider",
    "is_table_header",
    "iter_table_spans",
]
