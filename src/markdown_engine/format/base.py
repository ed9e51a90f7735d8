"""Base classes shared by every selection formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from markdown_engine.buffer import Selection


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Rewritten text plus the byte range to select in it."""

    text: str
    start: int
    end: int

    def __iter__(self) -> Iterator[object]:
        yield self.text
        yield self.start
        yield self.end


class SelectionFormatter:
    """Base class for stateless ``Selection`` to ``FormatResult`` transforms."""

    name: str = "formatter"

    def __init__(self, selection: Selection) -> None:
        self.selection = selection

    def format(self) -> FormatResult:  # pragma: no cover - abstract
        raise NotImplementedError


__all__ = ["FormatResult", "SelectionFormatter"]
