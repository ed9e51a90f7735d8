"""Formatting actions and their dispatch onto selection formatters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Union

from markdown_engine.buffer import Selection, TextSurface, find_safe_utf8_boundary
from markdown_engine.runtime import telemetry
from markdown_engine.runtime.telemetry import span
from markdown_engine.settings import EditorSettings
from markdown_engine.tables import contains_markdown_table, format_tables

from .base import FormatResult, SelectionFormatter
from .block_prefix import BlockPrefix
from .codeblock import CodeBlock
from .heading import Heading
from .horizontal_rule import HorizontalRule
from .inline import Inline
from .ordered_list import OrderedList
from .table import Table


@dataclass(frozen=True, slots=True)
class InlineStyle:
    prefix: str
    suffix: str

    def __post_init__(self) -> None:
        if not self.prefix and not self.suffix:
            raise ValueError("InlineStyle needs a prefix or a suffix")

    @property
    def name(self) -> str:
        return "inline"


@dataclass(frozen=True, slots=True)
class LinePrefixStyle:
    prefix: str

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("prefix cannot be empty")

    @property
    def name(self) -> str:
        return "line_prefix"


@dataclass(frozen=True, slots=True)
class HeadingStyle:
    name = "heading"


@dataclass(frozen=True, slots=True)
class CodeBlockStyle:
    name = "code_block"


@dataclass(frozen=True, slots=True)
class OrderedListStyle:
    name = "ordered_list"


@dataclass(frozen=True, slots=True)
class TableStyle:
    name = "table"


@dataclass(frozen=True, slots=True)
class HorizontalRuleStyle:
    name = "horizontal_rule"


TextFormattingType = Union[
    InlineStyle,
    LinePrefixStyle,
    HeadingStyle,
    CodeBlockStyle,
    OrderedListStyle,
    TableStyle,
    HorizontalRuleStyle,
]

FormatterFactory = Callable[[Selection, TextFormattingType, EditorSettings], SelectionFormatter]


def _table(selection: Selection, _: TextFormattingType, settings: EditorSettings) -> Table:
    return Table(selection, format_tables if settings.align_tables else None)


_FORMATTERS: Dict[type, FormatterFactory] = {
    InlineStyle: lambda sel, kind, _: Inline(sel, kind.prefix, kind.suffix),  # type: ignore[union-attr]
    LinePrefixStyle: lambda sel, kind, _: BlockPrefix(sel, kind.prefix),  # type: ignore[union-attr]
    HeadingStyle: lambda sel, _kind, _: Heading(sel),
    CodeBlockStyle: lambda sel, _kind, _: CodeBlock(sel),
    OrderedListStyle: lambda sel, _kind, _: OrderedList(sel),
    TableStyle: _table,
    HorizontalRuleStyle: lambda sel, _kind, _: HorizontalRule(sel),
}


def toolbar(settings: Optional[EditorSettings] = None) -> Mapping[str, TextFormattingType]:
    """Toolbar actions in display order, using the configured emphasis markers."""

    settings = settings or EditorSettings()
    return {
        "heading": HeadingStyle(),
        "bold": InlineStyle(settings.bold_marker, settings.bold_marker),
        "italic": InlineStyle(settings.italic_marker, settings.italic_marker),
        "strikethrough": InlineStyle("~~", "~~"),
        "inline_code": InlineStyle("`", "`"),
        "unordered_list": LinePrefixStyle("- "),
        "ordered_list": OrderedListStyle(),
        "task_list": LinePrefixStyle("- [ ] "),
        "code_block": CodeBlockStyle(),
        "quote": LinePrefixStyle("> "),
        "image": InlineStyle("![", "](url)"),
        "link": InlineStyle("[", "](url)"),
        "horizontal_rule": HorizontalRuleStyle(),
        "table": TableStyle(),
    }


TOOLBAR = toolbar()


def build_formatter(
    kind: TextFormattingType,
    selection: Selection,
    settings: Optional[EditorSettings] = None,
) -> SelectionFormatter:
    factory = _FORMATTERS.get(type(kind))
    if factory is None:
        raise TypeError(f"Unsupported formatting type {kind!r}")
    return factory(selection, kind, settings or EditorSettings())


def format_selection(
    kind: TextFormattingType,
    selection: Selection,
    settings: Optional[EditorSettings] = None,
) -> FormatResult:
    return build_formatter(kind, selection, settings).format()


def apply_text_formatting(
    kind: TextFormattingType,
    surface: TextSurface,
    settings: Optional[EditorSettings] = None,
) -> str:
    """Read the surface selection, apply ``kind`` and write the result back."""

    with span(
        f"format::{kind.name}",
        component="format",
        metadata={"kind": repr(kind)},
    ) as handle:
        selection = surface.read_selection()
        result = format_selection(kind, selection, settings)
        handle.add_metadata("range", (result.start, result.end))
        return surface.write(result.text, result.start, result.end)


def format_all_tables(surface: TextSurface) -> str:
    """Align every table on the surface; text without tables is left alone."""

    with span("format::tables", component="format") as handle:
        selection = surface.read_selection()
        if not contains_markdown_table(selection.full_text):
            handle.add_metadata("tables", False)
            return selection.full_text

        text = format_tables(selection.full_text)
        start = find_safe_utf8_boundary(text, selection.start)
        end = find_safe_utf8_boundary(text, max(selection.end, start))
        telemetry.record_event("format.tables", data={"length": len(text)})
        return surface.write(text, start, end)


__all__ = [
    "CodeBlockStyle",
    "HeadingStyle",
    "HorizontalRuleStyle",
    "InlineStyle",
    "LinePrefixStyle",
    "OrderedListStyle",
    "TOOLBAR",
    "TableStyle",
    "TextFormattingType",
    "apply_text_formatting",
    "build_formatter",
    "format_all_tables",
    "format_selection",
    "toolbar",
]
