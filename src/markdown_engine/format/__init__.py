"""Selection formatters and the actions that dispatch onto them."""

from .base import FormatResult, SelectionFormatter
from .block_prefix import BlockPrefix
from .codeblock import CodeBlock
from .dispatch import (
    TOOLBAR,
    CodeBlockStyle,
    HeadingStyle,
    HorizontalRuleStyle,
    InlineStyle,
    LinePrefixStyle,
    OrderedListStyle,
    TableStyle,
    TextFormattingType,
    apply_text_formatting,
    build_formatter,
    format_all_tables,
    format_selection,
    toolbar,
)
from .heading import Heading
from .horizontal_rule import HorizontalRule
from .inline import Inline
from .ordered_list import OrderedList
from .table import Table

__all__ = [
    "FormatResult",
    "SelectionFormatter",
    "Inline",
    "BlockPrefix",
    "Heading",
    "CodeBlock",
    "OrderedList",
    "HorizontalRule",
    "Table",
    "TextFormattingType",
    "InlineStyle",
    "LinePrefixStyle",
    "HeadingStyle",
    "CodeBlockStyle",
    "OrderedListStyle",
    "TableStyle",
    "HorizontalRuleStyle",
    "TOOLBAR",
    "toolbar",
    "build_formatter",
    "format_selection",
    "apply_text_formatting",
    "format_all_tables",
]
