"""Formatting utilities for parsing and rendering assistant replies."""

from mediassist.formatting.ir import (
    PlainText,
    Emphasized,
    InlineSpan,
    Heading,
    Table,
    UnorderedList,
    OrderedList,
    Paragraph,
    Block,
    Document,
)
from mediassist.formatting.inline import format_inline
from mediassist.formatting.parser import MarkdownParser, LineCursor, segment

__all__ = [
    "PlainText",
    "Emphasized",
    "InlineSpan",
    "Heading",
    "Table",
    "UnorderedList",
    "OrderedList",
    "Paragraph",
    "Block",
    "Document",
    "format_inline",
    "segment",
    "LineCursor",
    "MarkdownParser",
]
