"""Intermediate Representation for parsed assistant replies.

This module defines the closed set of block and inline node types that
bridge the model's markdown output to any presentation layer. Every node
is a frozen dataclass holding tuples, so a parsed Document is immutable
and compares structurally.
"""

from dataclasses import dataclass, field
from typing import Iterator, Union


# =============================================================================
# Inline spans
# =============================================================================

@dataclass(frozen=True)
class PlainText:
    """A run of unstyled text."""

    text: str

    @property
    def plain_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Emphasized:
    """A run of text that was wrapped in ``**`` delimiters."""

    text: str

    @property
    def plain_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


InlineSpan = Union[PlainText, Emphasized]
Spans = tuple[InlineSpan, ...]


def spans_to_text(spans: Spans) -> str:
    """Join spans into their unstyled text."""
    return "".join(span.text for span in spans)


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Heading:
    """A section header.

    Attributes:
        level: 2 for ``## `` headers, 3 for ``### `` headers
        text: Formatted header text
    """

    level: int
    text: Spans = ()

    @property
    def plain_text(self) -> str:
        return spans_to_text(self.text)


@dataclass(frozen=True)
class Table:
    """A pipe-delimited table.

    Attributes:
        headers: Header cells as literal strings (never formatted)
        rows: Data rows; each cell is the formatted spans of that cell
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[Spans, ...], ...] = ()

    @property
    def plain_rows(self) -> list[list[str]]:
        """Data rows with styling removed."""
        return [[spans_to_text(cell) for cell in row] for row in self.rows]

    @property
    def plain_text(self) -> str:
        lines = [" | ".join(self.headers)]
        lines.extend(" | ".join(row) for row in self.plain_rows)
        return "\n".join(lines)


@dataclass(frozen=True)
class UnorderedList:
    """A bulleted list of formatted items."""

    items: tuple[Spans, ...]

    @property
    def plain_text(self) -> str:
        return "\n".join(spans_to_text(item) for item in self.items)


@dataclass(frozen=True)
class OrderedList:
    """A numbered list of formatted items.

    The digits from the source text are not kept; renderers number
    items by position starting at 1.
    """

    items: tuple[Spans, ...]

    def numbered(self) -> Iterator[tuple[int, Spans]]:
        """Yield (display_number, item) pairs."""
        return enumerate(self.items, start=1)

    @property
    def plain_text(self) -> str:
        return "\n".join(
            f"{number}. {spans_to_text(item)}" for number, item in self.numbered()
        )


@dataclass(frozen=True)
class Paragraph:
    """A single line of body text."""

    text: Spans = ()

    @property
    def plain_text(self) -> str:
        return spans_to_text(self.text)


Block = Union[Heading, Table, UnorderedList, OrderedList, Paragraph]


@dataclass(frozen=True)
class Document:
    """Complete parsed reply, ready for rendering.

    Attributes:
        blocks: Blocks in the order they appeared in the source text
    """

    blocks: tuple[Block, ...] = field(default_factory=tuple)

    @property
    def plain_text(self) -> str:
        """Get all text content without styling."""
        return "\n\n".join(block.plain_text for block in self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
