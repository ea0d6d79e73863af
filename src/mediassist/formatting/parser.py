"""Markdown parser for converting assistant replies to IR."""

import logging
import re
from typing import Callable, Optional

from mediassist.formatting.inline import format_inline
from mediassist.formatting.ir import (
    Block,
    Document,
    Emphasized,
    Heading,
    OrderedList,
    Paragraph,
    Spans,
    Table,
    UnorderedList,
)

logger = logging.getLogger(__name__)

# ASCII digits only; other Unicode decimals stay paragraph text
ORDERED_ITEM_PATTERN = re.compile(r"^[0-9]+\.")
ORDERED_MARKER_PATTERN = re.compile(r"^[0-9]+\.\s*")

LinePredicate = Callable[[str], bool]


def is_table_row(line: str) -> bool:
    return line.startswith("|")


def is_unordered_item(line: str) -> bool:
    return line.startswith("* ") or line.startswith("- ")


def is_ordered_item(line: str) -> bool:
    return ORDERED_ITEM_PATTERN.match(line) is not None


class LineCursor:
    """Forward cursor over the trimmed lines of a text."""

    def __init__(self, text: str) -> None:
        # Only "\n" breaks lines; a trailing "\r" is removed by strip()
        self._lines = [line.strip() for line in text.split("\n")]
        self._pos = 0

    def __bool__(self) -> bool:
        return self._pos < len(self._lines)

    def peek(self) -> Optional[str]:
        """Return the current line without consuming it."""
        if self._pos < len(self._lines):
            return self._lines[self._pos]
        return None

    def advance(self) -> str:
        """Consume and return the current line."""
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def take_while(self, predicate: LinePredicate) -> list[str]:
        """Consume the contiguous run of lines matching predicate.

        The cursor is left on the first line that does not match, so the
        caller re-classifies it on the next step.
        """
        run: list[str] = []
        while self and predicate(self.peek()):
            run.append(self.advance())
        return run


def split_cells(row: str) -> list[str]:
    """Split a pipe row into trimmed cells, dropping empty segments."""
    return [cell.strip() for cell in row.split("|") if cell.strip()]


def _build_table(run: list[str]) -> Optional[Table]:
    # The second line is the |---| separator and is never inspected
    if len(run) < 2:
        return None
    headers = tuple(split_cells(run[0]))
    rows = tuple(
        tuple(format_inline(cell) for cell in split_cells(row)) for row in run[2:]
    )
    return Table(headers=headers, rows=rows)


def segment(text: str) -> Document:
    """Convert reply text to a Document.

    Lines are classified in priority order (``### ``, ``## ``, ``|``,
    ``* ``/``- ``, ``N.``, other non-empty, blank); tables and lists
    consume the whole contiguous run of lines sharing their predicate.
    Never raises: anything unrecognised becomes a Paragraph.

    Args:
        text: The full reply text

    Returns:
        Document with blocks in source order
    """
    cursor = LineCursor(text)
    blocks: list[Block] = []

    while cursor:
        line = cursor.peek()

        if line.startswith("### "):
            cursor.advance()
            blocks.append(Heading(level=3, text=format_inline(line[4:])))
        elif line.startswith("## "):
            cursor.advance()
            blocks.append(Heading(level=2, text=format_inline(line[3:])))
        elif is_table_row(line):
            run = cursor.take_while(is_table_row)
            table = _build_table(run)
            if table is None:
                logger.debug("Dropping table run of %d line(s)", len(run))
            else:
                blocks.append(table)
        elif is_unordered_item(line):
            run = cursor.take_while(is_unordered_item)
            blocks.append(
                UnorderedList(items=tuple(format_inline(item[2:]) for item in run))
            )
        elif is_ordered_item(line):
            run = cursor.take_while(is_ordered_item)
            blocks.append(
                OrderedList(
                    items=tuple(
                        format_inline(ORDERED_MARKER_PATTERN.sub("", item, count=1))
                        for item in run
                    )
                )
            )
        elif line:
            cursor.advance()
            blocks.append(Paragraph(text=format_inline(line)))
        else:
            cursor.advance()

    return Document(blocks=tuple(blocks))


class MarkdownParser:
    """Parse reply markdown into structured IR and serialize it back."""

    def parse(self, markdown_text: str) -> Document:
        """Convert markdown text to a Document."""
        document = segment(markdown_text)
        logger.debug("Parsed %d block(s)", len(document))
        return document

    def to_plain_text(self, document: Document) -> str:
        """Convert a Document back to plain text."""
        return document.plain_text

    def to_markdown(self, document: Document) -> str:
        """Convert a Document back to the minimal markup it was parsed from.

        Blocks are separated by blank lines so adjacent lists stay apart.
        Ordered items are written with their display numbers.
        """
        chunks: list[str] = []

        for block in document.blocks:
            if isinstance(block, Heading):
                chunks.append(f"{'#' * block.level} {self._spans(block.text)}")
            elif isinstance(block, Table):
                lines = [self._row(block.headers)]
                lines.append(self._row(["---"] * len(block.headers)))
                for row in block.rows:
                    lines.append(self._row([self._spans(cell) for cell in row]))
                chunks.append("\n".join(lines))
            elif isinstance(block, UnorderedList):
                chunks.append(
                    "\n".join(f"* {self._spans(item)}" for item in block.items)
                )
            elif isinstance(block, OrderedList):
                chunks.append(
                    "\n".join(
                        f"{number}. {self._spans(item)}"
                        for number, item in block.numbered()
                    )
                )
            elif isinstance(block, Paragraph):
                chunks.append(self._spans(block.text))
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        return "\n\n".join(chunks)

    @staticmethod
    def _spans(spans: Spans) -> str:
        return "".join(
            f"**{span.text}**" if isinstance(span, Emphasized) else span.text
            for span in spans
        )

    @staticmethod
    def _row(cells) -> str:
        return "| " + " | ".join(cells) + " |"
