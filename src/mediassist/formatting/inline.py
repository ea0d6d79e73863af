"""Inline formatter: split a line of text into plain and emphasized spans."""

import re

from mediassist.formatting.ir import Emphasized, InlineSpan, PlainText, Spans

# Non-greedy, so "**a** and **b**" yields two separate matches
EMPHASIS_PATTERN = re.compile(r"\*\*(.*?)\*\*")


def format_inline(text: str) -> Spans:
    """Tokenize text into (plain | emphasized) spans.

    Handles:
    - **bold** -> Emphasized
    - everything else -> PlainText

    A ``**`` without a matching close is left in the plain text as-is.
    Empty plain segments between adjacent matches are not emitted.

    Args:
        text: A single line of block text

    Returns:
        Spans in source order
    """
    spans: list[InlineSpan] = []
    pos = 0

    for match in EMPHASIS_PATTERN.finditer(text):
        if match.start() > pos:
            spans.append(PlainText(text[pos : match.start()]))
        spans.append(Emphasized(match.group(1)))
        pos = match.end()

    if pos < len(text):
        spans.append(PlainText(text[pos:]))

    return tuple(spans)
