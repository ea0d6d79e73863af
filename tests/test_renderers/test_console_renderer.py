"""Tests for the rich console renderer."""

import io

import pytest
from rich.console import Console
from rich.rule import Rule
from rich.table import Table as RichTable
from rich.text import Text

from mediassist.formatting.ir import Emphasized, PlainText
from mediassist.formatting.parser import segment
from mediassist.renderers.console_renderer import (
    EMPHASIS_STYLE,
    ConsoleRenderer,
    spans_to_rich,
)


@pytest.fixture
def console() -> Console:
    """A console that records into a string buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None)


class TestSpansToRich:
    """Tests for span conversion."""

    def test_emphasis_styled(self):
        """Test emphasized spans carry the emphasis style."""
        text = spans_to_rich((Emphasized("Warning"), PlainText(": rare")))

        assert text.plain == "Warning: rare"
        assert text.spans[0].style == EMPHASIS_STYLE
        assert (text.spans[0].start, text.spans[0].end) == (0, 7)


class TestConsoleRenderer:
    """Tests for the ConsoleRenderer class."""

    def test_one_renderable_per_heading_and_item(self, console: Console):
        """Test lists expand to one line per item."""
        renderables = ConsoleRenderer(console).to_renderables(
            segment("## Title\n* a\n* b\nBody")
        )

        assert len(renderables) == 4
        assert isinstance(renderables[0], Rule)
        assert isinstance(renderables[3], Text)

    def test_table_is_rich_table(self, console: Console):
        """Test tables map to rich tables with one column per header."""
        renderables = ConsoleRenderer(console).to_renderables(
            segment("| A | B |\n|---|---|\n| 1 | 2 |")
        )
        grid = renderables[0]

        assert isinstance(grid, RichTable)
        assert [column.header for column in grid.columns] == ["A", "B"]
        assert grid.row_count == 1

    def test_render_output(self, console: Console, sample_reply: str):
        """Test the printed output carries headings, cells and numbering."""
        ConsoleRenderer(console).render(segment(sample_reply))
        output = console.file.getvalue()

        assert "Conditions Treated" in output
        assert "• Nausea: Calms the stomach." in output
        assert "Best Time" in output
        assert "1. Slice fresh ginger." in output
        assert "2. Steep for 10 minutes." in output
        assert "Disclaimer" in output

    def test_render_without_disclaimer(self, console: Console):
        """Test the disclaimer panel can be switched off."""
        ConsoleRenderer(console, include_disclaimer=False).render(segment("Hello"))

        assert console.file.getvalue().strip() == "Hello"
