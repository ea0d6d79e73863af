"""Terminal renderer built on rich."""

from typing import Optional

from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table as RichTable
from rich.text import Text

from mediassist.formatting.ir import (
    Document,
    Emphasized,
    Heading,
    OrderedList,
    Paragraph,
    Spans,
    Table,
    UnorderedList,
)
from mediassist.llm.prompts import DISCLAIMER

EMPHASIS_STYLE = "bold dark_cyan"
HEADING_STYLE = "bold cyan"
BULLET = "• "


def spans_to_rich(spans: Spans) -> Text:
    """Convert inline spans into a styled rich Text."""
    text = Text()
    for span in spans:
        if isinstance(span, Emphasized):
            text.append(span.text, style=EMPHASIS_STYLE)
        else:
            text.append(span.text)
    return text


class ConsoleRenderer:
    """Render a parsed reply to the terminal."""

    def __init__(
        self,
        console: Optional[Console] = None,
        include_disclaimer: bool = True,
    ) -> None:
        self.console = console or Console()
        self.include_disclaimer = include_disclaimer

    def to_renderables(self, document: Document) -> list[RenderableType]:
        """Map every block to a rich renderable, in document order."""
        renderables: list[RenderableType] = []

        for block in document.blocks:
            if isinstance(block, Heading):
                title = spans_to_rich(block.text)
                title.stylize(HEADING_STYLE)
                if block.level == 2:
                    renderables.append(Rule(title, align="left", style="cyan"))
                else:
                    renderables.append(Padding(title, (1, 0, 0, 0)))
            elif isinstance(block, Table):
                grid = RichTable(header_style=HEADING_STYLE, show_lines=True)
                for header in block.headers:
                    grid.add_column(header)
                for row in block.rows:
                    grid.add_row(*(spans_to_rich(cell) for cell in row))
                renderables.append(grid)
            elif isinstance(block, UnorderedList):
                for item in block.items:
                    line = Text(BULLET, style="cyan")
                    line.append_text(spans_to_rich(item))
                    renderables.append(Padding(line, (0, 0, 0, 2)))
            elif isinstance(block, OrderedList):
                for number, item in block.numbered():
                    line = Text(f"{number}. ", style=HEADING_STYLE)
                    line.append_text(spans_to_rich(item))
                    renderables.append(Padding(line, (0, 0, 0, 2)))
            elif isinstance(block, Paragraph):
                renderables.append(spans_to_rich(block.text))
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        return renderables

    def render(self, document: Document) -> None:
        """Print the document, followed by the disclaimer panel."""
        for renderable in self.to_renderables(document):
            self.console.print(renderable)

        if self.include_disclaimer:
            self.console.print(Panel(Text(DISCLAIMER), border_style="yellow"))
