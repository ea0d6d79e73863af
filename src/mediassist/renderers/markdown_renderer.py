"""Markdown / plain text renderer."""

from pathlib import Path

from mediassist.formatting.ir import Document
from mediassist.formatting.parser import MarkdownParser
from mediassist.renderers.base import Renderer


class MarkdownRenderer(Renderer):
    """Renderer for markdown (.md) and plain text (.txt) files.

    The output is the minimal markup the parser accepts, so it can be
    re-parsed or read in any text editor.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".txt")

    def write(self, document: Document, path: Path) -> None:
        """Write the document as markdown text."""
        content = MarkdownParser().to_markdown(document)
        path.write_text(content + "\n", encoding="utf-8")
