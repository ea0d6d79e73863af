"""Microsoft Word (.docx) renderer."""

from pathlib import Path

from docx import Document as WordDocument
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

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
from mediassist.renderers.base import Renderer


HEADER_BG_COLOR = RGBColor(240, 253, 250)  # Light teal
HEADER_TEXT_COLOR = RGBColor(15, 118, 110)  # Teal
DISCLAIMER_COLOR = RGBColor(146, 64, 14)  # Amber


class DOCXRenderer(Renderer):
    """Renderer for Microsoft Word (.docx) files.

    Uses python-docx with run-level bold for emphasized spans, Word
    heading styles for headings and a grid table for tables.
    """

    def __init__(self, include_disclaimer: bool = True) -> None:
        self.include_disclaimer = include_disclaimer

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def write(self, document: Document, path: Path) -> None:
        """Write the parsed reply to a DOCX file."""
        doc = WordDocument()

        style = doc.styles["Normal"]
        font = style.font
        font.name = "Calibri"
        font.size = Pt(11)

        for block in document.blocks:
            if isinstance(block, Heading):
                para = doc.add_heading(level=block.level)
                self._add_runs(para, block.text)
            elif isinstance(block, Table):
                self._add_table(doc, block)
            elif isinstance(block, UnorderedList):
                for item in block.items:
                    para = doc.add_paragraph(style="List Bullet")
                    self._add_runs(para, item)
            elif isinstance(block, OrderedList):
                # Numbered by hand so numbering restarts for every list
                for number, item in block.numbered():
                    para = doc.add_paragraph()
                    para.add_run(f"{number}. ").bold = True
                    self._add_runs(para, item)
            elif isinstance(block, Paragraph):
                para = doc.add_paragraph()
                self._add_runs(para, block.text)
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        if self.include_disclaimer:
            para = doc.add_paragraph()
            run = para.add_run(DISCLAIMER)
            run.italic = True
            run.font.size = Pt(9)
            run.font.color.rgb = DISCLAIMER_COLOR

        doc.save(path)

    def _add_runs(self, para, spans: Spans) -> None:
        """Append one run per span, bold for emphasized spans."""
        for span in spans:
            run = para.add_run(span.text)
            run.bold = isinstance(span, Emphasized)

    def _add_table(self, doc, table: Table) -> None:
        """Add a grid table with a shaded header row."""
        cols = max([len(table.headers)] + [len(row) for row in table.rows])
        if cols == 0:
            return

        grid = doc.add_table(rows=1 + len(table.rows), cols=cols)
        grid.style = "Table Grid"
        grid.alignment = WD_TABLE_ALIGNMENT.CENTER

        for i, header in enumerate(table.headers):
            cell = grid.rows[0].cells[i]
            run = cell.paragraphs[0].add_run(header)
            run.bold = True
            run.font.color.rgb = HEADER_TEXT_COLOR
            self._set_cell_shading(cell, HEADER_BG_COLOR)

        for r, row in enumerate(table.rows, start=1):
            for c, spans in enumerate(row):
                self._add_runs(grid.rows[r].cells[c].paragraphs[0], spans)

        # Add spacing after
        doc.add_paragraph()

    def _set_cell_shading(self, cell, color: RGBColor) -> None:
        """Set background color for a table cell."""
        shading_elm = OxmlElement("w:shd")
        shading_elm.set(qn("w:val"), "clear")
        shading_elm.set(qn("w:fill"), f"{color[0]:02X}{color[1]:02X}{color[2]:02X}")
        cell._tc.get_or_add_tcPr().append(shading_elm)
