"""Tests for the IR node types."""

from mediassist.formatting.ir import (
    Document,
    Emphasized,
    Heading,
    OrderedList,
    Paragraph,
    PlainText,
    Table,
    UnorderedList,
)


class TestNodes:
    """Tests for block and span value semantics."""

    def test_structural_equality(self):
        """Test equal trees compare equal."""
        a = Document(blocks=(Paragraph(text=(PlainText("x"),)),))
        b = Document(blocks=(Paragraph(text=(PlainText("x"),)),))

        assert a == b

    def test_span_kind_matters(self):
        """Test plain and emphasized spans with the same text differ."""
        assert PlainText("x") != Emphasized("x")

    def test_order_matters(self):
        """Test equality is order-sensitive."""
        first = Paragraph(text=(PlainText("1"),))
        second = Paragraph(text=(PlainText("2"),))

        assert Document(blocks=(first, second)) != Document(blocks=(second, first))

    def test_document_len_and_iter(self):
        """Test documents behave like read-only sequences of blocks."""
        blocks = (Heading(level=3), Paragraph())
        doc = Document(blocks=blocks)

        assert len(doc) == 2
        assert tuple(doc) == blocks


class TestPlainText:
    """Tests for the plain_text helpers."""

    def test_heading_plain_text(self):
        """Test styling is dropped."""
        heading = Heading(level=3, text=(Emphasized("Food"), PlainText(": after")))

        assert heading.plain_text == "Food: after"

    def test_ordered_list_plain_text_uses_positions(self):
        """Test ordered items are numbered from 1."""
        items = OrderedList(items=((PlainText("a"),), (PlainText("b"),)))

        assert items.plain_text == "1. a\n2. b"

    def test_unordered_list_plain_text(self):
        """Test one line per item."""
        items = UnorderedList(items=((PlainText("a"),), (Emphasized("b"),)))

        assert items.plain_text == "a\nb"

    def test_table_plain_rows(self):
        """Test data cells are flattened to strings."""
        table = Table(
            headers=("Feature", "Details"),
            rows=(((PlainText("Warning"),), (Emphasized("Drowsiness"),)),),
        )

        assert table.plain_rows == [["Warning", "Drowsiness"]]
        assert table.plain_text == "Feature | Details\nWarning | Drowsiness"
