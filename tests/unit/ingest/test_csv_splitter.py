"""Unit tests for the quote-aware CSV splitter."""

from __future__ import annotations

from ingest.csv_splitter import split_line, split_rows


def test_split_rows_discards_blank_lines() -> None:
    """Row count should equal the number of non-blank lines."""
    text = "a,b\r\n\r\nc,d\n   \ne,f\n"

    rows = split_rows(text)

    assert rows == [["a", "b"], ["c", "d"], ["e", "f"]]


def test_split_line_keeps_quoted_comma_in_one_cell() -> None:
    """A quoted "a, b" value should stay one cell without its quotes."""
    cells = split_line('x,"a, b",y')

    assert cells == ["x", "a, b", "y"]


def test_split_line_trims_cells_and_keeps_empty_ones() -> None:
    """Cells should be trimmed and empty positions preserved."""
    cells = split_line(" Ana , ,Pop ,")

    assert cells == ["Ana", "", "Pop", ""]


def test_split_rows_truncates_multiline_quoted_field() -> None:
    """Quoted fields cannot span lines; each line is split on its own."""
    rows = split_rows('Ana,"first\nsecond",Pop')

    assert rows == [["Ana", "first"], ["second,Pop"]]


def test_split_rows_returns_empty_for_blank_text() -> None:
    """Whitespace-only text should produce no rows."""
    assert split_rows("\n \r\n") == []
