"""Quote-aware line and cell splitting for feed bodies.

This module turns raw comma-separated text into rows of trimmed cells.
Quoted fields cannot span lines; an embedded line break truncates the
field at the line boundary.
"""

from __future__ import annotations

import re

_LINE_BREAK_PATTERN = re.compile(r"\r?\n")
_QUOTE = '"'
_SEPARATOR = ","


def split_rows(text: str) -> list[list[str]]:
    """Split feed text into rows of cells.

    Args:
        text: Raw delimited text.

    Returns:
        One cell list per non-blank line, in line order.
    """
    return [split_line(line) for line in _LINE_BREAK_PATTERN.split(text) if line.strip()]


def split_line(line: str) -> list[str]:
    """Split one line into trimmed cells.

    A double quote toggles quoting and is not copied; commas separate
    cells only outside quotes.

    Args:
        line: Single line without its line break.

    Returns:
        Cells in column order.
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    for character in line:
        if character == _QUOTE:
            in_quotes = not in_quotes
        elif character == _SEPARATOR and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(character)
    cells.append("".join(current).strip())
    return cells
