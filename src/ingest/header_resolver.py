"""Header row resolution.

This module maps a feed header row onto canonical field positions.
Missing columns resolve to None so normalization can fall back to defaults.
"""

from __future__ import annotations

import unicodedata
from typing import Sequence

from core.constants import (
    HEADER_ARTIST,
    HEADER_GENRE,
    HEADER_PLAYED_AT,
    HEADER_STATION,
    HEADER_TITLE,
)
from core.types import HeaderIndex

_BYTE_ORDER_MARK = "\ufeff"


def normalize_header_name(name: str) -> str:
    """Lowercase a header cell and strip diacritics.

    Args:
        name: Raw header cell.

    Returns:
        Comparable header token, e.g. ``Gênero`` becomes ``genero``.
    """
    decomposed = unicodedata.normalize("NFKD", name.replace(_BYTE_ORDER_MARK, ""))
    stripped = "".join(
        character for character in decomposed if not unicodedata.combining(character)
    )
    return stripped.strip().lower()


def resolve_header(cells: Sequence[str]) -> HeaderIndex:
    """Resolve canonical field positions from header cells.

    Args:
        cells: First row of the feed.

    Returns:
        Header index with None for every column not found.
    """
    positions: dict[str, int] = {}
    for position, cell in enumerate(cells):
        positions.setdefault(normalize_header_name(cell), position)
    return HeaderIndex(
        artist=positions.get(HEADER_ARTIST),
        title=positions.get(HEADER_TITLE),
        played_at=positions.get(HEADER_PLAYED_AT),
        station=positions.get(HEADER_STATION),
        genre=positions.get(HEADER_GENRE),
    )
