"""Chronological ordering transform.

This module orders records newest first for "now playing" selection.
"""

from __future__ import annotations

from typing import Iterable

from core.types import TrackPlay


def sort_chronologically(records: Iterable[TrackPlay]) -> list[TrackPlay]:
    """Sort records by descending instant.

    The sort is stable: ties keep their input order, and records with the
    unordered sentinel instant go last in input order. The sentinel rule
    wins over the instant value, so a pre-1970 record with a negative
    instant still sorts ahead of unordered ones.

    Args:
        records: Normalized records in feed row order.

    Returns:
        New list ordered newest first.
    """
    return sorted(records, key=_sort_key, reverse=True)


def _sort_key(record: TrackPlay) -> tuple[bool, int]:
    return record.is_ordered, record.instant
