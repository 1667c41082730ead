"""Track filtering helpers.

This module applies FilterCriteria predicates to record sequences and
derives the named views consumed by the presentation layer. Every
function is pure and preserves input order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from core.constants import ALL_HOURS, ANY_VALUE
from core.types import FilterCriteria, TrackPlay

_NEUTRAL_VALUES = (None, "", ANY_VALUE, ALL_HOURS)


def filter_tracks(records: Sequence[TrackPlay], criteria: FilterCriteria) -> list[TrackPlay]:
    """Filter records using every active criterion.

    Args:
        records: Input records.
        criteria: Filter constraints; neutral fields match everything.

    Returns:
        Matching records in input order.
    """
    return [record for record in records if matches(record, criteria)]


def matches(record: TrackPlay, criteria: FilterCriteria) -> bool:
    """Return whether a record satisfies every active criterion."""
    if is_active(criteria.station) and record.station != criteria.station:
        return False
    if is_active(criteria.date) and record.play_date != criteria.date:
        return False
    if is_active(criteria.hour_bucket) and record.hour_bucket != criteria.hour_bucket:
        return False
    if is_active(criteria.genre) and record.genre != criteria.genre:
        return False
    if criteria.search_term:
        haystack = (record.artist + record.title).lower()
        if criteria.search_term.lower() not in haystack:
            return False
    return True


def is_active(value: str | None) -> bool:
    """Return whether a criterion value constrains the result."""
    return value not in _NEUTRAL_VALUES


def display_view(records: Sequence[TrackPlay], criteria: FilterCriteria) -> list[TrackPlay]:
    """Records shown in the track list: all criteria active."""
    return filter_tracks(records, criteria)


def chart_view(records: Sequence[TrackPlay], criteria: FilterCriteria) -> list[TrackPlay]:
    """Records fed to the genre chart.

    Search term and genre are ignored so the chart keeps its other
    slices while the user types a search or picks a single genre.
    """
    return filter_tracks(records, replace(criteria, search_term="", genre=None))


def now_playing(view: Sequence[TrackPlay]) -> TrackPlay | None:
    """Return the newest record of a sorted view, if any."""
    return view[0] if view else None


def recent_history(view: Sequence[TrackPlay], limit: int) -> list[TrackPlay]:
    """Return the records following "now playing".

    Args:
        view: Sorted display view.
        limit: Total visible entries, "now playing" included.

    Returns:
        Up to ``limit - 1`` records after the first.
    """
    return list(view[1:max(limit, 1)])


def available_dates(records: Sequence[TrackPlay], station: str | None = None) -> list[str]:
    """List distinct play dates, newest first.

    Args:
        records: Input records.
        station: Optional station restriction.

    Returns:
        Sorted distinct non-empty dates.
    """
    dates = {
        record.play_date
        for record in records
        if record.play_date and (not is_active(station) or record.station == station)
    }
    return sorted(dates, reverse=True)


def latest_date(records: Sequence[TrackPlay]) -> str | None:
    """Return the date of the newest record, used as the initial date filter."""
    first = now_playing(records)
    return first.play_date if first is not None and first.play_date else None
