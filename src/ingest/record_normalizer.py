"""Record normalization for feed rows.

This module builds canonical TrackPlay records from split feed rows.
It resolves timestamps, applies the single-source timezone correction,
and fills field defaults. Bad rows are dropped, never raised.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Sequence

from core.constants import (
    DEFAULT_PLAY_TIME,
    DEFAULT_TITLE,
    HEADER_ARTIST,
    ISO_TIME_SEPARATOR,
    UNKNOWN_GENRE,
    UNORDERED_INSTANT,
)
from core.types import HeaderIndex, NormalizationResult, NormalizerSettings, TrackPlay
from ingest.header_resolver import normalize_header_name
from ingest.timestamp_parsing import parse_instant, to_epoch_millis, to_local


def normalize_rows(
    rows: Sequence[Sequence[str]],
    header: HeaderIndex,
    settings: NormalizerSettings,
) -> NormalizationResult:
    """Normalize every data row of a feed.

    Args:
        rows: Data rows, header excluded.
        header: Resolved header positions.
        settings: Station defaults and display zone.

    Returns:
        Records in row order plus dropped-row accounting.
    """
    records: list[TrackPlay] = []
    for index, row in enumerate(rows):
        record = normalize_row(index, row, header, settings)
        if record is not None:
            records.append(record)
    return NormalizationResult(
        records=tuple(records),
        row_count=len(rows),
        dropped_count=len(rows) - len(records),
    )


def normalize_row(
    index: int,
    row: Sequence[str],
    header: HeaderIndex,
    settings: NormalizerSettings,
) -> TrackPlay | None:
    """Build one record from a data row.

    Args:
        index: Zero-based data row index, used as the record id.
        row: Cells of the row.
        header: Resolved header positions.
        settings: Station defaults and display zone.

    Returns:
        The record, or None when the artist is missing or echoes the header.
    """
    artist = _cell(row, header.artist)
    if not artist or normalize_header_name(artist) == HEADER_ARTIST:
        return None
    station = _cell(row, header.station) or settings.default_station
    raw_played_at = _cell(row, header.played_at)
    play_date, play_time, instant = _resolve_play_time(raw_played_at, station, settings)
    return TrackPlay(
        id=index,
        artist=artist,
        title=_cell(row, header.title) or DEFAULT_TITLE,
        station=station,
        genre=_cell(row, header.genre) or UNKNOWN_GENRE,
        play_date=play_date,
        play_time=play_time,
        instant=instant,
    )


def _resolve_play_time(
    raw_value: str,
    station: str,
    settings: NormalizerSettings,
) -> tuple[str, str, int]:
    """Derive date, time and instant for a raw timestamp.

    Returns:
        ``(play_date, play_time, instant)``; instant is 0 when unparseable.
    """
    moment = parse_instant(raw_value, settings.tzinfo)
    if moment is None:
        play_date, play_time = _split_literal(raw_value)
        return play_date, play_time, UNORDERED_INSTANT
    if station == settings.offset_station and ISO_TIME_SEPARATOR in raw_value:
        moment = moment - timedelta(hours=settings.offset_hours)
    local_moment = to_local(moment, settings.tzinfo)
    return (
        local_moment.strftime("%Y-%m-%d"),
        local_moment.strftime("%H:%M"),
        to_epoch_millis(moment),
    )


def _split_literal(raw_value: str) -> tuple[str, str]:
    """Best-effort date/time split for timestamps no strategy understood."""
    date_part, _, time_part = raw_value.strip().partition(" ")
    return date_part, time_part[:5] or DEFAULT_PLAY_TIME


def _cell(row: Sequence[str], position: int | None) -> str:
    if position is None or position >= len(row):
        return ""
    return row[position].strip()
