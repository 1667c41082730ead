"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and serving layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from datetime import tzinfo as TimeZone

from core.constants import (
    DEFAULT_HOUR_BUCKET,
    DEFAULT_OFFSET_HOURS,
    DEFAULT_OFFSET_STATION,
    DEFAULT_STATION,
    UNORDERED_INSTANT,
)


@dataclass(frozen=True)
class HeaderIndex:
    """Column positions of the canonical feed fields.

    Attributes:
        artist: Position of the artist column, or None when absent.
        title: Position of the track title column, or None when absent.
        played_at: Position of the raw timestamp column, or None when absent.
        station: Position of the station column, or None when absent.
        genre: Position of the genre column, or None when absent.
    """

    artist: int | None = None
    title: int | None = None
    played_at: int | None = None
    station: int | None = None
    genre: int | None = None


@dataclass(frozen=True)
class TrackPlay:
    """Canonical play-log record built by the record normalizer.

    Attributes:
        id: Row sequence index, stable within one ingestion pass only.
        artist: Performing artist.
        title: Track title.
        station: Station label the play was logged on.
        genre: Genre label, or the unknown sentinel.
        play_date: Calendar date as ``YYYY-MM-DD``.
        play_time: Time of day as ``HH:MM``.
        instant: Epoch milliseconds, or 0 when the timestamp was unparseable.
    """

    id: int
    artist: str
    title: str
    station: str
    genre: str
    play_date: str
    play_time: str
    instant: int = UNORDERED_INSTANT

    @property
    def hour_bucket(self) -> str:
        """Two-digit hour used by the hour filter."""
        hour = self.play_time[:2]
        return hour if len(hour) == 2 and hour.isdigit() else DEFAULT_HOUR_BUCKET

    @property
    def is_ordered(self) -> bool:
        """Whether the record carries a resolved instant."""
        return self.instant != UNORDERED_INSTANT


@dataclass(frozen=True)
class GenreStat:
    """One slice of the genre distribution.

    Attributes:
        name: Genre label, or ``Other`` for the consolidated bucket.
        count: Number of plays in the slice.
        percentage: Share of classified plays, one decimal place.
        merged_names: Genres folded into ``Other``; empty for real genres.
    """

    name: str
    count: int
    percentage: float
    merged_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterCriteria:
    """Independent predicates ANDed by the filter engine.

    ``None``, empty strings, ``"any"`` and ``"all"`` are neutral values.

    Attributes:
        station: Exact station match.
        date: Exact ``YYYY-MM-DD`` match.
        hour_bucket: Two-digit hour match.
        search_term: Case-insensitive substring over artist and title.
        genre: Exact genre match.
    """

    station: str | None = None
    date: str | None = None
    hour_bucket: str | None = None
    search_term: str = ""
    genre: str | None = None


@dataclass(frozen=True)
class NormalizerSettings:
    """Per-deployment knobs used while building track records.

    Attributes:
        default_station: Station used when the column is absent or empty.
        offset_station: The one source whose ISO timestamps are skewed.
        offset_hours: Hours subtracted from that source's ISO instants.
        tzinfo: Zone used to localize naive timestamps and derive dates.
    """

    default_station: str = DEFAULT_STATION
    offset_station: str = DEFAULT_OFFSET_STATION
    offset_hours: int = DEFAULT_OFFSET_HOURS
    tzinfo: TimeZone | None = None


@dataclass(frozen=True)
class NormalizationResult:
    """Records built from one feed body plus row accounting.

    Attributes:
        records: Normalized records in feed row order.
        row_count: Number of data rows seen, header excluded.
        dropped_count: Rows dropped by the artist guard.
    """

    records: tuple[TrackPlay, ...]
    row_count: int
    dropped_count: int


@dataclass(frozen=True)
class FeedSnapshot:
    """One applied ingestion pass.

    Attributes:
        sequence: Refresh request sequence number that produced the data.
        records: Chronologically sorted records.
        loaded_at: UTC time the snapshot was applied.
    """

    sequence: int
    records: tuple[TrackPlay, ...]
    loaded_at: datetime


@dataclass(frozen=True)
class DashboardView:
    """Everything the presentation layer renders for one criteria set.

    Attributes:
        records: Full sorted record set.
        display_view: Records matching every active criterion.
        now_playing: Most recent record in the display view.
        recent_history: Following records, up to the history limit.
        genre_stats: Genre distribution over the chart view.
        available_dates: Date options for the selected station.
        criteria: Criteria the view was computed with.
    """

    records: tuple[TrackPlay, ...]
    display_view: tuple[TrackPlay, ...]
    now_playing: TrackPlay | None
    recent_history: tuple[TrackPlay, ...]
    genre_stats: tuple[GenreStat, ...]
    available_dates: tuple[str, ...]
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
