"""Unit tests for the filter engine and derived views."""

from __future__ import annotations

from typing import Callable

from core.types import FilterCriteria, TrackPlay
from transforms.track_filtering import (
    available_dates,
    chart_view,
    display_view,
    filter_tracks,
    latest_date,
    now_playing,
    recent_history,
)


def _sample(make_track: Callable[..., TrackPlay]) -> list[TrackPlay]:
    return [
        make_track(0, artist="Caio", title="Mar", genre="Rock", play_time="10:05"),
        make_track(1, artist="Bia", title="Luz", genre="Pop", play_time="09:40"),
        make_track(2, artist="Ana", title="Sol", genre="Pop", play_time="09:00"),
        make_track(3, artist="Duda", title="Rua", station="Antena 1", play_time="09:10"),
        make_track(4, artist="Eli", title="Ponte", play_date="2024-01-09", play_time="23:00"),
    ]


def test_filter_tracks_with_neutral_criteria_returns_everything(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Neutral values should not constrain the result."""
    records = _sample(make_track)
    criteria = FilterCriteria(station="any", date="any", hour_bucket="all", genre="any")

    assert filter_tracks(records, criteria) == records


def test_filter_tracks_ands_station_date_and_hour(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Every active criterion should hold for each match."""
    criteria = FilterCriteria(station="Metropolitana FM", date="2024-01-10", hour_bucket="09")

    matched = filter_tracks(_sample(make_track), criteria)

    assert [record.artist for record in matched] == ["Bia", "Ana"]


def test_filter_tracks_search_is_case_insensitive_over_artist_and_title(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Search should match substrings across the artist+title concatenation."""
    records = _sample(make_track)

    assert [r.artist for r in filter_tracks(records, FilterCriteria(search_term="LUZ"))] == ["Bia"]
    assert [r.artist for r in filter_tracks(records, FilterCriteria(search_term="biaL"))] == [
        "Bia"
    ]


def test_filter_tracks_returns_empty_when_nothing_matches(
    make_track: Callable[..., TrackPlay],
) -> None:
    """No record satisfying every criterion should yield an empty subset."""
    criteria = FilterCriteria(station="Antena 1", genre="Rock")

    assert filter_tracks(_sample(make_track), criteria) == []


def test_chart_view_ignores_search_and_genre(make_track: Callable[..., TrackPlay]) -> None:
    """Chart view should keep station/date/hour but drop search and genre."""
    records = _sample(make_track)
    criteria = FilterCriteria(
        station="Metropolitana FM", date="2024-01-10", search_term="sol", genre="Pop"
    )

    assert [record.artist for record in display_view(records, criteria)] == ["Ana"]
    assert [record.artist for record in chart_view(records, criteria)] == ["Caio", "Bia", "Ana"]


def test_now_playing_and_recent_history_split_the_view(
    make_track: Callable[..., TrackPlay],
) -> None:
    """The first record is on air; history shows the following ones up to the limit."""
    view = _sample(make_track)

    assert now_playing(view) == view[0]
    assert recent_history(view, limit=3) == view[1:3]
    assert now_playing([]) is None and recent_history([], limit=10) == []


def test_available_dates_lists_station_dates_newest_first(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Date options should be distinct and restricted to the station."""
    records = _sample(make_track)

    assert available_dates(records, "Metropolitana FM") == ["2024-01-10", "2024-01-09"]
    assert available_dates(records, "Antena 1") == ["2024-01-10"]


def test_latest_date_uses_first_record(make_track: Callable[..., TrackPlay]) -> None:
    """The initial date filter is the date of the newest record."""
    assert latest_date(_sample(make_track)) == "2024-01-10"
    assert latest_date([]) is None
