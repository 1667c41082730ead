"""Unit tests for genre aggregation."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from core.types import GenreStat, TrackPlay
from transforms.genre_aggregation import aggregate_genres, percentage_of


def _tracks_with_genres(
    make_track: Callable[..., TrackPlay],
    genre_counts: dict[str, int],
) -> list[TrackPlay]:
    tracks: list[TrackPlay] = []
    for genre, count in genre_counts.items():
        for _ in range(count):
            tracks.append(make_track(len(tracks), genre=genre))
    return tracks


def test_aggregate_genres_reference_distribution(make_track: Callable[..., TrackPlay]) -> None:
    """Two Pop plays and one Rock play should split 66.7 / 33.3."""
    tracks = _tracks_with_genres(make_track, {"Pop": 2, "Rock": 1})

    stats = aggregate_genres(tracks)

    assert stats == [
        GenreStat(name="Pop", count=2, percentage=66.7),
        GenreStat(name="Rock", count=1, percentage=33.3),
    ]


def test_aggregate_genres_excludes_unknown_from_denominator(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Unknown plays should affect neither slices nor percentages."""
    tracks = _tracks_with_genres(make_track, {"Unknown": 3, "Pop": 1})

    assert aggregate_genres(tracks) == [GenreStat(name="Pop", count=1, percentage=100.0)]


def test_aggregate_genres_returns_empty_without_known_genres(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Only unknown genres, or no records, means nothing to chart."""
    assert aggregate_genres(_tracks_with_genres(make_track, {"Unknown": 4})) == []
    assert aggregate_genres([]) == []


def test_aggregate_genres_threshold_is_inclusive_at_three_percent(
    make_track: Callable[..., TrackPlay],
) -> None:
    """2.9% folds into Other while exactly 3.0% stays an individual slice."""
    tracks = _tracks_with_genres(make_track, {"Pop": 941, "Jazz": 30, "Reggae": 29})

    stats = aggregate_genres(tracks)

    assert [stat.name for stat in stats] == ["Pop", "Jazz", "Other"]
    assert stats[1].percentage == 3.0
    assert stats[2] == GenreStat(name="Other", count=29, percentage=2.9, merged_names=("Reggae",))


def test_aggregate_genres_lists_merged_names_by_count(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Merged names should follow descending count, then name."""
    tracks = _tracks_with_genres(make_track, {"Pop": 200, "Samba": 1, "Funk": 2, "Axe": 2})

    other = aggregate_genres(tracks)[-1]

    assert other.name == "Other" and other.count == 5
    assert other.merged_names == ("Axe", "Funk", "Samba")


def test_aggregate_genres_breaks_count_ties_by_name(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Equal counts should order alphabetically for determinism."""
    tracks = _tracks_with_genres(make_track, {"Rock": 1, "Jazz": 1, "MPB": 1})

    assert [stat.name for stat in aggregate_genres(tracks)] == ["Jazz", "MPB", "Rock"]


def test_aggregate_genres_percentages_sum_to_one_hundred(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Rounded percentages should add up to 100 within rounding tolerance."""
    tracks = _tracks_with_genres(
        make_track, {"Pop": 7, "Rock": 5, "MPB": 3, "Jazz": 1, "Samba": 1, "Unknown": 9}
    )

    total = sum(stat.percentage for stat in aggregate_genres(tracks))

    assert abs(total - 100.0) <= 0.5


def test_aggregate_genres_many_small_slices_sum_to_one_hundred(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Thirty single-play genres should still add up to exactly 100.0."""
    tracks = _tracks_with_genres(make_track, {f"Genre {index:02d}": 1 for index in range(30)})

    stats = aggregate_genres(tracks)

    assert len(stats) == 30 and all(not stat.merged_names for stat in stats)
    assert sum(Decimal(str(stat.percentage)) for stat in stats) == Decimal("100.0")
    assert [stat.percentage for stat in stats[:11]] == [3.4] * 10 + [3.3]


def test_aggregate_genres_apportions_equal_thirds(
    make_track: Callable[..., TrackPlay],
) -> None:
    """The leftover tenth should go to the first slice in display order."""
    tracks = _tracks_with_genres(make_track, {"Rock": 1, "Jazz": 1, "MPB": 1})

    stats = aggregate_genres(tracks)

    assert [(stat.name, stat.percentage) for stat in stats] == [
        ("Jazz", 33.4),
        ("MPB", 33.3),
        ("Rock", 33.3),
    ]


def test_percentage_of_rounds_half_up() -> None:
    """Percentages should round half-up to one decimal place."""
    assert percentage_of(1, 8) == 12.5
    assert percentage_of(1, 16) == 6.3
    assert percentage_of(2, 3) == 66.7
