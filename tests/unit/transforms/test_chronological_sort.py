"""Unit tests for chronological ordering."""

from __future__ import annotations

from typing import Callable

from core.types import TrackPlay
from transforms.chronological_sort import sort_chronologically


def test_sort_chronologically_orders_newest_first(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Records should be non-increasing in instant."""
    records = [make_track(0, instant=100), make_track(1, instant=300), make_track(2, instant=200)]

    ordered = sort_chronologically(records)

    assert [record.instant for record in ordered] == [300, 200, 100]


def test_sort_chronologically_keeps_row_order_on_ties(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Equal instants should keep their original row order."""
    records = [
        make_track(0, instant=200),
        make_track(1, instant=500),
        make_track(2, instant=200),
        make_track(3, instant=200),
    ]

    ordered = sort_chronologically(records)

    assert [record.id for record in ordered] == [1, 0, 2, 3]


def test_sort_chronologically_puts_unordered_records_last(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Sentinel instants should trail in input order."""
    records = [
        make_track(0, instant=0),
        make_track(1, instant=100),
        make_track(2, instant=0),
        make_track(3, instant=50),
    ]

    ordered = sort_chronologically(records)

    assert [record.id for record in ordered] == [1, 3, 0, 2]


def test_sort_chronologically_returns_new_list(make_track: Callable[..., TrackPlay]) -> None:
    """Sorting should not reorder the caller's sequence."""
    records = [make_track(0, instant=1), make_track(1, instant=2)]

    sort_chronologically(records)

    assert [record.id for record in records] == [0, 1]


def test_sort_chronologically_keeps_sentinel_below_negative_instants(
    make_track: Callable[..., TrackPlay],
) -> None:
    """Unordered records should trail even records dated before 1970."""
    records = [make_track(0, instant=0), make_track(1, instant=-3_600_000)]

    ordered = sort_chronologically(records)

    assert [record.id for record in ordered] == [1, 0]
