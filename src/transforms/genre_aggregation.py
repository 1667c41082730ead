"""Genre distribution aggregation.

This module computes the percentage breakdown shown by the genre chart.
Plays with the unknown genre sentinel are left out of both the slices
and the denominator. Slices under the threshold fold into ``Other``.
Published percentages are apportioned in tenths so they add up to 100.0.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from core.constants import DEFAULT_SMALL_GENRE_THRESHOLD, OTHER_GENRE, UNKNOWN_GENRE
from core.types import GenreStat, TrackPlay

_ONE_DECIMAL = Decimal("0.1")
_TENTHS_IN_WHOLE = 1000


def aggregate_genres(
    records: Iterable[TrackPlay],
    threshold: float = DEFAULT_SMALL_GENRE_THRESHOLD,
) -> list[GenreStat]:
    """Build the genre distribution for a chart view.

    Args:
        records: Chart-view records.
        threshold: Minimum rounded percentage for an individual slice.

    Returns:
        Slices ordered by count descending then name; empty when no
        record has a known genre.
    """
    counts = Counter(record.genre for record in records if record.genre != UNKNOWN_GENRE)
    total = sum(counts.values())
    if total == 0:
        return []
    main_stats: list[GenreStat] = []
    merged: list[tuple[str, int]] = []
    for name, count in counts.items():
        percentage = percentage_of(count, total)
        if percentage < threshold:
            merged.append((name, count))
        else:
            main_stats.append(GenreStat(name=name, count=count, percentage=percentage))
    if merged:
        main_stats.append(_build_other_bucket(merged, total))
    return _apportion_percentages(sorted(main_stats, key=_stat_order), total)


def percentage_of(count: int, total: int) -> float:
    """Return ``count / total`` as a percentage rounded half-up to one decimal."""
    ratio = Decimal(count) * 100 / Decimal(total)
    return float(ratio.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def _apportion_percentages(stats: list[GenreStat], total: int) -> list[GenreStat]:
    """Assign largest-remainder tenths so the slices sum to exactly 100.0.

    Every slice keeps the floor of its share in tenths; the leftover tenths
    go to the largest remainders, ties resolved by slice order.

    Args:
        stats: Slices in display order.
        total: Classified play count.

    Returns:
        Slices with apportioned percentages, order unchanged.
    """
    shares = [divmod(stat.count * _TENTHS_IN_WHOLE, total) for stat in stats]
    tenths = [floor for floor, _ in shares]
    leftover = _TENTHS_IN_WHOLE - sum(tenths)
    by_remainder = sorted(range(len(stats)), key=lambda index: (-shares[index][1], index))
    for index in by_remainder[:leftover]:
        tenths[index] += 1
    return [
        replace(stat, percentage=float(Decimal(share) * _ONE_DECIMAL))
        for stat, share in zip(stats, tenths)
    ]


def _build_other_bucket(merged: list[tuple[str, int]], total: int) -> GenreStat:
    ordered = sorted(merged, key=lambda item: (-item[1], item[0]))
    other_count = sum(count for _, count in ordered)
    return GenreStat(
        name=OTHER_GENRE,
        count=other_count,
        percentage=percentage_of(other_count, total),
        merged_names=tuple(name for name, _ in ordered),
    )


def _stat_order(stat: GenreStat) -> tuple[int, str]:
    return -stat.count, stat.name
