"""Dashboard view assembly.

This module derives everything the presentation layer shows from the
current records and criteria. Views are recomputed on every call and
never cached.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import DEFAULT_HISTORY_LIMIT
from core.types import DashboardView, FilterCriteria, TrackPlay
from transforms.genre_aggregation import aggregate_genres
from transforms.track_filtering import (
    available_dates,
    chart_view,
    display_view,
    now_playing,
    recent_history,
)


def build_dashboard(
    records: Sequence[TrackPlay],
    criteria: FilterCriteria,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> DashboardView:
    """Compute the dashboard for one criteria set.

    Args:
        records: Sorted full record set.
        criteria: Current filter criteria.
        history_limit: Visible entries including "now playing".

    Returns:
        Immutable dashboard view.
    """
    shown = display_view(records, criteria)
    return DashboardView(
        records=tuple(records),
        display_view=tuple(shown),
        now_playing=now_playing(shown),
        recent_history=tuple(recent_history(shown, history_limit)),
        genre_stats=tuple(aggregate_genres(chart_view(records, criteria))),
        available_dates=tuple(available_dates(records, criteria.station)),
        criteria=criteria,
    )
