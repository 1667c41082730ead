"""Public SDK surface for Audia.

This module provides a stable import path for library users.
It re-exports the client, the typed models and the pure pipeline stages.
"""

from __future__ import annotations

from core.config import AudiaConfig
from core.types import DashboardView, FilterCriteria, GenreStat, NormalizerSettings, TrackPlay
from ingest.pipeline import ingest_feed_text, load_feed
from serve.artwork_tasks import ArtworkTaskRegistry
from serve.cover_art import CoverArtClient
from serve.refresh_loop import refresh_once, run_refresh_loop, trigger_refresh
from store.feed_sdk import AudiaClient
from transforms.genre_aggregation import aggregate_genres
from transforms.track_filtering import chart_view, display_view, filter_tracks

__all__ = [
    "ArtworkTaskRegistry",
    "AudiaClient",
    "AudiaConfig",
    "CoverArtClient",
    "DashboardView",
    "FilterCriteria",
    "GenreStat",
    "NormalizerSettings",
    "TrackPlay",
    "aggregate_genres",
    "chart_view",
    "display_view",
    "filter_tracks",
    "ingest_feed_text",
    "load_feed",
    "refresh_once",
    "run_refresh_loop",
    "trigger_refresh",
]
