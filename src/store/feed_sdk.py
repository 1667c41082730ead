"""Python SDK for monitor operations.

This module exposes high-level APIs for loading the feed, refreshing
the current dataset, reading dashboard views and exporting playlists.
"""

from __future__ import annotations

from pathlib import Path

from core.config import AudiaConfig
from core.constants import DEFAULT_HISTORY_LIMIT
from core.errors import AudiaFeedError, AudiaIngestError
from core.types import DashboardView, FilterCriteria, GenreStat, TrackPlay
from ingest.feed_reader import read_feed_text
from ingest.pipeline import ingest_feed_text
from serve.dashboard import build_dashboard
from store.monitor_state import MonitorState
from store.playlist_export import export_playlist_pdf
from transforms.genre_aggregation import aggregate_genres
from transforms.track_filtering import (
    chart_view,
    display_view,
    filter_tracks,
    latest_date,
)


class AudiaClient:
    """Primary SDK entry point for monitor workflows."""

    def __init__(
        self,
        config: AudiaConfig | None = None,
        state: MonitorState | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            state: Optional pre-built state; defaults to the configured station.
        """
        self._config = config or AudiaConfig.from_env()
        self._state = state or MonitorState(FilterCriteria(station=self._config.default_station))

    @property
    def config(self) -> AudiaConfig:
        return self._config

    @property
    def state(self) -> MonitorState:
        return self._state

    def fetch_text(self, source: str | None = None) -> str:
        """Read the raw feed body.

        Args:
            source: Feed URL or local CSV path; None uses the configured feed.

        Returns:
            Feed text including its header row.

        Raises:
            AudiaFeedError: If the feed cannot be read.
        """
        return read_feed_text(source, self._config)

    def ingest_text(self, text: str) -> list[TrackPlay]:
        """Normalize and sort a feed body with the configured settings.

        Raises:
            AudiaIngestError: If the feed body cannot be parsed.
        """
        return ingest_feed_text(text, self._config.normalizer_settings())

    def fetch_records(self, source: str | None = None) -> list[TrackPlay]:
        """Run one ingestion pass without touching the current state.

        Args:
            source: Feed URL or local CSV path; None uses the configured feed.

        Returns:
            Sorted records.

        Raises:
            AudiaFeedError: If the feed cannot be read.
            AudiaIngestError: If the feed body cannot be parsed.
        """
        return self.ingest_text(self.fetch_text(source))

    def refresh(self, source: str | None = None) -> bool:
        """Fetch the feed and install the result as the current dataset.

        A failed refresh keeps the previous dataset and is reported once
        through the state's last error.

        Args:
            source: Feed URL or local CSV path.

        Returns:
            True when a new snapshot was applied.
        """
        sequence = self._state.begin_refresh()
        try:
            records = self.fetch_records(source)
        except (AudiaFeedError, AudiaIngestError) as error:
            self._state.fail_refresh(sequence, error)
            return False
        return self.apply_records(sequence, records)

    def apply_records(self, sequence: int, records: list[TrackPlay]) -> bool:
        """Apply a completed pass and pick a default date on first load.

        Args:
            sequence: Sequence number from ``state.begin_refresh``.
            records: Sorted records of that pass.

        Returns:
            True when applied, False when discarded as stale.
        """
        applied = self._state.apply_snapshot(sequence, records)
        if applied:
            self._select_default_date()
        return applied

    def update_criteria(self, **changes: object) -> FilterCriteria:
        return self._state.update_criteria(**changes)

    def dashboard(self, history_limit: int = DEFAULT_HISTORY_LIMIT) -> DashboardView:
        """Build the dashboard for the current records and criteria."""
        return build_dashboard(self._state.records, self._state.criteria, history_limit)

    def genre_stats(self) -> list[GenreStat]:
        """Genre distribution over the current chart view."""
        return aggregate_genres(chart_view(self._state.records, self._state.criteria))

    def export_pdf(self, output_dir: str | Path) -> Path:
        """Export the current display view as a PDF playlist.

        Args:
            output_dir: Destination directory.

        Returns:
            Written document path.

        Raises:
            AudiaExportError: If no track matches the current criteria.
        """
        criteria = self._state.criteria
        view = display_view(self._state.records, criteria)
        return export_playlist_pdf(
            view,
            criteria,
            Path(output_dir).expanduser(),
            genre_stats=self.genre_stats(),
        )

    def _select_default_date(self) -> None:
        """Pin the newest play date of the selected station when no date was chosen.

        An explicit ``"any"`` date is a choice and is left alone.
        """
        criteria = self._state.criteria
        if criteria.date is not None:
            return
        station_filter = FilterCriteria(station=criteria.station)
        station_records = filter_tracks(self._state.records, station_filter)
        newest = latest_date(station_records) or latest_date(self._state.records)
        if newest is not None:
            self._state.update_criteria(date=newest)
