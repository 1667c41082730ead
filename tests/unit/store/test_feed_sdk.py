"""Unit tests for the SDK client."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AudiaConfig
from core.errors import AudiaExportError
from core.types import FilterCriteria
from store.feed_sdk import AudiaClient
from tests.fixture_paths import feed_fixture


def _client() -> AudiaClient:
    return AudiaClient(AudiaConfig.from_env())


def test_refresh_applies_records_and_selects_newest_date() -> None:
    """The first load should pin the newest date of the default station."""
    client = _client()

    applied = client.refresh(str(feed_fixture("metropolitana_day.csv")))

    assert applied and len(client.state.records) == 3
    assert client.state.criteria == FilterCriteria(station="Metropolitana FM", date="2024-01-10")


def test_refresh_keeps_explicit_any_date() -> None:
    """An explicit "any" date should survive the first load."""
    client = _client()
    client.update_criteria(date="any")

    client.refresh(str(feed_fixture("metropolitana_day.csv")))

    assert client.state.criteria.date == "any"


def test_refresh_failure_keeps_stale_dataset(tmp_path: Path) -> None:
    """A failed refresh should report the error and keep earlier records."""
    client = _client()
    client.refresh(str(feed_fixture("metropolitana_day.csv")))

    applied = client.refresh(str(tmp_path / "gone.csv"))

    assert applied is False
    assert len(client.state.records) == 3 and client.state.last_error is not None


def test_dashboard_exposes_reference_views() -> None:
    """Dashboard should expose now playing, history and the genre split."""
    client = _client()
    client.refresh(str(feed_fixture("metropolitana_day.csv")))

    view = client.dashboard(history_limit=2)

    assert view.now_playing is not None and view.now_playing.artist == "Caio"
    assert [track.artist for track in view.recent_history] == ["Bia"]
    assert [(stat.name, stat.count, stat.percentage) for stat in view.genre_stats] == [
        ("Pop", 2, 66.7),
        ("Rock", 1, 33.3),
    ]


def test_export_pdf_refuses_when_nothing_matches(tmp_path: Path) -> None:
    """Export should refuse an empty display view."""
    client = _client()
    client.refresh(str(feed_fixture("metropolitana_day.csv")))
    client.update_criteria(search_term="no such song")

    with pytest.raises(AudiaExportError):
        client.export_pdf(tmp_path)


def test_export_pdf_writes_current_display_view(tmp_path: Path) -> None:
    """Export should write the filtered playlist to the output directory."""
    client = _client()
    client.refresh(str(feed_fixture("metropolitana_day.csv")))

    document_path = client.export_pdf(tmp_path)

    assert document_path.parent == tmp_path and document_path.suffix == ".pdf"
