"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from datetime import timezone
from pathlib import Path
from typing import Callable

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
for _import_root in (_PROJECT_ROOT / "src", _PROJECT_ROOT):
    if str(_import_root) not in sys.path:
        sys.path.insert(0, str(_import_root))

from core.types import NormalizerSettings, TrackPlay  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_audia_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer AUDIA_* variables out of test runs."""
    for variable_name in (
        "AUDIA_FEED_URL",
        "AUDIA_REFRESH_INTERVAL",
        "AUDIA_REQUEST_TIMEOUT",
        "AUDIA_DEFAULT_STATION",
        "AUDIA_OFFSET_STATION",
        "AUDIA_OFFSET_HOURS",
    ):
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.setenv("AUDIA_TIMEZONE", "UTC")


@pytest.fixture
def utc_settings() -> NormalizerSettings:
    """Normalizer settings pinned to UTC for deterministic dates."""
    return NormalizerSettings(tzinfo=timezone.utc)


@pytest.fixture
def make_track() -> Callable[..., TrackPlay]:
    """Factory for TrackPlay records with sensible defaults."""

    def _make_track(index: int, **overrides: object) -> TrackPlay:
        values: dict[str, object] = {
            "id": index,
            "artist": f"Artist {index}",
            "title": f"Title {index}",
            "station": "Metropolitana FM",
            "genre": "Pop",
            "play_date": "2024-01-10",
            "play_time": "08:00",
            "instant": 1_704_873_600_000 + index * 60_000,
        }
        values.update(overrides)
        return TrackPlay(**values)  # type: ignore[arg-type]

    return _make_track
