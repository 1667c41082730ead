"""Cover-art lookup for displayed tracks.

This module queries the iTunes search API for a track's artwork. Lookups
are best effort: any failure yields "no artwork" instead of an error.
"""

from __future__ import annotations

from typing import Any

import requests

from core.constants import (
    COVER_ART_DISPLAY_SIZE,
    COVER_ART_SEARCH_URL,
    COVER_ART_SOURCE_SIZE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class CoverArtClient:
    """Small iTunes search client returning artwork URLs."""

    def __init__(
        self,
        search_url: str = COVER_ART_SEARCH_URL,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._search_url = search_url
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def lookup(self, artist: str, title: str) -> str | None:
        """Find an artwork URL for one track.

        Args:
            artist: Track artist.
            title: Track title.

        Returns:
            Display-size artwork URL, or None when nothing usable was found.
        """
        query = build_search_term(artist, title)
        if not query:
            return None
        params = {"term": query, "entity": "song", "limit": 1}
        try:
            response = self._session.get(
                self._search_url, params=params, timeout=self._timeout_seconds
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as error:
            _LOGGER.debug("cover_art_lookup_failed", query=query, error=str(error))
            return None
        return extract_artwork_url(payload)

    def close(self) -> None:
        self._session.close()


def build_search_term(artist: str, title: str) -> str:
    return f"{artist} {title}".lower().strip()


def extract_artwork_url(payload: Any) -> str | None:
    """Pull the first result's artwork URL out of a search payload."""
    if not isinstance(payload, dict):
        return None
    results = payload.get("results")
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        return None
    artwork_url = results[0].get("artworkUrl100")
    if not isinstance(artwork_url, str) or not artwork_url:
        return None
    return artwork_url.replace(COVER_ART_SOURCE_SIZE, COVER_ART_DISPLAY_SIZE)
