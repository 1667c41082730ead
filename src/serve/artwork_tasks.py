"""Per-item artwork lookup tasks.

This module runs one cancellable asyncio task per visible track.
Tasks for tracks that leave the view are cancelled instead of being
left to finish in the background, and their cached artwork is dropped.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Sequence

from core.logging_config import get_logger
from core.types import TrackPlay

_LOGGER = get_logger(__name__)

ArtworkLookup = Callable[[str, str], str | None]
ArtworkKey = tuple[str, str]


class ArtworkTaskRegistry:
    """Artwork lookups keyed by the artist and title of displayed tracks.

    Records rebuilt by a refresh carry new ids, so the cache follows the
    lookup key instead of the record and only holds what is on screen.
    """

    def __init__(self, lookup: ArtworkLookup) -> None:
        self._lookup = lookup
        self._tasks: dict[ArtworkKey, asyncio.Task[None]] = {}
        self._artwork: dict[ArtworkKey, str | None] = {}

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    @property
    def cached_count(self) -> int:
        return len(self._artwork)

    def sync_visible(self, tracks: Sequence[TrackPlay]) -> None:
        """Align running lookups and cached artwork with the tracks on screen.

        Must be called from a running event loop.

        Args:
            tracks: Tracks now visible, in display order.
        """
        visible = {artwork_key(track) for track in tracks}
        for key in list(self._tasks):
            if key not in visible:
                self._tasks.pop(key).cancel()
        for key in list(self._artwork):
            if key not in visible:
                del self._artwork[key]
        for track in tracks:
            key = artwork_key(track)
            if key in self._tasks or key in self._artwork:
                continue
            self._tasks[key] = asyncio.create_task(self._fetch(key))

    def artwork_for(self, track: TrackPlay) -> str | None:
        """Return the resolved artwork URL, or None while missing or pending."""
        return self._artwork.get(artwork_key(track))

    async def wait_idle(self) -> None:
        """Wait for every outstanding lookup to finish or be cancelled."""
        if self._tasks:
            await asyncio.gather(*self._tasks.values(), return_exceptions=True)

    def close(self) -> None:
        for task in self._tasks.values():
            task.cancel()
        self._tasks.clear()
        self._artwork.clear()

    async def _fetch(self, key: ArtworkKey) -> None:
        artist, title = key
        try:
            artwork_url = await asyncio.to_thread(self._lookup, artist, title)
        except Exception as error:
            _LOGGER.debug("artwork_task_failed", artist=artist, title=title, error=str(error))
            artwork_url = None
        self._artwork[key] = artwork_url
        self._tasks.pop(key, None)


def artwork_key(track: TrackPlay) -> ArtworkKey:
    """Cover-art lookup key for a track."""
    return track.artist, track.title
