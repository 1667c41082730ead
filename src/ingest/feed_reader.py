"""Feed body readers for ingestion.

This module loads the raw play-log CSV text from the published feed URL
or from a local export file.
"""

from __future__ import annotations

import time
from pathlib import Path

import requests

from core.config import AudiaConfig
from core.constants import CACHE_BUST_PARAM
from core.errors import AudiaFeedError


def read_feed_text(source: str | None, config: AudiaConfig) -> str:
    """Load the feed body from a URL or a local file.

    Args:
        source: ``http(s)://`` URL, local file path, or None for the configured feed.
        config: Runtime configuration with feed URL and timeout.

    Returns:
        Decoded feed text.

    Raises:
        AudiaFeedError: If the source cannot be read.
    """
    resolved_source = source or config.feed_url
    if resolved_source.startswith(("http://", "https://")):
        return _read_remote_feed(resolved_source, config.request_timeout_seconds)
    return _read_local_feed(Path(resolved_source).expanduser())


def _read_remote_feed(url: str, timeout_seconds: float) -> str:
    """Fetch the feed with a cache-busting query parameter.

    Args:
        url: Exported CSV URL.
        timeout_seconds: Request timeout.

    Returns:
        Response body decoded as UTF-8.

    Raises:
        AudiaFeedError: If the request fails or returns an error status.
    """
    params = {CACHE_BUST_PARAM: str(int(time.time() * 1000))}
    try:
        response = requests.get(url, params=params, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as error:
        raise AudiaFeedError(
            f"Failed to fetch feed from {url}: {error}. "
            "Check network access and the feed URL, then refresh."
        ) from error
    response.encoding = "utf-8"
    return response.text


def _read_local_feed(feed_path: Path) -> str:
    """Read a feed export from the local file system.

    Args:
        feed_path: CSV file path.

    Returns:
        File text.

    Raises:
        AudiaFeedError: If path is missing or unreadable.
    """
    if not feed_path.is_file():
        raise AudiaFeedError(
            f"Failed to read feed at {feed_path}: file does not exist. "
            "Provide an existing CSV export or an http(s) feed URL."
        )
    try:
        return feed_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as error:
        raise AudiaFeedError(
            f"Failed to read feed at {feed_path}: {error}. Export the feed as UTF-8 CSV."
        ) from error
