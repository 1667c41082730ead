"""Asynchronous feed refresh scheduling.

This module drives the initial load, the periodic timer and on-demand
refreshes on one event loop. Only the feed read leaves the loop; the
ingestion pipeline then runs on the loop over the fetched text.
Overlapping refreshes are allowed and resolved by sequence number.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from core.errors import AudiaFeedError, AudiaIngestError
from core.logging_config import get_logger
from store.feed_sdk import AudiaClient

_LOGGER = get_logger(__name__)

RefreshCallback = Callable[[AudiaClient, bool], None]


async def refresh_once(client: AudiaClient, source: str | None = None) -> bool:
    """Run one sequence-guarded refresh.

    Args:
        client: SDK client owning the monitor state.
        source: Feed URL or local CSV path.

    Returns:
        True when the response was applied, False when it failed or was stale.
    """
    sequence = client.state.begin_refresh()
    try:
        text = await asyncio.to_thread(client.fetch_text, source)
        records = client.ingest_text(text)
    except (AudiaFeedError, AudiaIngestError) as error:
        client.state.fail_refresh(sequence, error)
        return False
    return client.apply_records(sequence, records)


def trigger_refresh(client: AudiaClient, source: str | None = None) -> asyncio.Task[bool]:
    """Start a user-initiated refresh without waiting for it.

    In-flight refreshes are not cancelled; whichever request is newest wins.
    """
    return asyncio.create_task(refresh_once(client, source))


async def run_refresh_loop(
    client: AudiaClient,
    interval_seconds: float | None = None,
    *,
    source: str | None = None,
    stop_event: asyncio.Event | None = None,
    iterations: int | None = None,
    on_update: RefreshCallback | None = None,
) -> int:
    """Refresh immediately and then on a fixed period.

    Args:
        client: SDK client owning the monitor state.
        interval_seconds: Period between refreshes; defaults to the config value.
        source: Feed URL or local CSV path.
        stop_event: Event that ends the loop between refreshes.
        iterations: Optional maximum number of refreshes.
        on_update: Callback invoked after each refresh with its outcome.

    Returns:
        Number of refreshes performed.
    """
    interval = interval_seconds or client.config.refresh_interval_seconds
    stop = stop_event or asyncio.Event()
    completed = 0
    while iterations is None or completed < iterations:
        applied = await refresh_once(client, source)
        completed += 1
        if on_update is not None:
            on_update(client, applied)
        if iterations is not None and completed >= iterations:
            break
        try:
            await asyncio.wait_for(stop.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue
        break
    _LOGGER.info("refresh_loop_stopped", refresh_count=completed)
    return completed
