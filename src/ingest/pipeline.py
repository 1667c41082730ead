"""Ingest orchestration for play-log feeds.

This module runs one full ingestion pass: split, resolve the header,
normalize rows and order them chronologically. Every pass rebuilds the
record set from scratch.
"""

from __future__ import annotations

from core.config import AudiaConfig
from core.errors import AudiaIngestError
from core.logging_config import get_logger
from core.types import NormalizerSettings, TrackPlay
from ingest.csv_splitter import split_rows
from ingest.feed_reader import read_feed_text
from ingest.header_resolver import resolve_header
from ingest.record_normalizer import normalize_rows
from transforms.chronological_sort import sort_chronologically

_LOGGER = get_logger(__name__)


def ingest_feed_text(text: str, settings: NormalizerSettings) -> list[TrackPlay]:
    """Turn a feed body into a sorted record list.

    Args:
        text: Raw feed text including its header row.
        settings: Normalizer settings.

    Returns:
        Records ordered by descending instant.

    Raises:
        AudiaIngestError: If the body has no header row.
    """
    rows = split_rows(text)
    if not rows:
        raise AudiaIngestError(
            "Feed body is empty: expected a header row followed by play-log rows. "
            "Check that the feed export is published as CSV."
        )
    header = resolve_header(rows[0])
    result = normalize_rows(rows[1:], header, settings)
    records = sort_chronologically(result.records)
    _LOGGER.info(
        "feed_ingested",
        row_count=result.row_count,
        record_count=len(records),
        dropped_count=result.dropped_count,
        unordered_count=sum(1 for record in records if not record.is_ordered),
    )
    return records


def load_feed(source: str | None, config: AudiaConfig) -> list[TrackPlay]:
    """Read and ingest a feed in one call.

    Args:
        source: URL or local path; None uses the configured feed URL.
        config: Runtime configuration.

    Returns:
        Sorted records.

    Raises:
        AudiaFeedError: If the feed cannot be read.
        AudiaIngestError: If the body cannot be parsed.
    """
    text = read_feed_text(source, config)
    return ingest_feed_text(text, config.normalizer_settings())
