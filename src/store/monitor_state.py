"""Process-wide monitor state.

This module holds the current feed snapshot and filter criteria. Both are
replaced whole on update, never mutated field by field. Refresh requests
carry increasing sequence numbers so a slow response can never overwrite
data from a newer one.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable

from core.logging_config import get_logger
from core.types import FeedSnapshot, FilterCriteria, TrackPlay

_LOGGER = get_logger(__name__)


class MonitorState:
    """Current dataset plus current criteria, each swapped atomically."""

    def __init__(self, criteria: FilterCriteria | None = None) -> None:
        self._snapshot: FeedSnapshot | None = None
        self._criteria = criteria or FilterCriteria()
        self._last_sequence = 0
        self._pending: set[int] = set()
        self._last_error: str | None = None

    @property
    def snapshot(self) -> FeedSnapshot | None:
        """Last applied snapshot, or None before the first successful load."""
        return self._snapshot

    @property
    def records(self) -> tuple[TrackPlay, ...]:
        """Records of the applied snapshot; empty before the first load."""
        return self._snapshot.records if self._snapshot is not None else ()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def is_refreshing(self) -> bool:
        """Whether any refresh request is still outstanding."""
        return bool(self._pending)

    @property
    def last_error(self) -> str | None:
        """Message of the most recent failed refresh, cleared on success."""
        return self._last_error

    def begin_refresh(self) -> int:
        """Register a new refresh request.

        Returns:
            Sequence number to hand back with the response.
        """
        self._last_sequence += 1
        self._pending.add(self._last_sequence)
        return self._last_sequence

    def apply_snapshot(self, sequence: int, records: Iterable[TrackPlay]) -> bool:
        """Install records from a completed refresh.

        Args:
            sequence: Sequence number returned by ``begin_refresh``.
            records: Sorted records of that pass.

        Returns:
            True when applied, False when a newer snapshot is already in place.
        """
        self._pending.discard(sequence)
        if self._snapshot is not None and sequence < self._snapshot.sequence:
            _LOGGER.info(
                "stale_feed_response_discarded",
                sequence=sequence,
                applied_sequence=self._snapshot.sequence,
            )
            return False
        self._snapshot = FeedSnapshot(
            sequence=sequence,
            records=tuple(records),
            loaded_at=datetime.now(timezone.utc),
        )
        self._last_error = None
        return True

    def fail_refresh(self, sequence: int, error: Exception) -> None:
        """Record a failed refresh and keep the previous snapshot.

        Args:
            sequence: Sequence number of the failed request.
            error: Failure raised by the fetch or parse step.
        """
        self._pending.discard(sequence)
        self._last_error = str(error)
        _LOGGER.warning(
            "feed_refresh_failed",
            sequence=sequence,
            error=str(error),
            kept_record_count=len(self.records),
        )

    def replace_criteria(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria

    def update_criteria(self, **changes: object) -> FilterCriteria:
        """Swap in criteria with the given fields changed.

        Returns:
            The new criteria value.
        """
        self._criteria = replace(self._criteria, **changes)
        return self._criteria
