"""Timestamp resolution strategies for feed rows.

Feed sources disagree on timestamp layout, so parsing tries a
slash-normalized pass first and the unmodified string second.
The slash pass keeps date-only values in local calendar time instead
of reading them as UTC midnight.
"""

from __future__ import annotations

from datetime import datetime, tzinfo

_SLASH_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
)


def parse_instant(raw_value: str, zone: tzinfo | None = None) -> datetime | None:
    """Resolve a raw feed timestamp into an aware datetime.

    Args:
        raw_value: Timestamp cell as published by the feed.
        zone: Zone for naive values; None means the host's local zone.

    Returns:
        Aware datetime, or None when no strategy understands the value.
    """
    text = raw_value.strip()
    if not text:
        return None
    parsed = _parse_slash_layout(text.replace("-", "/"))
    if parsed is None:
        parsed = _parse_iso_layout(text)
    if parsed is None:
        return None
    return _localize(parsed, zone)


def to_epoch_millis(moment: datetime) -> int:
    """Convert an aware datetime into epoch milliseconds."""
    return int(round(moment.timestamp() * 1000))


def to_local(moment: datetime, zone: tzinfo | None = None) -> datetime:
    """Express an aware datetime in the display zone."""
    if zone is None:
        return moment.astimezone()
    return moment.astimezone(zone)


def _parse_slash_layout(text: str) -> datetime | None:
    for layout in _SLASH_FORMATS:
        try:
            return datetime.strptime(text, layout)
        except ValueError:
            continue
    return None


def _parse_iso_layout(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _localize(moment: datetime, zone: tzinfo | None) -> datetime:
    if moment.tzinfo is not None:
        return moment
    if zone is None:
        return moment.astimezone()
    return moment.replace(tzinfo=zone)
