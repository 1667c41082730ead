"""Runtime configuration model for Audia.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.constants import (
    DEFAULT_FEED_URL,
    DEFAULT_OFFSET_HOURS,
    DEFAULT_OFFSET_STATION,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_STATION,
    DEFAULT_TIMEZONE_NAME,
)
from core.errors import AudiaConfigError
from core.types import NormalizerSettings


@dataclass(frozen=True)
class AudiaConfig:
    """Validated runtime configuration.

    Attributes:
        feed_url: Exported CSV URL of the play-log feed.
        refresh_interval_seconds: Period of the automatic refresh timer.
        request_timeout_seconds: Timeout applied to feed and artwork requests.
        default_station: Station used for rows without a station value.
        offset_station: Station whose ISO timestamps get the offset correction.
        offset_hours: Size of that correction.
        timezone_name: IANA zone used for calendar interpretation.
    """

    feed_url: str
    refresh_interval_seconds: float
    request_timeout_seconds: float
    default_station: str
    offset_station: str
    offset_hours: int
    timezone_name: str

    @classmethod
    def from_env(cls) -> "AudiaConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            AudiaConfigError: If environment values are invalid.
        """
        timezone_name = os.getenv("AUDIA_TIMEZONE", DEFAULT_TIMEZONE_NAME)
        _resolve_timezone(timezone_name)
        return cls(
            feed_url=os.getenv("AUDIA_FEED_URL", DEFAULT_FEED_URL),
            refresh_interval_seconds=_parse_positive_float(
                "AUDIA_REFRESH_INTERVAL", DEFAULT_REFRESH_INTERVAL_SECONDS
            ),
            request_timeout_seconds=_parse_positive_float(
                "AUDIA_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS
            ),
            default_station=os.getenv("AUDIA_DEFAULT_STATION", DEFAULT_STATION),
            offset_station=os.getenv("AUDIA_OFFSET_STATION", DEFAULT_OFFSET_STATION),
            offset_hours=_parse_offset_hours(os.getenv("AUDIA_OFFSET_HOURS")),
            timezone_name=timezone_name,
        )

    def normalizer_settings(self) -> NormalizerSettings:
        """Build record normalizer settings from this config.

        Returns:
            Settings carrying station defaults and the resolved zone.
        """
        return NormalizerSettings(
            default_station=self.default_station,
            offset_station=self.offset_station,
            offset_hours=self.offset_hours,
            tzinfo=_resolve_timezone(self.timezone_name),
        )


def _resolve_timezone(timezone_name: str) -> ZoneInfo:
    """Resolve an IANA zone name.

    Args:
        timezone_name: Zone name such as ``America/Sao_Paulo``.

    Returns:
        Zone object.

    Raises:
        AudiaConfigError: If the zone is unknown.
    """
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as error:
        raise AudiaConfigError(
            f"Invalid AUDIA_TIMEZONE value: unknown zone '{timezone_name}'. "
            "Set AUDIA_TIMEZONE to an IANA zone name such as America/Sao_Paulo."
        ) from error


def _parse_positive_float(variable_name: str, default: float) -> float:
    """Parse a strictly positive float environment value.

    Args:
        variable_name: Environment variable to read.
        default: Value used when the variable is unset.

    Returns:
        Parsed value.

    Raises:
        AudiaConfigError: If the value is not a positive number.
    """
    raw_value = os.getenv(variable_name)
    if raw_value is None:
        return default
    try:
        value = float(raw_value)
    except ValueError as error:
        raise AudiaConfigError(
            f"Invalid {variable_name} value: expected number of seconds, got '{raw_value}'. "
            f"Set {variable_name} to a positive number."
        ) from error
    if value <= 0:
        raise AudiaConfigError(
            f"Invalid {variable_name} value: expected a positive number, got '{raw_value}'."
        )
    return value


def _parse_offset_hours(raw_value: str | None) -> int:
    """Parse the timezone offset correction size.

    Args:
        raw_value: Raw string from environment, or None.

    Returns:
        Parsed integer hours.

    Raises:
        AudiaConfigError: If value cannot be parsed into int.
    """
    if raw_value is None:
        return DEFAULT_OFFSET_HOURS
    try:
        return int(raw_value)
    except ValueError as error:
        raise AudiaConfigError(
            "Invalid AUDIA_OFFSET_HOURS value: "
            f"expected integer, got '{raw_value}'. "
            "Set AUDIA_OFFSET_HOURS to a whole number of hours."
        ) from error
