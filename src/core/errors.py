"""Audia exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class AudiaError(Exception):
    """Base exception for all Audia failures."""


class AudiaConfigError(AudiaError):
    """Raised for invalid runtime configuration."""


class AudiaFeedError(AudiaError):
    """Raised when the play-log feed cannot be fetched or read."""


class AudiaIngestError(AudiaError):
    """Raised when a feed body cannot be parsed as a whole."""


class AudiaExportError(AudiaError):
    """Raised when a playlist document cannot be produced."""


class AudiaDependencyError(AudiaError):
    """Raised when an optional runtime dependency is missing."""
