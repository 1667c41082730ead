"""Presentation-facing services.

This package assembles dashboard views, schedules feed refreshes, and
runs per-track cover-art lookups for the display layer.
"""
