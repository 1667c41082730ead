"""Play-log feed ingestion.

This package reads the raw CSV feed and normalizes its rows into
immutable TrackPlay records for the transform layer.
"""
