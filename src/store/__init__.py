"""Monitor state and output layer.

This package holds the current dataset and criteria, exposes the SDK
client, and exports playlist documents.
"""
