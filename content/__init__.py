"""Dimension-based content resolution: aggregation, route defaults, normalization."""

__version__ = "1.0.0"
