from __future__ import annotations


class MalformedGridError(ValueError):
    """Raised when an occupancy grid is not a 2D matrix of 0/1 values."""


class EmptyForestError(ValueError):
    """Raised when a burned-area ratio is requested for a grid without trees."""
