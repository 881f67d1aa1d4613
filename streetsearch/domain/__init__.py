"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    InvalidInsertionError,
    InvalidPositionError,
    InvalidWeightError,
    NetworkLoadError,
    NoPathFoundError,
    NotRemovableError,
    RenderingError,
    SearchCancelledError,
    StreetSearchError,
    UnknownEndpointError,
)
from .models import EdgeHandle, NetworkSummary, PathResult, RoadRecord, VertexHandle

__all__ = [
    # Models
    "VertexHandle",
    "EdgeHandle",
    "RoadRecord",
    "NetworkSummary",
    "PathResult",
    # Errors
    "StreetSearchError",
    "InvalidPositionError",
    "InvalidInsertionError",
    "NotRemovableError",
    "UnknownEndpointError",
    "InvalidWeightError",
    "NoPathFoundError",
    "SearchCancelledError",
    "NetworkLoadError",
    "RenderingError",
]
