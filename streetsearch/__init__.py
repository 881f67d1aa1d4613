"""Top-level package for the street searcher project.

The package provides a generic directed graph with explicit vertex
and edge handles, a Dijkstra shortest-path search running on it, and
the glue needed to load road networks from text files and report
routes.
"""

from .adapters.graph import DijkstraPathFinder, SparseGraph
from .domain import (
    EdgeHandle,
    InvalidInsertionError,
    InvalidPositionError,
    NotRemovableError,
    PathResult,
    UnknownEndpointError,
    VertexHandle,
)
from .services import StreetSearcherService

__all__ = [
    "SparseGraph",
    "DijkstraPathFinder",
    "StreetSearcherService",
    "VertexHandle",
    "EdgeHandle",
    "PathResult",
    "InvalidPositionError",
    "InvalidInsertionError",
    "NotRemovableError",
    "UnknownEndpointError",
]
