"""Immutable domain models for the street searcher.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
concepts of the application: graph handles, road records and
search results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class VertexHandle:
    """Opaque reference to a vertex of one graph.

    A handle is only meaningful to the graph that minted it and only
    while the slot it points at still carries the same generation.

    Attributes:
        graph_id: Identity of the owning graph
        index: Slot index in the graph's vertex table
        generation: Slot generation at the time of insertion
    """

    graph_id: int
    index: int
    generation: int


@dataclass(frozen=True, slots=True)
class EdgeHandle:
    """Opaque reference to an edge of one graph.

    Attributes:
        graph_id: Identity of the owning graph
        index: Slot index in the graph's edge table
        generation: Slot generation at the time of insertion
    """

    graph_id: int
    index: int
    generation: int


@dataclass(frozen=True, slots=True)
class RoadRecord:
    """One parsed line of a road network file.

    Attributes:
        from_name: First endpoint name
        to_name: Second endpoint name
        distance: Road length, finite and non-negative
        road_name: Road name carried as edge payload
    """

    from_name: str
    to_name: str
    distance: float
    road_name: str

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance):
            raise ValueError(f"Road distance must be finite, got {self.distance}")
        if self.distance < 0:
            raise ValueError(f"Road distance must be non-negative, got {self.distance}")


@dataclass(frozen=True, slots=True)
class NetworkSummary:
    """Counts reported after loading a network.

    Attributes:
        roads: Number of directed edges added
        endpoints: Number of distinct endpoints in the graph
    """

    roads: int
    endpoints: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path search.

    Attributes:
        edges: Edges from source to target, in travel order
        total_distance: Sum of edge weights, or None if unreachable
    """

    edges: tuple[EdgeHandle, ...] = field(default_factory=tuple)
    total_distance: Optional[float] = None

    @property
    def is_found(self) -> bool:
        """Check if the target was reached."""
        return self.total_distance is not None

    @property
    def num_edges(self) -> int:
        """Return the number of edges on the path."""
        return len(self.edges)

    @classmethod
    def not_found(cls) -> PathResult:
        """Build the result reported for an unreachable target."""
        return cls(edges=(), total_distance=None)
