"""Street searcher service - Main orchestrator.

The service owns one road graph and an index of endpoints by name.
It loads networks through a NetworkRepositoryPort, runs searches
through a PathFinderPort and formats results for display.

Vertex payload is the endpoint name. Edge payload is the road name
and the edge label is the road length.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from ..adapters.graph import SparseGraph
from ..domain.errors import InvalidInsertionError, UnknownEndpointError
from ..domain.models import (
    EdgeHandle,
    NetworkSummary,
    PathResult,
    RoadRecord,
    VertexHandle,
)
from ..ports.graph import CancelCheck, PathFinderPort
from ..ports.network import NetworkRepositoryPort
from ..ports.rendering import GraphRendererPort


@dataclass
class StreetSearcherService:
    """Main service for loading road networks and searching them.

    Every mutation of the graph and every full search runs under one
    re-entrant lock, so a single service may be shared across threads.

    Attributes:
        path_finder: Computes shortest paths
        repository: Default source of road records
        renderer: Optional graph renderer
        graph: The road graph; a fresh one is created if not given
    """

    path_finder: PathFinderPort
    repository: Optional[NetworkRepositoryPort] = None
    renderer: Optional[GraphRendererPort] = None
    graph: SparseGraph[str, str] = field(
        default_factory=lambda: SparseGraph(name="roads")
    )

    _locations: Dict[str, VertexHandle] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Network construction
    # ------------------------------------------------------------------

    def add_location(self, name: str) -> VertexHandle:
        """Return the vertex for ``name``, inserting it on first use."""
        with self._lock:
            vertex = self._locations.get(name)
            if vertex is None:
                vertex = self.graph.insert_vertex(name)
                self._locations[name] = vertex
            return vertex

    def add_road(
        self, from_name: str, to_name: str, distance: float, road_name: str
    ) -> int:
        """Add a two-way road as a pair of directed edges.

        A direction that is already linked, or a road from an endpoint
        to itself, is skipped.

        Args:
            from_name: First endpoint name.
            to_name: Second endpoint name.
            distance: Road length, stored as the label of both edges.
            road_name: Road name, stored as the payload of both edges.

        Returns:
            Number of directed edges actually added (0, 1 or 2).
        """
        with self._lock:
            from_vertex = self.add_location(from_name)
            to_vertex = self.add_location(to_name)

            added = 0
            for source, destination in ((from_vertex, to_vertex), (to_vertex, from_vertex)):
                try:
                    edge = self.graph.insert_edge(source, destination, road_name)
                except InvalidInsertionError as e:
                    self._logger.debug(
                        "Road direction skipped",
                        extra={
                            "road": road_name,
                            "source": self.graph.get(source),
                            "destination": self.graph.get(destination),
                            "reason": e.reason,
                        },
                    )
                    continue
                self.graph.set_label(edge, distance)
                added += 1
            return added

    def load_roads(self, roads: Iterable[RoadRecord]) -> NetworkSummary:
        """Insert road records into the graph.

        Every record is read before the first insertion, so a source
        that fails part way leaves the graph untouched.

        Args:
            roads: Records to insert.

        Returns:
            Counts of directed roads added and endpoints known.
        """
        records = list(roads)
        with self._lock:
            added = 0
            for road in records:
                added += self.add_road(
                    road.from_name, road.to_name, road.distance, road.road_name
                )
            summary = NetworkSummary(roads=added, endpoints=len(self._locations))

        self._logger.info(
            "Network loaded",
            extra={"roads": summary.roads, "endpoints": summary.endpoints},
        )
        return summary

    def load_network(
        self, repository: Optional[NetworkRepositoryPort] = None
    ) -> NetworkSummary:
        """Load every road of a repository into the graph.

        Args:
            repository: Source of road records; defaults to the
                service's repository.

        Returns:
            Counts of directed roads added and endpoints known.

        Raises:
            ValueError: If no repository is available.
            NetworkLoadError: If the repository cannot be read.
        """
        source = repository or self.repository
        if source is None:
            raise ValueError("No network repository configured")
        return self.load_roads(source.load_roads())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def location(self, name: str) -> VertexHandle:
        """Return the vertex for ``name``.

        Raises:
            UnknownEndpointError: If ``name`` is not in the network.
        """
        vertex = self._locations.get(name)
        if vertex is None:
            raise UnknownEndpointError(f"Unknown endpoint: {name}", endpoint=name)
        return vertex

    def has_location(self, name: str) -> bool:
        return name in self._locations

    def find_shortest_path(
        self,
        from_name: str,
        to_name: str,
        should_cancel: Optional[CancelCheck] = None,
    ) -> PathResult:
        """Find the shortest road path between two named endpoints.

        Args:
            from_name: Departure endpoint.
            to_name: Arrival endpoint.
            should_cancel: Optional callback that aborts the search.

        Returns:
            PathResult; ``is_found`` is False if no route exists.

        Raises:
            UnknownEndpointError: If either name is not in the network.
        """
        with self._lock:
            source = self.location(from_name)
            target = self.location(to_name)
            return self.path_finder.find_path(self.graph, source, target, should_cancel)

    def road_name(self, edge: EdgeHandle) -> str:
        return self.graph.get(edge)

    def road_length(self, edge: EdgeHandle) -> float:
        return self.graph.get_label(edge)

    def endpoints(self, result: PathResult) -> Tuple[str, ...]:
        """Endpoint names visited by a path, in travel order."""
        if not result.edges:
            return ()
        names = [self.graph.get(self.graph.source(result.edges[0]))]
        names.extend(self.graph.get(self.graph.destination(e)) for e in result.edges)
        return tuple(names)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def format_result(self, result: PathResult) -> str:
        """Format a search result as human-readable text.

        Args:
            result: The computed path.

        Returns:
            "No path found", or the total distance followed by one
            "<road> <length>" line per edge in travel order.
        """
        if not result.is_found:
            return "No path found"

        lines = [f"Total Distance: {result.total_distance}"]
        for edge in result.edges:
            lines.append(f"{self.road_name(edge)} {self.road_length(edge)}")
        return "\n".join(lines)

    @staticmethod
    def format_summary(summary: NetworkSummary) -> str:
        return (
            "Network Loaded!\n"
            f"Loaded {summary.roads} roads\n"
            f"Loaded {summary.endpoints} endpoints"
        )

    def render_dot(self, output_path: Optional[Path] = None) -> str:
        """Render the road graph with the configured renderer.

        Args:
            output_path: If given, the document is also written there.

        Returns:
            The rendered document.

        Raises:
            ValueError: If no renderer is configured.
            RenderingError: If writing the file fails.
        """
        if self.renderer is None:
            raise ValueError("No graph renderer configured")
        with self._lock:
            if output_path is not None:
                self.renderer.render_to_file(self.graph, output_path)
            return self.renderer.render(self.graph)
