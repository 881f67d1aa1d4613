"""Dijkstra path finder adapter.

Computes minimum-weight paths on a GraphPort whose edge labels carry
numeric weights. Predecessor edges are kept in a map private to each
search, so the public label slots of vertices are never written.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from ...domain.errors import (
    InvalidWeightError,
    NoPathFoundError,
    SearchCancelledError,
    UnknownEndpointError,
)
from ...domain.models import EdgeHandle, PathResult, VertexHandle
from ...ports.graph import CancelCheck, GraphPort


@dataclass
class DijkstraPathFinder:
    """Shortest-path search using Dijkstra's algorithm.

    This adapter implements PathFinderPort. The priority queue uses
    lazy deletion: a vertex may be queued several times and entries
    for already finalized vertices are skipped when popped.

    Attributes:
        reject_negative_weights: Raise InvalidWeightError on negative
            edge weights instead of searching with them.
    """

    reject_negative_weights: bool = True
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_path(
        self,
        graph: GraphPort[Any, Any],
        source: VertexHandle,
        target: VertexHandle,
        should_cancel: Optional[CancelCheck] = None,
    ) -> PathResult:
        """Find a minimum-weight path from ``source`` to ``target``.

        Args:
            graph: The graph to search.
            source: Start vertex.
            target: End vertex.
            should_cancel: Optional callback polled before each queue pop.

        Returns:
            PathResult with the edges in travel order, or an empty
            not-found result when the target is unreachable.

        Raises:
            UnknownEndpointError: If an endpoint is not a live vertex.
            InvalidWeightError: If a relaxed edge has an unusable label.
            SearchCancelledError: If ``should_cancel`` returned True.
        """
        self._check_endpoint(graph, source)
        self._check_endpoint(graph, target)

        self._logger.debug(
            "Searching path",
            extra={"source": graph.get(source), "target": graph.get(target)},
        )

        if source == target:
            return PathResult(edges=(), total_distance=0.0)

        distances, predecessors = self._dijkstra(graph, source, target, should_cancel)

        if target not in predecessors:
            self._logger.warning(
                "No path found",
                extra={"source": graph.get(source), "target": graph.get(target)},
            )
            return PathResult.not_found()

        path = self._reconstruct(graph, predecessors, source, target)
        self._logger.info(
            "Path found",
            extra={
                "source": graph.get(source),
                "target": graph.get(target),
                "edges": len(path),
                "distance": distances[target],
            },
        )
        return PathResult(edges=tuple(path), total_distance=distances[target])

    def solve(
        self,
        graph: GraphPort[Any, Any],
        source: VertexHandle,
        target: VertexHandle,
        should_cancel: Optional[CancelCheck] = None,
    ) -> PathResult:
        """Find the shortest path, raising if the target is unreachable.

        Like find_path(), but an unreachable target is an error.

        Raises:
            NoPathFoundError: If no path exists.
        """
        result = self.find_path(graph, source, target, should_cancel)
        if not result.is_found:
            raise NoPathFoundError(
                f"No path from {graph.get(source)} to {graph.get(target)}",
                source=source,
                target=target,
            )
        return result

    def _check_endpoint(self, graph: GraphPort[Any, Any], endpoint: Any) -> None:
        if not isinstance(endpoint, VertexHandle) or not graph.is_valid(endpoint):
            raise UnknownEndpointError(
                f"Endpoint not in graph: {endpoint!r}",
                endpoint=endpoint,
            )

    def _weight(self, graph: GraphPort[Any, Any], edge: EdgeHandle) -> float:
        weight = graph.get_label(edge)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise InvalidWeightError(
                f"Edge {graph.get(edge)!r} has no numeric weight",
                weight=weight,
            )
        value = float(weight)
        if math.isnan(value) or (self.reject_negative_weights and value < 0):
            raise InvalidWeightError(
                f"Edge {graph.get(edge)!r} has invalid weight {weight!r}",
                weight=weight,
            )
        return value

    def _dijkstra(
        self,
        graph: GraphPort[Any, Any],
        source: VertexHandle,
        target: VertexHandle,
        should_cancel: Optional[CancelCheck],
    ) -> Tuple[Dict[VertexHandle, float], Dict[VertexHandle, EdgeHandle]]:
        """Core Dijkstra loop.

        A vertex missing from ``distances`` is unreached (+inf).
        The counter breaks distance ties so handles are never compared.
        """
        distances: Dict[VertexHandle, float] = {source: 0.0}
        predecessors: Dict[VertexHandle, EdgeHandle] = {}
        finalized: Set[VertexHandle] = set()
        counter = itertools.count()

        heap: List[Tuple[float, int, VertexHandle]] = [(0.0, next(counter), source)]

        while heap and target not in finalized:
            if should_cancel is not None and should_cancel():
                raise SearchCancelledError(
                    "Search cancelled",
                    finalized=len(finalized),
                )

            current_distance, _, u = heapq.heappop(heap)

            if u in finalized:
                continue

            finalized.add(u)

            for edge in graph.outgoing(u):
                v = graph.destination(edge)
                if v in finalized:
                    continue
                candidate = current_distance + self._weight(graph, edge)
                if candidate < distances.get(v, math.inf):
                    distances[v] = candidate
                    predecessors[v] = edge
                    heapq.heappush(heap, (candidate, next(counter), v))

        return distances, predecessors

    @staticmethod
    def _reconstruct(
        graph: GraphPort[Any, Any],
        predecessors: Dict[VertexHandle, EdgeHandle],
        source: VertexHandle,
        target: VertexHandle,
    ) -> List[EdgeHandle]:
        path: List[EdgeHandle] = []
        current = target
        while current != source:
            edge = predecessors[current]
            path.append(edge)
            current = graph.source(edge)
        path.reverse()
        return path
