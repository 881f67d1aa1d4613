"""Graph ports - Abstractions for graph storage and path finding.

These protocols define the contracts for graph operations: the
directed graph store with its handle-based API, and the shortest-path
search that runs on top of it.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Protocol, TypeVar, Union

from ..domain.models import EdgeHandle, PathResult, VertexHandle

V = TypeVar("V")
E = TypeVar("E")

Handle = Union[VertexHandle, EdgeHandle]

# Returns True when a running search should stop
CancelCheck = Callable[[], bool]


class GraphPort(Protocol[V, E]):
    """Port for a directed graph with explicit vertex and edge identity.

    Implementation: adapters/graph/sparse_graph.py

    Every operation accepting a handle raises InvalidPositionError
    when the handle is None, was minted by another graph, or refers
    to a removed vertex or edge.
    """

    def insert_vertex(self, data: V) -> VertexHandle:
        """Insert a new isolated vertex carrying ``data``."""
        ...

    def insert_edge(self, from_: VertexHandle, to: VertexHandle, data: E) -> EdgeHandle:
        """Insert a directed edge from ``from_`` to ``to``.

        Raises:
            InvalidPositionError: If either endpoint is invalid.
            InvalidInsertionError: On a self-loop or duplicate edge.
        """
        ...

    def remove_vertex(self, v: VertexHandle) -> V:
        """Remove an isolated vertex and return its payload.

        Raises:
            NotRemovableError: If the vertex still has incident edges.
        """
        ...

    def remove_edge(self, e: EdgeHandle) -> E:
        """Remove an edge and return its payload."""
        ...

    def vertices(self) -> Iterable[VertexHandle]:
        """Live vertices in insertion order."""
        ...

    def edges(self) -> Iterable[EdgeHandle]:
        """Live edges in insertion order."""
        ...

    def outgoing(self, v: VertexHandle) -> Iterable[EdgeHandle]:
        """Edges leaving ``v``."""
        ...

    def incoming(self, v: VertexHandle) -> Iterable[EdgeHandle]:
        """Edges entering ``v``."""
        ...

    def source(self, e: EdgeHandle) -> VertexHandle:
        """Vertex the edge starts from."""
        ...

    def destination(self, e: EdgeHandle) -> VertexHandle:
        """Vertex the edge points to."""
        ...

    def get(self, handle: Handle) -> Any:
        """Payload of a vertex or edge."""
        ...

    def put(self, handle: Handle, data: Any) -> None:
        """Replace the payload of a vertex or edge."""
        ...

    def set_label(self, handle: Handle, value: Any) -> None:
        """Attach an arbitrary label to a vertex or edge."""
        ...

    def get_label(self, handle: Handle) -> Any:
        """Label of a vertex or edge, None when unset."""
        ...

    def clear_labels(self) -> None:
        """Reset every label to None."""
        ...

    def is_valid(self, handle: Any) -> bool:
        """Check whether ``handle`` refers to a live item of this graph."""
        ...


class PathFinderPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py

    Edge weights are read from edge labels.
    """

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
            should_cancel: Optional callback polled between queue pops.

        Returns:
            PathResult; ``is_found`` is False when unreachable.

        Raises:
            UnknownEndpointError: If an endpoint is not in the graph.
        """
        ...
