"""Sparse directed graph backed by per-graph slot tables.

Vertices and edges live in growable slot tables owned by the graph.
Handles are ``(graph_id, index, generation)`` triples: a handle is
valid while the slot it points at is live and still carries the
handle's generation. Removing an item bumps its slot generation, so
every outstanding handle to it goes stale at once, and slots are
recycled for later insertions.

Adjacency is stored per vertex as dictionaries keyed by the opposite
endpoint, which makes the duplicate-edge check and edge lookup O(1)
and keeps traversal proportional to local degree.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generic,
    KeysView,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from ...domain.errors import (
    InvalidInsertionError,
    InvalidPositionError,
    NotRemovableError,
)
from ...domain.models import EdgeHandle, VertexHandle

V = TypeVar("V")
E = TypeVar("E")

_graph_ids = itertools.count(1)


@dataclass(slots=True)
class _VertexSlot:
    generation: int = 0
    live: bool = False
    data: Any = None
    label: Any = None
    # destination -> edge
    outgoing: Dict[VertexHandle, EdgeHandle] = field(default_factory=dict)
    # source -> edge
    incoming: Dict[VertexHandle, EdgeHandle] = field(default_factory=dict)


@dataclass(slots=True)
class _EdgeSlot:
    # Endpoints are kept after removal; a retired slot is never read
    source: VertexHandle
    destination: VertexHandle
    generation: int = 0
    live: bool = False
    data: Any = None
    label: Any = None


@dataclass(eq=False)
class SparseGraph(Generic[V, E]):
    """Directed graph for sparse networks, using incidence dictionaries.

    This adapter implements GraphPort. Self-loops and duplicate edges
    in the same direction are rejected; the opposite direction is an
    independent edge.

    Attributes:
        name: Graph name for logging

    Example:
        graph = SparseGraph[str, str]()
        a = graph.insert_vertex("A")
        b = graph.insert_vertex("B")
        road = graph.insert_edge(a, b, "Main St")
        graph.set_label(road, 1.5)
    """

    name: str = "graph"

    _id: int = field(init=False, repr=False)
    _vertex_slots: List[_VertexSlot] = field(default_factory=list, repr=False)
    _edge_slots: List[_EdgeSlot] = field(default_factory=list, repr=False)
    _free_vertices: List[int] = field(default_factory=list, repr=False)
    _free_edges: List[int] = field(default_factory=list, repr=False)
    # Live handles in insertion order
    _vertex_order: Dict[VertexHandle, None] = field(default_factory=dict, repr=False)
    _edge_order: Dict[EdgeHandle, None] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._id = next(_graph_ids)
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Handle validation
    # ------------------------------------------------------------------

    def _vertex_slot(self, v: Any) -> _VertexSlot:
        if v is None:
            raise InvalidPositionError("Vertex handle is None", handle=v)
        if not isinstance(v, VertexHandle) or v.graph_id != self._id:
            raise InvalidPositionError(
                "Vertex does not belong to this graph", handle=v
            )
        if not 0 <= v.index < len(self._vertex_slots):
            raise InvalidPositionError("Vertex does not belong to this graph", handle=v)
        slot = self._vertex_slots[v.index]
        if not slot.live or slot.generation != v.generation:
            raise InvalidPositionError("Vertex has been removed", handle=v)
        return slot

    def _edge_slot(self, e: Any) -> _EdgeSlot:
        if e is None:
            raise InvalidPositionError("Edge handle is None", handle=e)
        if not isinstance(e, EdgeHandle) or e.graph_id != self._id:
            raise InvalidPositionError("Edge does not belong to this graph", handle=e)
        if not 0 <= e.index < len(self._edge_slots):
            raise InvalidPositionError("Edge does not belong to this graph", handle=e)
        slot = self._edge_slots[e.index]
        if not slot.live or slot.generation != e.generation:
            raise InvalidPositionError("Edge has been removed", handle=e)
        return slot

    def _slot(self, handle: Any) -> Union[_VertexSlot, _EdgeSlot]:
        if isinstance(handle, EdgeHandle):
            return self._edge_slot(handle)
        return self._vertex_slot(handle)

    def is_valid(self, handle: Any) -> bool:
        """Check whether a handle refers to a live vertex or edge of this graph.

        Args:
            handle: Any value.

        Returns:
            True if every handle-accepting operation would accept it.
        """
        try:
            self._slot(handle)
        except InvalidPositionError:
            return False
        return True

    def __contains__(self, handle: Any) -> bool:
        return self.is_valid(handle)

    # ------------------------------------------------------------------
    # Insertion and removal
    # ------------------------------------------------------------------

    def insert_vertex(self, data: V) -> VertexHandle:
        """Insert a new vertex with no edges and no label.

        Args:
            data: Vertex payload.

        Returns:
            Handle to the new vertex.
        """
        if self._free_vertices:
            index = self._free_vertices.pop()
            slot = self._vertex_slots[index]
        else:
            index = len(self._vertex_slots)
            slot = _VertexSlot()
            self._vertex_slots.append(slot)

        slot.live = True
        slot.data = data
        handle = VertexHandle(self._id, index, slot.generation)
        self._vertex_order[handle] = None
        return handle

    def insert_edge(self, from_: VertexHandle, to: VertexHandle, data: E) -> EdgeHandle:
        """Insert a directed edge.

        Both endpoints are validated before any structural check.

        Args:
            from_: Source vertex.
            to: Destination vertex.
            data: Edge payload.

        Returns:
            Handle to the new edge.

        Raises:
            InvalidPositionError: If either endpoint is invalid.
            InvalidInsertionError: On a self-loop, or if an edge with the
                same source and destination already exists.
        """
        from_slot = self._vertex_slot(from_)
        to_slot = self._vertex_slot(to)

        if from_ == to:
            self._logger.debug("Rejected self-loop", extra={"vertex": from_slot.data})
            raise InvalidInsertionError("Self-loops are not allowed", reason="self_loop")
        # Only the forward direction is checked: (to -> from_) may coexist.
        if to in from_slot.outgoing:
            self._logger.debug(
                "Rejected duplicate edge",
                extra={"source": from_slot.data, "destination": to_slot.data},
            )
            raise InvalidInsertionError(
                "An edge with the same source and destination already exists",
                reason="duplicate_edge",
            )

        if self._free_edges:
            index = self._free_edges.pop()
            slot = self._edge_slots[index]
        else:
            index = len(self._edge_slots)
            slot = _EdgeSlot(from_, to)
            self._edge_slots.append(slot)

        slot.live = True
        slot.data = data
        slot.source = from_
        slot.destination = to
        handle = EdgeHandle(self._id, index, slot.generation)

        from_slot.outgoing[to] = handle
        to_slot.incoming[from_] = handle
        self._edge_order[handle] = None
        return handle

    def remove_vertex(self, v: VertexHandle) -> V:
        """Remove an isolated vertex.

        Args:
            v: Vertex to remove.

        Returns:
            The vertex payload.

        Raises:
            InvalidPositionError: If ``v`` is invalid.
            NotRemovableError: If ``v`` still has incident edges.
        """
        slot = self._vertex_slot(v)
        incident = len(slot.outgoing) + len(slot.incoming)
        if incident:
            raise NotRemovableError(
                "Vertex still has incident edges",
                incident_edges=incident,
            )

        data = slot.data
        del self._vertex_order[v]
        self._retire(slot)
        self._free_vertices.append(v.index)
        self._logger.debug("Vertex removed", extra={"vertex": data})
        return data

    def remove_edge(self, e: EdgeHandle) -> E:
        """Remove an edge, detaching it from both endpoints.

        Args:
            e: Edge to remove.

        Returns:
            The edge payload.

        Raises:
            InvalidPositionError: If ``e`` is invalid.
        """
        slot = self._edge_slot(e)
        source = slot.source
        destination = slot.destination

        del self._vertex_slots[source.index].outgoing[destination]
        del self._vertex_slots[destination.index].incoming[source]

        data = slot.data
        del self._edge_order[e]
        self._retire(slot)
        self._free_edges.append(e.index)
        self._logger.debug("Edge removed", extra={"edge": data})
        return data

    @staticmethod
    def _retire(slot: Union[_VertexSlot, _EdgeSlot]) -> None:
        slot.live = False
        slot.generation += 1
        slot.data = None
        slot.label = None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def vertices(self) -> KeysView[VertexHandle]:
        """Live vertices in insertion order.

        The returned view is lazy and can be iterated repeatedly; it
        must not be iterated while vertices are inserted or removed.
        """
        return self._vertex_order.keys()

    def edges(self) -> KeysView[EdgeHandle]:
        """Live edges in insertion order, as a lazy view."""
        return self._edge_order.keys()

    def outgoing(self, v: VertexHandle) -> Tuple[EdgeHandle, ...]:
        """Edges leaving ``v``."""
        return tuple(self._vertex_slot(v).outgoing.values())

    def incoming(self, v: VertexHandle) -> Tuple[EdgeHandle, ...]:
        """Edges entering ``v``."""
        return tuple(self._vertex_slot(v).incoming.values())

    def source(self, e: EdgeHandle) -> VertexHandle:
        return self._edge_slot(e).source

    def destination(self, e: EdgeHandle) -> VertexHandle:
        return self._edge_slot(e).destination

    def find_edge(self, from_: VertexHandle, to: VertexHandle) -> Optional[EdgeHandle]:
        """Return the edge from ``from_`` to ``to``, or None if there is none."""
        from_slot = self._vertex_slot(from_)
        self._vertex_slot(to)
        return from_slot.outgoing.get(to)

    def vertex_count(self) -> int:
        return len(self._vertex_order)

    def edge_count(self) -> int:
        return len(self._edge_order)

    def __len__(self) -> int:
        """Number of live vertices."""
        return len(self._vertex_order)

    # ------------------------------------------------------------------
    # Payloads and labels
    # ------------------------------------------------------------------

    def get(self, handle: Union[VertexHandle, EdgeHandle]) -> Any:
        """Payload of a vertex or edge."""
        return self._slot(handle).data

    def put(self, handle: Union[VertexHandle, EdgeHandle], data: Any) -> None:
        """Replace the payload of a vertex or edge."""
        self._slot(handle).data = data

    def set_label(self, handle: Union[VertexHandle, EdgeHandle], value: Any) -> None:
        """Attach a label to a vertex or edge, replacing any previous one."""
        self._slot(handle).label = value

    def get_label(self, handle: Union[VertexHandle, EdgeHandle]) -> Any:
        """Label of a vertex or edge, None when unset."""
        return self._slot(handle).label

    def clear_labels(self) -> None:
        """Reset the label of every live vertex and edge to None."""
        for v in self._vertex_order:
            self._vertex_slots[v.index].label = None
        for e in self._edge_order:
            self._edge_slots[e.index].label = None
