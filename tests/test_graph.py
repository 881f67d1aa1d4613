"""Tests for the sparse directed graph store."""

import pytest

from streetsearch.adapters.graph import SparseGraph
from streetsearch.domain.errors import (
    InvalidInsertionError,
    InvalidPositionError,
    NotRemovableError,
)
from streetsearch.domain.models import EdgeHandle, VertexHandle


@pytest.fixture
def graph():
    return SparseGraph()


@pytest.fixture
def other_graph():
    return SparseGraph(name="other")


def test_insert_vertex_returns_payload(graph):
    v1 = graph.insert_vertex("v1")
    assert graph.get(v1) == "v1"
    assert graph.get_label(v1) is None
    assert graph.outgoing(v1) == ()
    assert graph.incoming(v1) == ()


def test_insert_edge(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    e1 = graph.insert_edge(v1, v2, "v1-v2")

    assert graph.get(e1) == "v1-v2"
    assert graph.source(e1) == v1
    assert graph.destination(e1) == v2
    assert graph.outgoing(v1) == (e1,)
    assert graph.incoming(v2) == (e1,)
    assert graph.incoming(v1) == ()
    assert graph.outgoing(v2) == ()


def test_put_replaces_payload(graph):
    v = graph.insert_vertex("old")
    graph.put(v, "new")
    assert graph.get(v) == "new"


@pytest.mark.parametrize("position", ["first", "second"])
def test_insert_edge_with_none_vertex(graph, position):
    v = graph.insert_vertex("v")
    args = (None, v) if position == "first" else (v, None)
    with pytest.raises(InvalidPositionError):
        graph.insert_edge(*args, "e")


@pytest.mark.parametrize("position", ["first", "second"])
def test_insert_edge_with_foreign_vertex(graph, other_graph, position):
    foreign = other_graph.insert_vertex("v1")
    local = graph.insert_vertex("v2")
    args = (foreign, local) if position == "first" else (local, foreign)
    with pytest.raises(InvalidPositionError):
        graph.insert_edge(*args, "e")


@pytest.mark.parametrize("position", ["first", "second"])
def test_insert_edge_with_removed_vertex(graph, position):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    graph.remove_vertex(v1 if position == "first" else v2)
    with pytest.raises(InvalidPositionError):
        graph.insert_edge(v1, v2, "e")


def test_insert_edge_rejects_self_loop(graph):
    v = graph.insert_vertex("v")
    with pytest.raises(InvalidInsertionError) as exc_info:
        graph.insert_edge(v, v, "e")
    assert exc_info.value.reason == "self_loop"
    assert graph.edge_count() == 0


def test_insert_edge_rejects_parallel_edge(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    first = graph.insert_edge(v1, v2, "v1-v2")

    with pytest.raises(InvalidInsertionError) as exc_info:
        graph.insert_edge(v1, v2, "again")

    assert exc_info.value.reason == "duplicate_edge"
    assert list(graph.edges()) == [first]
    assert graph.get(first) == "v1-v2"


def test_opposite_direction_is_independent(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    e1 = graph.insert_edge(v1, v2, "v1-v2")
    e2 = graph.insert_edge(v2, v1, "v2-v1")

    assert e1 != e2
    assert graph.get(e1) == "v1-v2"
    assert graph.get(e2) == "v2-v1"
    assert graph.find_edge(v1, v2) == e1
    assert graph.find_edge(v2, v1) == e2


def test_invalid_position_checked_before_insertion_rules(graph, other_graph):
    foreign = other_graph.insert_vertex("x")
    with pytest.raises(InvalidPositionError):
        graph.insert_edge(foreign, foreign, "loop")


def test_remove_edge_detaches_endpoints(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    e = graph.insert_edge(v1, v2, "road")

    assert graph.remove_edge(e) == "road"

    assert e not in graph.outgoing(v1)
    assert e not in graph.incoming(v2)
    assert list(graph.edges()) == []
    for operation in (graph.source, graph.destination, graph.get, graph.get_label, graph.remove_edge):
        with pytest.raises(InvalidPositionError):
            operation(e)
    with pytest.raises(InvalidPositionError):
        graph.set_label(e, 1.0)


def test_edge_can_be_reinserted_after_removal(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    old = graph.remove_edge(graph.insert_edge(v1, v2, "old"))
    new = graph.insert_edge(v1, v2, "new")

    assert old == "old"
    assert graph.get(new) == "new"


def test_reused_edge_slot_reports_new_endpoints(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    v3 = graph.insert_vertex("v3")
    old = graph.insert_edge(v1, v2, "old")
    graph.remove_edge(old)

    new = graph.insert_edge(v3, v1, "new")

    assert new.index == old.index
    assert graph.source(new) == v3
    assert graph.destination(new) == v1
    assert graph.outgoing(v1) == ()
    assert graph.incoming(v2) == ()
    with pytest.raises(InvalidPositionError):
        graph.source(old)


def test_stale_handle_stays_invalid_after_slot_reuse(graph):
    v1 = graph.insert_vertex("v1")
    graph.remove_vertex(v1)
    v2 = graph.insert_vertex("v2")

    assert v2.index == v1.index
    assert v2 != v1
    assert not graph.is_valid(v1)
    assert graph.is_valid(v2)
    with pytest.raises(InvalidPositionError):
        graph.get(v1)
    assert graph.get(v2) == "v2"


def test_remove_vertex_with_edges_is_refused(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    out_edge = graph.insert_edge(v1, v2, "out")
    in_edge = graph.insert_edge(v2, v1, "in")

    with pytest.raises(NotRemovableError) as exc_info:
        graph.remove_vertex(v1)
    assert exc_info.value.incident_edges == 2

    graph.remove_edge(out_edge)
    with pytest.raises(NotRemovableError):
        graph.remove_vertex(v1)

    graph.remove_edge(in_edge)
    assert graph.remove_vertex(v1) == "v1"
    assert list(graph.vertices()) == [v2]


def test_removed_vertex_rejects_every_operation(graph):
    v = graph.insert_vertex("v")
    graph.remove_vertex(v)

    for operation in (
        graph.remove_vertex,
        graph.outgoing,
        graph.incoming,
        graph.get,
        graph.get_label,
    ):
        with pytest.raises(InvalidPositionError):
            operation(v)
    with pytest.raises(InvalidPositionError):
        graph.set_label(v, "x")
    with pytest.raises(InvalidPositionError):
        graph.put(v, "x")


def test_foreign_handles_rejected_by_every_operation(graph, other_graph):
    a = other_graph.insert_vertex("a")
    b = other_graph.insert_vertex("b")
    e = other_graph.insert_edge(a, b, "ab")
    local = graph.insert_vertex("local")

    vertex_operations = [
        graph.remove_vertex,
        graph.outgoing,
        graph.incoming,
        graph.get,
        graph.get_label,
        lambda v: graph.set_label(v, 1),
        lambda v: graph.put(v, 1),
        lambda v: graph.insert_edge(v, local, "x"),
        lambda v: graph.insert_edge(local, v, "x"),
        lambda v: graph.find_edge(v, local),
    ]
    edge_operations = [
        graph.remove_edge,
        graph.source,
        graph.destination,
        graph.get,
        graph.get_label,
        lambda h: graph.set_label(h, 1),
        lambda h: graph.put(h, 1),
    ]

    for operation in vertex_operations:
        with pytest.raises(InvalidPositionError):
            operation(a)
    for operation in edge_operations:
        with pytest.raises(InvalidPositionError):
            operation(e)

    # The owning graph is untouched
    assert other_graph.get(e) == "ab"
    assert other_graph.get_label(a) is None


def test_forged_handles_are_rejected(graph):
    v = graph.insert_vertex("v")
    forged_index = VertexHandle(v.graph_id, 99, 0)
    wrong_kind = EdgeHandle(v.graph_id, v.index, v.generation)

    assert not graph.is_valid(forged_index)
    assert not graph.is_valid(wrong_kind)
    assert not graph.is_valid("v")
    with pytest.raises(InvalidPositionError):
        graph.outgoing(wrong_kind)
    with pytest.raises(InvalidPositionError):
        graph.source(v)


def test_labels_on_vertices_and_edges(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    e = graph.insert_edge(v1, v2, "e")

    graph.set_label(v1, {"visited": True})
    graph.set_label(e, 4.2)

    assert graph.get_label(v1) == {"visited": True}
    assert graph.get_label(v2) is None
    assert graph.get_label(e) == 4.2


def test_clear_labels_is_idempotent(graph):
    v1 = graph.insert_vertex("v1")
    v2 = graph.insert_vertex("v2")
    e = graph.insert_edge(v1, v2, "e")
    graph.set_label(v1, "a")
    graph.set_label(v2, "b")
    graph.set_label(e, 1.0)

    graph.clear_labels()
    assert [graph.get_label(h) for h in (v1, v2, e)] == [None, None, None]

    graph.clear_labels()
    assert [graph.get_label(h) for h in (v1, v2, e)] == [None, None, None]
    assert graph.is_valid(v1) and graph.is_valid(e)


def test_clear_labels_on_empty_graph(graph):
    graph.clear_labels()
    graph.clear_labels()
    assert len(graph) == 0


def test_iteration_follows_insertion_order_and_restarts(graph):
    names = ["a", "b", "c", "d"]
    handles = [graph.insert_vertex(n) for n in names]
    e1 = graph.insert_edge(handles[2], handles[0], "ca")
    e2 = graph.insert_edge(handles[0], handles[1], "ab")
    graph.remove_vertex(handles[3])

    vertices = graph.vertices()
    assert [graph.get(v) for v in vertices] == ["a", "b", "c"]
    assert [graph.get(v) for v in vertices] == ["a", "b", "c"]
    assert list(graph.edges()) == [e1, e2]
    assert graph.vertex_count() == 3
    assert graph.edge_count() == 2


def test_adjacency_reflects_multiple_edges(graph):
    hub = graph.insert_vertex("hub")
    spokes = [graph.insert_vertex(f"s{i}") for i in range(3)]
    out_edges = [graph.insert_edge(hub, s, f"out{i}") for i, s in enumerate(spokes)]
    in_edges = [graph.insert_edge(s, hub, f"in{i}") for i, s in enumerate(spokes)]

    assert set(graph.outgoing(hub)) == set(out_edges)
    assert set(graph.incoming(hub)) == set(in_edges)
    assert graph.find_edge(spokes[0], spokes[1]) is None


def test_handles_are_hashable_and_contained(graph):
    v = graph.insert_vertex("v")
    seen = {v: "first"}
    assert seen[v] == "first"
    assert v in graph
