from __future__ import annotations

import pytest

from src.domain.exceptions import MalformedGraph
from src.domain.models import GraphEdge, GraphNode, TransitGraph


def _node(stop_id: int, name: str = "") -> GraphNode:
    return GraphNode(id=stop_id, name=name, lat=16.8, lng=96.1)


def test_edge_routes_are_sorted_and_deduplicated() -> None:
    edge = GraphEdge(to=2, routes=("36", "1", "36"), distance_m=120.0)
    assert edge.routes == ("1", "36")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"routes": ()},
        {"routes": ("1",), "distance_m": -1.0},
        {"routes": ("1",), "distance_m": float("nan")},
    ],
)
def test_edge_rejects_invalid_values(kwargs: dict) -> None:
    with pytest.raises(MalformedGraph):
        GraphEdge(to=2, **kwargs)


def test_graph_rejects_edge_to_unknown_stop() -> None:
    with pytest.raises(MalformedGraph, match="unknown stop 99"):
        TransitGraph(
            nodes_by_id={1: _node(1)},
            adjacency={1: (GraphEdge(to=99, routes=("1",)),)},
        )


def test_graph_rejects_adjacency_for_unknown_stop() -> None:
    with pytest.raises(MalformedGraph):
        TransitGraph(nodes_by_id={1: _node(1)}, adjacency={2: ()})


def test_graph_rejects_key_id_mismatch() -> None:
    with pytest.raises(MalformedGraph):
        TransitGraph(nodes_by_id={1: _node(2)}, adjacency={})


def test_malformed_graph_is_a_value_error() -> None:
    assert issubclass(MalformedGraph, ValueError)


def test_graph_is_read_only() -> None:
    graph = TransitGraph(nodes_by_id={1: _node(1)}, adjacency={1: ()})
    with pytest.raises(TypeError):
        graph.nodes_by_id[2] = _node(2)  # type: ignore[index]


def test_lookups_and_direct_routes() -> None:
    graph = TransitGraph(
        nodes_by_id={1: _node(1, "Sule"), 2: _node(2), 3: _node(3)},
        adjacency={
            1: (GraphEdge(to=2, routes=("2", "1"), distance_m=400.0),),
            2: (),
        },
    )

    assert 1 in graph and 4 not in graph
    assert len(graph) == 3
    assert graph.edge_count == 1
    assert graph.has_adjacency(2)
    assert not graph.has_adjacency(3)
    assert graph.edges_from(3) == ()

    assert graph.display_name(1) == "Sule"
    assert graph.display_name(2) == "Stop 2"
    assert graph.display_name(42) == "Stop 42"

    assert graph.direct_routes(1, 2) == ("1", "2")
    assert graph.direct_routes(2, 1) == ()
    assert graph.are_directly_connected(1, 2)
    assert not graph.are_directly_connected(2, 1)
