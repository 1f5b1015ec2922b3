from __future__ import annotations

from typing import Callable, Iterable

import pytest

from src.domain.models import GraphEdge, GraphNode, TransitGraph

EdgeSpec = tuple[int, int, Iterable[str], float]
GraphBuilder = Callable[..., TransitGraph]


def build_graph(
    edges: Iterable[EdgeSpec],
    *,
    coords: dict[int, tuple[float, float]] | None = None,
    names: dict[int, str] | None = None,
    stops: Iterable[int] = (),
) -> TransitGraph:
    """Small graph helper: every stop gets an adjacency entry.

    Stops without explicit coordinates are laid out ~5.5 km apart so that
    walking never kicks in unless a test asks for it.
    """

    edges = list(edges)
    coords = dict(coords or {})
    names = dict(names or {})

    ids = set(stops) | {e[0] for e in edges} | {e[1] for e in edges} | set(coords)
    nodes = {}
    for i, stop_id in enumerate(sorted(ids)):
        lat, lng = coords.get(stop_id, (16.0 + 0.05 * i, 96.0))
        nodes[stop_id] = GraphNode(
            id=stop_id, name=names.get(stop_id, f"S{stop_id}"), lat=lat, lng=lng
        )

    adjacency: dict[int, list[GraphEdge]] = {stop_id: [] for stop_id in ids}
    for from_id, to_id, routes, distance in edges:
        adjacency[from_id].append(
            GraphEdge(to=to_id, routes=tuple(routes), distance_m=distance)
        )

    return TransitGraph(
        nodes_by_id=nodes,
        adjacency={k: tuple(v) for k, v in adjacency.items()},
    )


@pytest.fixture
def make_graph() -> GraphBuilder:
    return build_graph


@pytest.fixture
def transfer_graph() -> TransitGraph:
    # 1 -> 2 on route "1", 2 -> 3 on route "2".
    return build_graph([(1, 2, ["1"], 500.0), (2, 3, ["2"], 500.0)])


@pytest.fixture
def two_component_graph() -> TransitGraph:
    return build_graph(
        [
            (1, 2, ["1"], 300.0),
            (2, 1, ["1"], 300.0),
            (10, 11, ["5"], 300.0),
            (11, 10, ["5"], 300.0),
        ]
    )
