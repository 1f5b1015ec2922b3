from __future__ import annotations

import pytest

from src.domain.algorithms.path_reconstruction import (
    SearchParent,
    mark_transfer_points,
    reconstruct_path,
)
from src.domain.models import GraphEdge, PathSegment


def _segment(from_id: int, to_id: int, route: str) -> PathSegment:
    return PathSegment(
        from_id=from_id,
        to_id=to_id,
        from_name=f"S{from_id}",
        to_name=f"S{to_id}",
        routes=(route,),
        distance_m=100.0,
        route_used=route,
    )


def test_transfer_marker_sits_on_the_segment_before_the_change() -> None:
    segments = mark_transfer_points(
        [
            _segment(1, 2, "a"),
            _segment(2, 3, "a"),
            _segment(3, 4, "b"),
            _segment(4, 5, "c"),
        ]
    )
    assert [s.is_transfer_point for s in segments] == [False, True, True, False]


def test_reconstruct_follows_parent_links(transfer_graph) -> None:
    e12 = transfer_graph.edges_from(1)[0]
    e23 = transfer_graph.edges_from(2)[0]
    parents = {
        (2, "1"): SearchParent(from_key=(1, None), edge=e12, route="1", cost=1.0),
        (3, "2"): SearchParent(from_key=(2, "1"), edge=e23, route="2", cost=102.0),
    }

    result = reconstruct_path(transfer_graph, parents, start_id=1, end_key=(3, "2"))

    assert result.path == (1, 2, 3)
    assert result.transfers == 1
    assert result.total_distance_m == 1000.0
    assert result.segments[1].from_name == "S2"


def test_broken_parent_chain_raises(transfer_graph) -> None:
    edge = GraphEdge(to=3, routes=("2",), distance_m=1.0)
    parents = {
        (3, "2"): SearchParent(from_key=(2, "1"), edge=edge, route="2", cost=1.0)
    }

    with pytest.raises(RuntimeError, match="Broken parent chain"):
        reconstruct_path(transfer_graph, parents, start_id=1, end_key=(3, "2"))
