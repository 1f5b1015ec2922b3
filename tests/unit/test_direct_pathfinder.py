from __future__ import annotations

import pytest

from src.adapters.workers import DirectPathfinder
from src.app.services.journey_planner import JourneyPlanner


def test_direct_pathfinder_returns_resolved_future(transfer_graph) -> None:
    with DirectPathfinder(planner=JourneyPlanner(graph=transfer_graph)) as finder:
        future = finder.submit(1, 3)

        assert future.done()
        results = future.result()
        assert results[0].path == (1, 2, 3)
        assert finder.find_journeys(3, 1)[0].found is False


def test_direct_pathfinder_accepts_a_per_request_graph(
    transfer_graph, make_graph
) -> None:
    other = make_graph([(5, 6, ["9"], 10.0)])
    finder = DirectPathfinder(planner=JourneyPlanner(graph=transfer_graph))

    assert finder.submit(5, 6, graph=other).result()[0].suggested_route == "9"


def test_direct_pathfinder_sets_errors_on_the_future(transfer_graph) -> None:
    class _Broken(JourneyPlanner):
        def find_journeys(self, start_id, end_id):
            raise RuntimeError("planner exploded")

    finder = DirectPathfinder(planner=_Broken(graph=transfer_graph))
    future = finder.submit(1, 3)

    with pytest.raises(RuntimeError, match="planner exploded"):
        future.result()
