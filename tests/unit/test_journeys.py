from __future__ import annotations

import random

import networkx as nx
import pytest

from src.domain.algorithms.journeys import find_journeys
from src.domain.models import PlannerConfig, TransitGraph

SEEDS = list(range(12))


def _random_graph(
    make_graph, seed: int, *, stops: int = 10, edges: int = 22
) -> TransitGraph:
    rng = random.Random(seed)
    routes = ["1", "2", "3", "4"]
    specs = []
    for _ in range(edges):
        a, b = rng.sample(range(1, stops + 1), 2)
        specs.append((a, b, rng.sample(routes, rng.randint(1, 2)), 100.0))
    return make_graph(specs, stops=range(1, stops + 1))


def _stop_graph(graph: TransitGraph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(graph.stop_ids())
    for stop_id in graph.stop_ids():
        for edge in graph.edges_from(stop_id):
            g.add_edge(stop_id, edge.to)
    return g


def _optimal_cost(graph: TransitGraph, start: int, end: int) -> float:
    """Cheapest (stop, route) state path, computed independently with networkx."""

    config = PlannerConfig()
    arriving: dict[int, set] = {stop_id: set() for stop_id in graph.stop_ids()}
    for stop_id in graph.stop_ids():
        for edge in graph.edges_from(stop_id):
            arriving[edge.to].update(edge.routes)

    g = nx.DiGraph()
    for stop_id in graph.stop_ids():
        for edge in graph.edges_from(stop_id):
            for current in [None, *arriving[stop_id]]:
                for route in edge.routes:
                    weight = config.stop_cost
                    if current is not None and current != route:
                        weight += config.transfer_penalty
                    g.add_edge((stop_id, current), (edge.to, route), weight=weight)
    for route in arriving[end]:
        g.add_edge((end, route), "sink", weight=0)

    return nx.dijkstra_path_length(g, (start, None), "sink")


def test_same_stop_gives_single_trivial_journey(transfer_graph) -> None:
    journeys = find_journeys(transfer_graph, 2, 2)

    assert len(journeys) == 1
    only = journeys[0]
    assert only.found
    assert only.path == (2,)
    assert only.transfers == 0
    assert only.total_distance_m == 0.0


def test_disconnected_stops_give_single_not_found(two_component_graph) -> None:
    journeys = find_journeys(two_component_graph, 1, 11)

    assert len(journeys) == 1
    assert not journeys[0].found
    assert journeys[0].segments == ()


def test_transfer_scenario(transfer_graph) -> None:
    best = find_journeys(transfer_graph, 1, 3)[0]

    assert best.transfers == 1
    assert best.total_stops == 2
    assert best.suggested_route == "1"


def test_walking_journey_comes_first_then_transit(make_graph) -> None:
    graph = make_graph(
        [
            (1, 3, ["a"], 800.0),
            (3, 4, ["b"], 800.0),
            (4, 9, ["c"], 800.0),
            (2, 9, ["d"], 3000.0),
        ],
        coords={1: (16.80, 96.10), 2: (16.802, 96.10)},
    )
    journeys = find_journeys(graph, 1, 9)

    assert journeys[0].walking_origin is not None
    assert journeys[0].path == (2, 9)
    assert not journeys[1].has_walking
    assert journeys[1].path == (1, 3, 4, 9)
    assert len(journeys) <= 3


@pytest.mark.parametrize("seed", SEEDS)
def test_found_matches_reachability(make_graph, seed: int) -> None:
    graph = _random_graph(make_graph, seed)
    reach = _stop_graph(graph)

    for start in graph.stop_ids():
        for end in graph.stop_ids():
            if start == end:
                continue
            journeys = find_journeys(graph, start, end)
            assert journeys[0].found is nx.has_path(reach, start, end)


@pytest.mark.parametrize("seed", SEEDS)
def test_journey_invariants_on_random_graphs(make_graph, seed: int) -> None:
    graph = _random_graph(make_graph, seed)
    reach = _stop_graph(graph)

    for start in graph.stop_ids():
        for end in graph.stop_ids():
            if start == end or not nx.has_path(reach, start, end):
                continue
            journeys = find_journeys(graph, start, end)

            assert 1 <= len(journeys) <= 3
            signatures = [j.signature for j in journeys]
            assert len(set(signatures)) == len(signatures)

            best = journeys[0]
            assert best.cost() == _optimal_cost(graph, start, end)

            for journey in journeys:
                assert journey.path[0] == start and journey.path[-1] == end
                assert journey.total_stops == len(journey.segments)
                assert journey.transfers == sum(
                    s.is_transfer_point for s in journey.segments[:-1]
                )
                assert not journey.segments[-1].is_transfer_point
                for seg, nxt in zip(journey.segments, journey.segments[1:]):
                    assert seg.to_id == nxt.from_id
                    assert seg.route_used in seg.routes
                    assert seg.is_transfer_point is (seg.route_used != nxt.route_used)
