from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    RouteId,
    StopId,
    TransitGraph,
)

from .path_reconstruction import SearchParent, StateKey, reconstruct_path
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

# (from_stop, to_stop, route) hops that should be steered away from.
AvoidSet = frozenset[tuple[StopId, StopId, RouteId]]

EMPTY_AVOID_SET: AvoidSet = frozenset()


@dataclass(frozen=True, slots=True)
class SearchState:
    stop_id: StopId
    current_route: RouteId | None
    cost: float
    stops: int
    transfers: int

    @property
    def key(self) -> StateKey:
        return (self.stop_id, self.current_route)


@dataclass(slots=True)
class SearchOutcome:
    """Raw output of one route-aware search, before reconstruction."""

    end_key: StateKey | None = None
    best_cost: float = float("inf")
    parents: dict[StateKey, SearchParent] = field(default_factory=dict)
    iterations: int = 0
    exhausted: bool = False  # iteration cap reached

    @property
    def found(self) -> bool:
        return self.end_key is not None and not self.exhausted


def run_search(
    graph: TransitGraph,
    start_id: StopId,
    end_id: StopId,
    *,
    avoid: AvoidSet = EMPTY_AVOID_SET,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
    queue: PriorityQueue[SearchState] | None = None,
) -> SearchOutcome:
    """Dijkstra over (stop, arrival route) states.

    Leaving a stop on the route the rider arrived on is free; boarding any
    other route costs a transfer. Hops listed in ``avoid`` carry an extra
    penalty. Costs only grow along a path, so the search stops as soon as a
    dequeued state is more expensive than the best arrival at ``end_id``.
    """

    outcome = SearchOutcome()
    pq: PriorityQueue[SearchState] = queue if queue is not None else PriorityQueue()
    pq.enqueue(SearchState(start_id, None, 0.0, 0, 0), 0.0)

    visited: dict[StateKey, float] = {}
    parents = outcome.parents

    while pq:
        outcome.iterations += 1
        if outcome.iterations > config.max_iterations:
            logger.warning(
                "Search %s -> %s hit the iteration cap (%d), visited %d states",
                start_id,
                end_id,
                config.max_iterations,
                len(visited),
            )
            outcome.exhausted = True
            break

        if outcome.iterations % config.progress_log_interval == 0:
            logger.debug(
                "Search progress: %d iterations, %d states visited",
                outcome.iterations,
                len(visited),
            )

        state = pq.dequeue()
        if state is None:
            break
        if state.cost > outcome.best_cost:
            break

        key = state.key
        committed = visited.get(key)
        if committed is not None and committed <= state.cost:
            continue
        visited[key] = state.cost

        if state.stop_id == end_id and state.cost < outcome.best_cost:
            outcome.best_cost = state.cost
            outcome.end_key = key

        for edge in graph.edges_from(state.stop_id):
            for route in edge.routes:
                is_transfer = (
                    state.current_route is not None and state.current_route != route
                )
                step_cost = config.stop_cost
                if is_transfer:
                    step_cost += config.transfer_penalty
                if (state.stop_id, edge.to, route) in avoid:
                    step_cost += config.avoid_penalty
                new_cost = state.cost + step_cost

                next_key: StateKey = (edge.to, route)
                known = visited.get(next_key)
                if known is not None and known <= new_cost:
                    continue

                parent = parents.get(next_key)
                if parent is None or parent.cost > new_cost:
                    parents[next_key] = SearchParent(
                        from_key=key, edge=edge, route=route, cost=new_cost
                    )

                pq.enqueue(
                    SearchState(
                        stop_id=edge.to,
                        current_route=route,
                        cost=new_cost,
                        stops=state.stops + 1,
                        transfers=state.transfers + (1 if is_transfer else 0),
                    ),
                    new_cost,
                )

    return outcome


def find_best_path(
    graph: TransitGraph,
    start_id: StopId,
    end_id: StopId,
    *,
    avoid: AvoidSet = EMPTY_AVOID_SET,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> PathResult:
    """Fewest-transfers, then fewest-stops journey from start_id to end_id."""

    if start_id == end_id:
        return PathResult.trivial(start_id)

    if not graph.has_adjacency(start_id) or not graph.has_adjacency(end_id):
        logger.debug("No adjacency for %s or %s, skipping search", start_id, end_id)
        return PathResult.not_found()

    outcome = run_search(graph, start_id, end_id, avoid=avoid, config=config)
    logger.debug(
        "Search %s -> %s finished after %d iterations (cost=%s)",
        start_id,
        end_id,
        outcome.iterations,
        outcome.best_cost,
    )
    if not outcome.found or outcome.end_key is None:
        return PathResult.not_found()

    return reconstruct_path(
        graph, outcome.parents, start_id=start_id, end_key=outcome.end_key
    )
