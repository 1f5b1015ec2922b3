from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    StopId,
    TransitGraph,
    WalkingSuggestion,
)

from .geo_utils import haversine_distance_m, walking_time_minutes
from .route_search import find_best_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NearbyStop:
    stop_id: StopId
    distance_m: float


def find_nearby_stops(
    graph: TransitGraph, stop_id: StopId, *, radius_m: float = 500.0
) -> list[NearbyStop]:
    """Stops served by at least one route within radius_m, closest first."""

    source = graph.node(stop_id)
    if source is None:
        return []

    origin = source.location
    nearby: list[NearbyStop] = []
    for node in graph.nodes_by_id.values():
        if node.id == stop_id or not graph.edges_from(node.id):
            continue
        d = haversine_distance_m(origin, node.location)
        if d <= radius_m:
            nearby.append(NearbyStop(stop_id=node.id, distance_m=d))

    nearby.sort(key=lambda n: (n.distance_m, n.stop_id))
    return nearby


def _suggestion(
    graph: TransitGraph,
    *,
    from_id: StopId,
    to_id: StopId,
    distance_m: float,
    config: PlannerConfig,
) -> WalkingSuggestion:
    return WalkingSuggestion(
        from_stop_id=from_id,
        from_stop_name=graph.display_name(from_id),
        to_stop_id=to_id,
        to_stop_name=graph.display_name(to_id),
        distance_m=int(round(distance_m)),
        time_minutes=walking_time_minutes(
            distance_m, speed_m_per_min=config.walking_speed_m_per_min
        ),
    )


def augment_with_walking(
    graph: TransitGraph,
    start_id: StopId,
    end_id: StopId,
    transit_best: PathResult,
    *,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> PathResult:
    """Return a walking-annotated journey if walking is clearly better.

    Walking from the origin to a nearby stop, from a nearby stop to the
    destination, and walking at both ends are tried in that order. A candidate
    must beat the current best cost by the benefit threshold (twice the
    threshold when walking at both ends). Later winners replace earlier ones;
    if nothing qualifies, transit_best is returned unchanged.
    """

    def cost_of(result: PathResult) -> float:
        return result.cost(
            transfer_penalty=config.transfer_penalty, stop_cost=config.stop_cost
        )

    threshold = config.walking_benefit_threshold
    best = transit_best
    best_cost = cost_of(transit_best)
    walk_origin: WalkingSuggestion | None = None
    walk_destination: WalkingSuggestion | None = None

    nearby_origins = find_nearby_stops(
        graph, start_id, radius_m=config.walking_radius_m
    )
    nearby_destinations = find_nearby_stops(
        graph, end_id, radius_m=config.walking_radius_m
    )

    for nearby in nearby_origins[: config.max_walking_candidates]:
        result = find_best_path(graph, nearby.stop_id, end_id, config=config)
        cost = cost_of(result)
        if result.found and cost + threshold < best_cost:
            logger.debug(
                "Walking from %s to %s saves %s",
                start_id,
                nearby.stop_id,
                best_cost - cost,
            )
            best, best_cost = result, cost
            walk_origin = _suggestion(
                graph,
                from_id=start_id,
                to_id=nearby.stop_id,
                distance_m=nearby.distance_m,
                config=config,
            )
            walk_destination = None

    for nearby in nearby_destinations[: config.max_walking_candidates]:
        result = find_best_path(graph, start_id, nearby.stop_id, config=config)
        cost = cost_of(result)
        if result.found and cost + threshold < best_cost:
            logger.debug(
                "Walking from %s to %s saves %s",
                nearby.stop_id,
                end_id,
                best_cost - cost,
            )
            best, best_cost = result, cost
            walk_origin = None
            walk_destination = _suggestion(
                graph,
                from_id=nearby.stop_id,
                to_id=end_id,
                distance_m=nearby.distance_m,
                config=config,
            )

    pair_limit = config.max_combined_walking_candidates
    for nearby_origin in nearby_origins[:pair_limit]:
        for nearby_dest in nearby_destinations[:pair_limit]:
            result = find_best_path(
                graph, nearby_origin.stop_id, nearby_dest.stop_id, config=config
            )
            cost = cost_of(result)
            if result.found and cost + 2 * threshold < best_cost:
                logger.debug(
                    "Walking at both ends (%s, %s) saves %s",
                    nearby_origin.stop_id,
                    nearby_dest.stop_id,
                    best_cost - cost,
                )
                best, best_cost = result, cost
                walk_origin = _suggestion(
                    graph,
                    from_id=start_id,
                    to_id=nearby_origin.stop_id,
                    distance_m=nearby_origin.distance_m,
                    config=config,
                )
                walk_destination = _suggestion(
                    graph,
                    from_id=nearby_dest.stop_id,
                    to_id=end_id,
                    distance_m=nearby_dest.distance_m,
                    config=config,
                )

    if walk_origin is None and walk_destination is None:
        return transit_best
    return best.with_walking(origin=walk_origin, destination=walk_destination)
