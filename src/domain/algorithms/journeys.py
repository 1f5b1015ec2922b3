from __future__ import annotations

import logging

from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    StopId,
    TransitGraph,
)

from .alternatives import find_alternative_paths
from .walking import augment_with_walking

logger = logging.getLogger(__name__)


def find_journeys(
    graph: TransitGraph,
    start_id: StopId,
    end_id: StopId,
    *,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> list[PathResult]:
    """Ranked journeys from start_id to end_id, best first.

    Always returns at least one entry: a single not-found result when the
    stops are not connected. The first entry may carry walking suggestions;
    the plain transit journeys follow it as alternatives.
    """

    if start_id == end_id:
        return [PathResult.trivial(start_id)]

    transit = find_alternative_paths(graph, start_id, end_id, config=config)
    transit_best = transit[0] if transit else PathResult.not_found()
    best = augment_with_walking(graph, start_id, end_id, transit_best, config=config)

    candidates = [best]
    if best is not transit_best:
        candidates.append(transit_best)
    candidates.extend(transit[1:])

    journeys: list[PathResult] = []
    seen: set[tuple] = set()
    for result in candidates:
        if not result.found or len(journeys) >= config.max_alternatives:
            continue
        # Walking variants start or end elsewhere, so only identical plain
        # transit journeys can collide here.
        key = (result.walking_origin, result.walking_destination, result.signature)
        if key in seen:
            continue
        seen.add(key)
        journeys.append(result)

    logger.debug(
        "Journeys %s -> %s: %d found, walking=%s",
        start_id,
        end_id,
        len(journeys),
        best.has_walking,
    )
    return journeys or [PathResult.not_found()]
