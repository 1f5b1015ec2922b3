from __future__ import annotations

import logging

from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    RouteId,
    StopId,
    TransitGraph,
)

from .route_search import find_best_path

logger = logging.getLogger(__name__)


def path_signature(result: PathResult) -> tuple[tuple[StopId, StopId, RouteId], ...]:
    """Ordered (from, to, route_used) hops identifying a journey."""

    return result.signature


def find_alternative_paths(
    graph: TransitGraph,
    start_id: StopId,
    end_id: StopId,
    *,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> list[PathResult]:
    """Best journey followed by up to max_alternatives - 1 different ones.

    Each accepted journey's hops are penalized for the following runs, which
    pushes the search onto other routes or stops. This is a greedy
    approximation: the second journey is a sufficiently different one, not
    necessarily the true second best.
    """

    results: list[PathResult] = []
    seen: set[tuple[tuple[StopId, StopId, RouteId], ...]] = set()
    avoid: set[tuple[StopId, StopId, RouteId]] = set()

    for i in range(config.max_alternatives):
        result = find_best_path(
            graph, start_id, end_id, avoid=frozenset(avoid), config=config
        )
        if not result.found:
            if i == 0:
                results.append(result)
            break

        signature = path_signature(result)
        if signature in seen:
            logger.debug("Alternative %d repeats an earlier journey, stopping", i + 1)
            break

        seen.add(signature)
        results.append(result)
        avoid.update(signature)

    return results
