from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from src.domain.algorithms.journeys import find_journeys
from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    RouteId,
    StopId,
    TransitGraph,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class JourneyPlanner:
    """Application service (use case) for journey planning.

    Holds the graph and the tuning knobs for one process. Construct it once
    and pass it to whoever needs to plan; the domain functions stay pure.
    """

    graph: TransitGraph
    config: PlannerConfig = field(default=DEFAULT_PLANNER_CONFIG)

    def find_journeys(self, start_id: StopId, end_id: StopId) -> list[PathResult]:
        started = time.perf_counter()
        results = find_journeys(self.graph, start_id, end_id, config=self.config)
        duration_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "Planned %s -> %s in %.2f ms (%d journeys, found=%s)",
            start_id,
            end_id,
            duration_ms,
            len(results),
            results[0].found,
        )
        return results

    def direct_routes(self, from_id: StopId, to_id: StopId) -> tuple[RouteId, ...]:
        return self.graph.direct_routes(from_id, to_id)
