from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass

from src.app.ports.output import IPathfinder
from src.app.services.journey_planner import JourneyPlanner
from src.domain.models import PathResult, StopId, TransitGraph


@dataclass(slots=True)
class DirectPathfinder(IPathfinder):
    """Runs the pipeline on the caller's thread.

    The returned future is already resolved; pipeline errors are set on it
    rather than raised, so callers handle both adapters the same way.
    """

    planner: JourneyPlanner

    def submit(
        self,
        start_id: StopId,
        end_id: StopId,
        *,
        graph: TransitGraph | None = None,
    ) -> Future[list[PathResult]]:
        future: Future[list[PathResult]] = Future()
        planner = self.planner
        if graph is not None:
            planner = JourneyPlanner(graph=graph, config=self.planner.config)

        try:
            results = planner.find_journeys(start_id, end_id)
        except Exception as exc:
            future.set_exception(exc)
        else:
            future.set_result(results)
        return future
