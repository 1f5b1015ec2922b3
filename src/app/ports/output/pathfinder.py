from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future

from src.domain.models import PathResult, StopId, TransitGraph


class IPathfinder(ABC):
    """Execution port for the journey pipeline.

    Implementations decide where the search runs (caller thread, worker
    thread); callers always get a future resolving to the ranked journeys.
    """

    @abstractmethod
    def submit(
        self,
        start_id: StopId,
        end_id: StopId,
        *,
        graph: TransitGraph | None = None,
    ) -> Future[list[PathResult]]:
        """Plan journeys on the given graph, or on the adapter's own graph."""

    def find_journeys(
        self, start_id: StopId, end_id: StopId, *, timeout: float | None = None
    ) -> list[PathResult]:
        return self.submit(start_id, end_id).result(timeout)

    def close(self) -> None:
        """Release worker resources. Pending requests fail."""

    def __enter__(self) -> "IPathfinder":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
