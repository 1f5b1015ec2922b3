from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from uuid import uuid4

from src.app.ports.output import IJourneyResultRepository, IQueueService
from src.domain.models import StopId


@dataclass(slots=True)
class JourneyJobsService:
    """Submits journey requests to the background worker and reads results."""

    queue_service: IQueueService
    result_repository: IJourneyResultRepository

    def submit(self, *, start_id: StopId, end_id: StopId) -> str:
        request_id = str(uuid4())

        payload: Mapping[str, Any] = {"startId": int(start_id), "endId": int(end_id)}

        self.result_repository.put_pending(request_id=request_id, payload=payload)
        # The worker correlates its reply through requestId.
        self.queue_service.send_request(
            {"type": "findPath", "requestId": request_id, **dict(payload)}
        )

        return request_id

    def get(self, *, request_id: str) -> Mapping[str, Any] | None:
        return self.result_repository.get(request_id=request_id)
