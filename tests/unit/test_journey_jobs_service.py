from __future__ import annotations

from typing import Any, Mapping

from src.app.ports.output import IJourneyResultRepository, IQueueService
from src.app.services.journey_jobs_service import JourneyJobsService


class _FakeQueue(IQueueService):
    def __init__(self) -> None:
        self.published: list[Mapping[str, Any]] = []

    def send_request(self, message: Mapping[str, Any]) -> str:
        self.published.append(dict(message))
        return "msg-1"

    def receive_requests(self, *, max_messages: int = 1, wait_time_s: int = 10):
        out = self.published[:max_messages]
        self.published = self.published[max_messages:]
        return out


class _FakeResults(IJourneyResultRepository):
    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}

    def put_pending(self, *, request_id: str, payload: Mapping[str, Any]) -> None:
        self.items[request_id] = {
            "request_id": request_id,
            "status": "PENDING",
            "payload": dict(payload),
        }

    def put_success(self, *, request_id: str, result: Mapping[str, Any]) -> None:
        self.items[request_id].update(status="SUCCESS", result=dict(result))

    def put_error(self, *, request_id: str, error: str) -> None:
        self.items[request_id].update(status="ERROR", error=error)

    def get(self, *, request_id: str):
        return self.items.get(request_id)


def test_submit_stores_pending_job_and_publishes_find_path() -> None:
    queue, results = _FakeQueue(), _FakeResults()
    service = JourneyJobsService(queue_service=queue, result_repository=results)

    request_id = service.submit(start_id=12, end_id=34)

    assert request_id
    assert queue.published == [
        {"type": "findPath", "requestId": request_id, "startId": 12, "endId": 34}
    ]
    job = service.get(request_id=request_id)
    assert job is not None
    assert job["status"] == "PENDING"
    assert job["payload"] == {"startId": 12, "endId": 34}
    assert service.get(request_id="missing") is None
