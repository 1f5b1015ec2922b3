from __future__ import annotations

import itertools
import logging
import queue
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Mapping

from src.adapters.messaging.pathfinder_protocol import (
    ERROR,
    FIND_PATH,
    READY,
    RESULT,
    error_message,
    find_path_request,
    ready_message,
    result_message,
    results_from_wire,
)
from src.adapters.persistence.graph_document import (
    graph_to_document,
    parse_graph_document,
)
from src.app.ports.output import IPathfinder
from src.app.services.journey_planner import JourneyPlanner
from src.domain.exceptions import WorkerError
from src.domain.models import (
    DEFAULT_PLANNER_CONFIG,
    PathResult,
    PlannerConfig,
    StopId,
    TransitGraph,
)

logger = logging.getLogger(__name__)

Message = Mapping[str, Any]

# How often the dispatcher checks that the worker thread is still alive.
_LIVENESS_POLL_S = 0.5


class PathfinderWorker(threading.Thread):
    """Serves ``findPath`` messages one at a time on a dedicated thread.

    The worker keeps one persistent planner for its own graph; a request may
    instead ship a graph document, which is decoded for that request only.
    Every reply goes through ``post``.
    """

    def __init__(
        self,
        *,
        post: Callable[[dict[str, Any]], None],
        graph: TransitGraph | None = None,
        config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
    ) -> None:
        super().__init__(name="pathfinder-worker", daemon=True)
        self._post = post
        self._config = config
        self._planner = (
            JourneyPlanner(graph=graph, config=config) if graph is not None else None
        )
        self._inbox: queue.Queue[Message | None] = queue.Queue()

    def post_message(self, message: Message) -> None:
        self._inbox.put(message)

    def stop(self) -> None:
        self._inbox.put(None)

    def run(self) -> None:
        logger.info("Pathfinder worker ready")
        self._post(ready_message())
        while True:
            message = self._inbox.get()
            if message is None:
                return
            reply = self.handle_message(message)
            if reply is not None:
                self._post(reply)

    def handle_message(self, message: Message) -> dict[str, Any] | None:
        if message.get("type") != FIND_PATH:
            logger.warning("Ignoring message of type %r", message.get("type"))
            return None

        request_id = message.get("requestId")
        try:
            planner = self._planner_for(message)
            started = time.perf_counter()
            results = planner.find_journeys(
                int(message["startId"]), int(message["endId"])
            )
            duration_ms = (time.perf_counter() - started) * 1000.0
            return result_message(
                request_id=request_id, results=results, duration_ms=duration_ms
            )
        except Exception as exc:
            logger.exception("Pathfinding request %s failed", request_id)
            return error_message(
                request_id=request_id, message=str(exc) or type(exc).__name__
            )

    def _planner_for(self, message: Message) -> JourneyPlanner:
        document = message.get("graph")
        if document is not None:
            return JourneyPlanner(
                graph=parse_graph_document(document), config=self._config
            )
        if self._planner is None:
            raise RuntimeError("Worker has no graph loaded and none was sent")
        return self._planner


class PathfinderWorkerClient(IPathfinder):
    """Caller side of the worker boundary.

    Requests are numbered; a pending table maps each request id to the
    future handed back to the caller. Replies resolve and remove their entry.
    Closing the client, or the worker thread dying, fails whatever is still
    pending, and later submits fail at once. A running request cannot be
    stopped; cancelling its future only drops the reply when it arrives.
    """

    def __init__(
        self,
        graph: TransitGraph | None = None,
        *,
        config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
    ) -> None:
        self._outbox: queue.Queue[dict[str, Any] | None] = queue.Queue()
        self._worker = PathfinderWorker(
            post=self._outbox.put, graph=graph, config=config
        )
        self._pending: dict[int, Future[list[PathResult]]] = {}
        self._lock = threading.Lock()
        self._request_ids = itertools.count(1)
        self._ready = threading.Event()
        self._closed = False

        self._dispatcher = threading.Thread(
            target=self._dispatch, name="pathfinder-dispatch", daemon=True
        )
        self._worker.start()
        self._dispatcher.start()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def wait_ready(self, timeout: float | None = None) -> bool:
        return self._ready.wait(timeout)

    def submit(
        self,
        start_id: StopId,
        end_id: StopId,
        *,
        graph: TransitGraph | None = None,
    ) -> Future[list[PathResult]]:
        future: Future[list[PathResult]] = Future()
        request_id = next(self._request_ids)

        try:
            document = graph_to_document(graph) if graph is not None else None
        except Exception as exc:
            future.set_exception(
                WorkerError(f"Could not serialize graph: {exc}", request_id=request_id)
            )
            return future

        with self._lock:
            if self._closed:
                future.set_exception(
                    WorkerError("Pathfinder worker is closed", request_id=request_id)
                )
                return future
            self._pending[request_id] = future

        self._worker.post_message(
            find_path_request(
                request_id=request_id, start_id=start_id, end_id=end_id, graph=document
            )
        )
        return future

    def close(self, timeout: float | None = 5.0) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._fail_pending("Pathfinder worker closed")

        self._worker.stop()
        self._worker.join(timeout)
        self._outbox.put(None)
        self._dispatcher.join(timeout)

    def _dispatch(self) -> None:
        while True:
            try:
                message = self._outbox.get(timeout=_LIVENESS_POLL_S)
            except queue.Empty:
                if not self._worker.is_alive():
                    with self._lock:
                        self._closed = True
                    self._fail_pending("Pathfinder worker stopped unexpectedly")
                    return
                continue

            if message is None:
                return
            try:
                self._on_message(message)
            except Exception:
                logger.exception("Could not deliver worker reply %r", message)

    def _on_message(self, message: Message) -> None:
        kind = message.get("type")
        if kind == READY:
            self._ready.set()
            return

        request_id = message.get("requestId")
        with self._lock:
            future = self._pending.pop(request_id, None)
        if future is None:
            logger.debug("Dropping reply for unknown request %s", request_id)
            return
        if not future.set_running_or_notify_cancel():
            logger.debug("Dropping reply for cancelled request %s", request_id)
            return

        if kind == RESULT:
            try:
                results = results_from_wire(message.get("results") or [])
            except Exception as exc:
                future.set_exception(
                    WorkerError(f"Malformed worker reply: {exc}", request_id=request_id)
                )
            else:
                future.set_result(results)
                logger.debug(
                    "Request %s completed in %.2f ms",
                    request_id,
                    float(message.get("duration") or 0.0),
                )
        elif kind == ERROR:
            future.set_exception(
                WorkerError(
                    str(message.get("message") or "Pathfinding error"),
                    request_id=request_id,
                )
            )
        else:
            future.set_exception(
                WorkerError(f"Unexpected reply type {kind!r}", request_id=request_id)
            )

    def _fail_pending(self, reason: str) -> None:
        with self._lock:
            pending = list(self._pending.items())
            self._pending.clear()
        for request_id, future in pending:
            if future.set_running_or_notify_cancel():
                future.set_exception(WorkerError(reason, request_id=request_id))
