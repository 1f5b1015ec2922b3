from __future__ import annotations

import logging
import os
import time
from typing import Any, Mapping

from src.adapters.config import configure_logging, planner_config_from_env
from src.adapters.messaging.pathfinder_protocol import FIND_PATH, results_to_wire
from src.adapters.messaging.sqs_queue_adapter import SQSQueueAdapter
from src.adapters.persistence import (
    DynamoDbJourneyResultRepository,
    graph_repository_from_env,
)
from src.app.ports.output import IJourneyResultRepository, IQueueService
from src.app.services.journey_planner import JourneyPlanner

logger = logging.getLogger("src.worker")


def handle_message(
    msg: Mapping[str, Any],
    *,
    planner: JourneyPlanner,
    results: IJourneyResultRepository,
) -> bool:
    """Process one queued request. Returns False when the message is skipped."""

    if msg.get("type") != FIND_PATH:
        logger.warning("Skipping message of type %r", msg.get("type"))
        return False

    request_id = str(msg.get("requestId") or "")
    if not request_id:
        logger.warning("Skipping findPath message without requestId")
        return False

    try:
        started = time.perf_counter()
        journeys = planner.find_journeys(int(msg["startId"]), int(msg["endId"]))
        duration_ms = (time.perf_counter() - started) * 1000.0
        results.put_success(
            request_id=request_id,
            result={"results": results_to_wire(journeys), "duration": duration_ms},
        )
    except Exception as exc:
        # The adapter already deleted the message; the job record carries the error.
        logger.exception("Journey request %s failed", request_id)
        results.put_error(request_id=request_id, error=f"{type(exc).__name__}: {exc}")
    return True


def main(
    *,
    queue: IQueueService | None = None,
    results: IJourneyResultRepository | None = None,
    planner: JourneyPlanner | None = None,
) -> None:
    configure_logging()

    queue = queue or SQSQueueAdapter()
    results = results or DynamoDbJourneyResultRepository()
    if planner is None:
        planner = JourneyPlanner(
            graph=graph_repository_from_env().load_graph(),
            config=planner_config_from_env(),
        )

    loop = os.getenv("WORKER_LOOP", "1").strip().lower() not in {"0", "false", "no"}
    logger.info("Journey worker started (loop=%s)", loop)

    while True:
        messages = queue.receive_requests(max_messages=5, wait_time_s=10)
        if not messages:
            if not loop:
                return
            time.sleep(0.2)
            continue

        for msg in messages:
            try:
                handle_message(msg, planner=planner, results=results)
            except Exception:
                # Recording the failure itself failed; keep serving the queue.
                logger.exception("Could not record result for %s", msg.get("requestId"))


if __name__ == "__main__":
    main()
