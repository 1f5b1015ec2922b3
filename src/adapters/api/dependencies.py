from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.config import planner_config_from_env
from src.adapters.messaging.sqs_queue_adapter import SQSQueueAdapter
from src.adapters.persistence import (
    DynamoDbJourneyResultRepository,
    graph_repository_from_env,
)
from src.app.ports.output import IGraphRepository
from src.app.services.journey_jobs_service import JourneyJobsService
from src.app.services.journey_planner import JourneyPlanner


@lru_cache(maxsize=1)
def get_graph_repository() -> IGraphRepository:
    # The repository caches the parsed graph, so one instance per process.
    return graph_repository_from_env()


def get_journey_planner() -> JourneyPlanner:
    return JourneyPlanner(
        graph=get_graph_repository().load_graph(),
        config=planner_config_from_env(),
    )


def get_journey_jobs_service() -> JourneyJobsService:
    if not os.getenv("SQS_QUEUE_URL"):
        raise RuntimeError("Queue service not configured")

    queue = SQSQueueAdapter()
    results = DynamoDbJourneyResultRepository()
    return JourneyJobsService(queue_service=queue, result_repository=results)
