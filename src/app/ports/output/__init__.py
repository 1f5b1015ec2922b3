from .graph_repository import IGraphRepository
from .journey_result_repository import IJourneyResultRepository
from .pathfinder import IPathfinder
from .queue_service import IQueueService

__all__ = [
    "IGraphRepository",
    "IJourneyResultRepository",
    "IPathfinder",
    "IQueueService",
]
