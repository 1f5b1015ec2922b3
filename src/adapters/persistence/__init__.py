from .dynamodb_journey_result_repository import DynamoDbJourneyResultRepository
from .graph_source import graph_repository_from_env
from .local_graph_repository import LocalGraphRepository
from .s3_graph_repository import S3GraphRepository

__all__ = [
    "DynamoDbJourneyResultRepository",
    "LocalGraphRepository",
    "S3GraphRepository",
    "graph_repository_from_env",
]
