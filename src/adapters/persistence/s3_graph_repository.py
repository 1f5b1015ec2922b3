from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from src.adapters.aws import s3_client
from src.app.ports.output import IGraphRepository
from src.domain.models import TransitGraph

from .graph_document import parse_graph_document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3GraphRepository(IGraphRepository):
    """Planner graph repository backed by a JSON object in S3.

    Env vars:
      - S3_BUCKET: bucket name
      - S3_GRAPH_KEY: object key (e.g. graphs/planner_graph.json)
      - ENDPOINT_URL: preferred LocalStack endpoint (e.g. http://localhost:4566)
      - USE_LOCALSTACK: 1|true to enable LocalStack (legacy toggle)
      - LOCALSTACK_ENDPOINT_URL: fallback endpoint if USE_LOCALSTACK is set (legacy)
      - AWS_REGION: defaults to eu-west-1
    """

    bucket: str | None = None
    key: str | None = None

    _graph: TransitGraph | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("S3_BUCKET")
        if not value:
            raise RuntimeError("Missing S3_BUCKET")
        return value

    def _key(self) -> str:
        value = self.key or os.getenv("S3_GRAPH_KEY")
        if not value:
            raise RuntimeError("Missing S3_GRAPH_KEY")
        return value

    def load_graph(self) -> TransitGraph:
        if self._graph is not None:
            return self._graph

        s3 = s3_client()
        bucket = self._bucket()
        key = self._key()

        obj = s3.get_object(Bucket=bucket, Key=key)
        body = obj["Body"].read()

        self._graph = parse_graph_document(body)
        logger.info(
            "Loaded planner graph from s3://%s/%s: %d stops, %d edges",
            bucket,
            key,
            len(self._graph),
            self._graph.edge_count,
        )
        return self._graph
