from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from botocore.exceptions import ClientError

from src.adapters.aws import sqs_client
from src.app.ports.output import IQueueService

logger = logging.getLogger(__name__)

_MISSING_QUEUE_CODES = {"AWS.SimpleQueueService.NonExistentQueue", "QueueDoesNotExist"}


def _error_code(exc: ClientError) -> str | None:
    response = getattr(exc, "response", None)
    if not isinstance(response, dict):
        return None
    return response.get("Error", {}).get("Code")


@dataclass(slots=True)
class SQSQueueAdapter(IQueueService):
    """SQS transport for ``findPath`` journey requests (supports LocalStack via env).

    Messages are JSON objects. Received messages are deleted as soon as they
    are decoded; the worker records failures in the result repository instead
    of relying on redelivery.

    Env vars:
      - SQS_QUEUE_URL
      - ENDPOINT_URL (preferred for LocalStack)
      - USE_LOCALSTACK, LOCALSTACK_ENDPOINT_URL, AWS_REGION (legacy)
    """

    queue_url: str | None = None

    def _queue_url(self) -> str:
        value = self.queue_url or os.getenv("SQS_QUEUE_URL")
        if not value:
            raise RuntimeError("Missing SQS_QUEUE_URL")
        return value

    def send_request(self, message: Mapping[str, Any]) -> str:
        resp = sqs_client().send_message(
            QueueUrl=self._queue_url(), MessageBody=json.dumps(dict(message))
        )
        return str(resp.get("MessageId", ""))

    def receive_requests(
        self, *, max_messages: int = 1, wait_time_s: int = 10
    ) -> list[Mapping[str, Any]]:
        sqs = sqs_client()
        queue_url = self._queue_url()

        try:
            resp = sqs.receive_message(
                QueueUrl=queue_url,
                MaxNumberOfMessages=max(1, min(10, int(max_messages))),
                WaitTimeSeconds=max(0, min(20, int(wait_time_s))),
            )
        except ClientError as exc:
            # LocalStack race: the worker may poll before the queue is created.
            if _error_code(exc) in _MISSING_QUEUE_CODES:
                logger.debug("Queue %s does not exist yet", queue_url)
                return []
            raise

        bodies: list[Mapping[str, Any]] = []
        for msg in resp.get("Messages", []) or []:
            raw_body = msg.get("Body")
            if raw_body is None:
                continue

            try:
                bodies.append(json.loads(raw_body))
            except json.JSONDecodeError:
                logger.warning("Dropping undecodable message %s", msg.get("MessageId"))
                bodies.append({"raw": raw_body})

            receipt = msg.get("ReceiptHandle")
            if receipt:
                sqs.delete_message(QueueUrl=queue_url, ReceiptHandle=receipt)

        return bodies
