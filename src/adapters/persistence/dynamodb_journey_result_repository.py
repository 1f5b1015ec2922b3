from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from src.adapters.aws import dynamodb_client
from src.app.ports.output import IJourneyResultRepository

# DynamoDB items are capped at 400 KB; keep error strings well below that.
MAX_ERROR_LENGTH = 4000


class JobStatus(str, Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(slots=True)
class DynamoDbJourneyResultRepository(IJourneyResultRepository):
    """Stores journey job status and results in DynamoDB.

    Items are keyed by ``request_id`` (string hash key). ``payload`` and
    ``result`` are stored as JSON strings.

    Env vars:
      - DDB_TABLE (default: journey-results)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    table_name: str | None = None

    def _table(self) -> str:
        return self.table_name or os.getenv("DDB_TABLE") or "journey-results"

    def put_pending(self, *, request_id: str, payload: Mapping[str, Any]) -> None:
        now_ms = _now_ms()
        dynamodb_client().put_item(
            TableName=self._table(),
            Item={
                "request_id": {"S": request_id},
                "status": {"S": JobStatus.PENDING.value},
                "created_at_ms": {"N": str(now_ms)},
                "updated_at_ms": {"N": str(now_ms)},
                "payload": {"S": json.dumps(dict(payload))},
            },
        )

    def put_success(self, *, request_id: str, result: Mapping[str, Any]) -> None:
        dynamodb_client().update_item(
            TableName=self._table(),
            Key={"request_id": {"S": request_id}},
            UpdateExpression="SET #s = :s, updated_at_ms = :u, #r = :r REMOVE #e",
            ExpressionAttributeNames={"#s": "status", "#r": "result", "#e": "error"},
            ExpressionAttributeValues={
                ":s": {"S": JobStatus.SUCCESS.value},
                ":u": {"N": str(_now_ms())},
                ":r": {"S": json.dumps(dict(result))},
            },
        )

    def put_error(self, *, request_id: str, error: str) -> None:
        dynamodb_client().update_item(
            TableName=self._table(),
            Key={"request_id": {"S": request_id}},
            UpdateExpression="SET #s = :s, updated_at_ms = :u, #e = :e",
            ExpressionAttributeNames={"#s": "status", "#e": "error"},
            ExpressionAttributeValues={
                ":s": {"S": JobStatus.ERROR.value},
                ":u": {"N": str(_now_ms())},
                ":e": {"S": error[:MAX_ERROR_LENGTH]},
            },
        )

    def get(self, *, request_id: str) -> Mapping[str, Any] | None:
        resp = dynamodb_client().get_item(
            TableName=self._table(),
            Key={"request_id": {"S": request_id}},
            ConsistentRead=True,
        )
        item = resp.get("Item")
        if not item:
            return None

        out: dict[str, Any] = {
            "request_id": item["request_id"]["S"],
            "status": item.get("status", {}).get("S"),
            "created_at_ms": int(item.get("created_at_ms", {}).get("N", "0")),
            "updated_at_ms": int(item.get("updated_at_ms", {}).get("N", "0")),
        }
        for name in ("payload", "result"):
            if "S" in item.get(name, {}):
                out[name] = json.loads(item[name]["S"])
        if "S" in item.get("error", {}):
            out["error"] = item["error"]["S"]
        return out
