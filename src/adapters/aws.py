from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

import boto3
from botocore.client import BaseClient

from src.adapters.config import env_bool

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_sqs import SQSClient
else:
    DynamoDBClient = BaseClient  # type: ignore[misc,assignment]
    S3Client = BaseClient  # type: ignore[misc,assignment]
    SQSClient = BaseClient  # type: ignore[misc,assignment]

DEFAULT_REGION = "eu-west-1"
DEFAULT_LOCALSTACK_URL = "http://localhost:4566"


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    region: str
    endpoint_url: str | None

    @classmethod
    def from_env(cls) -> "AwsRuntimeConfig":
        """Resolve region and endpoint from the environment.

        Endpoint priority:
          1) ENDPOINT_URL (explicit override; preferred for LocalStack)
          2) LOCALSTACK_ENDPOINT_URL if USE_LOCALSTACK is enabled (legacy)
          3) None (real AWS)
        """

        endpoint_url = (os.getenv("ENDPOINT_URL") or "").strip() or None
        if endpoint_url is None and env_bool("USE_LOCALSTACK"):
            endpoint_url = os.getenv("LOCALSTACK_ENDPOINT_URL", DEFAULT_LOCALSTACK_URL)
        return cls(
            region=os.getenv("AWS_REGION", DEFAULT_REGION),
            endpoint_url=endpoint_url,
        )


@lru_cache(maxsize=None)
def _client(service: str, region: str, endpoint_url: str | None) -> BaseClient:
    # boto3 clients are thread-safe; one per (service, region, endpoint) is enough.
    session = boto3.session.Session(region_name=region)
    client = cast(Any, session).client(service, endpoint_url=endpoint_url)
    return cast(BaseClient, client)


def boto3_client(service: str) -> BaseClient:
    cfg = AwsRuntimeConfig.from_env()
    return _client(service, cfg.region, cfg.endpoint_url)


def s3_client() -> S3Client:
    return cast(S3Client, boto3_client("s3"))


def sqs_client() -> SQSClient:
    return cast(SQSClient, boto3_client("sqs"))


def dynamodb_client() -> DynamoDBClient:
    return cast(DynamoDBClient, boto3_client("dynamodb"))
