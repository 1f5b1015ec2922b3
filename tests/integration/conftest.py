from __future__ import annotations

import os
import urllib.request

import pytest

DEFAULT_ENDPOINT = "http://localhost:4566"


def _localstack_healthy(endpoint_url: str) -> bool:
    url = endpoint_url.rstrip("/") + "/_localstack/health"
    try:
        with urllib.request.urlopen(url, timeout=1.5) as resp:  # nosec B310
            return 200 <= resp.status < 300
    except OSError:
        return False


_STRICT_ENV_VARS = ("CI", "GITHUB_ACTIONS", "REQUIRE_LOCALSTACK")


def _must_have_localstack() -> bool:
    return any(os.getenv(name) for name in _STRICT_ENV_VARS)


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point boto3 at LocalStack unless the environment already says otherwise."""

    os.environ.setdefault("USE_LOCALSTACK", "true")
    os.environ.setdefault("ENDPOINT_URL", DEFAULT_ENDPOINT)
    os.environ.setdefault("LOCALSTACK_ENDPOINT_URL", os.environ["ENDPOINT_URL"])
    os.environ.setdefault("AWS_REGION", "eu-west-1")

    # LocalStack accepts any credentials, but boto3 refuses to sign without some.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ.get("ENDPOINT_URL") or DEFAULT_ENDPOINT
    if _localstack_healthy(endpoint_url):
        return endpoint_url

    msg = f"LocalStack not reachable at {endpoint_url}"
    # CI starts LocalStack, so a missing one there is a failure, not a skip.
    if _must_have_localstack():
        pytest.fail(msg, pytrace=False)
    pytest.skip(f"{msg}; skipping integration tests")
