from __future__ import annotations

import os

from src.app.ports.output import IGraphRepository

from .local_graph_repository import LocalGraphRepository
from .s3_graph_repository import S3GraphRepository


def graph_repository_from_env() -> IGraphRepository:
    """Pick the graph repository from GRAPH_SOURCE (``local`` or ``s3``)."""

    source = (os.getenv("GRAPH_SOURCE") or "local").strip().lower()
    if source == "local":
        return LocalGraphRepository()
    if source == "s3":
        return S3GraphRepository()
    raise RuntimeError(f"Unknown GRAPH_SOURCE: {source!r}")
