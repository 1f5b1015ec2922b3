from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IGraphRepository
from src.domain.models import TransitGraph

from .graph_document import parse_graph_document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalGraphRepository(IGraphRepository):
    """Loads the planner graph from a JSON file.

    Env vars:
      - GRAPH_PATH: path to the planner graph JSON (default: data/planner_graph.json)
    """

    path: str | Path | None = None

    _graph: TransitGraph | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("GRAPH_PATH") or "data/planner_graph.json"
        return Path(value)

    def load_graph(self) -> TransitGraph:
        if self._graph is not None:
            return self._graph

        path = self._path()
        with path.open("r", encoding="utf-8") as fp:
            raw = fp.read()

        self._graph = parse_graph_document(raw)
        logger.info(
            "Loaded planner graph from %s: %d stops, %d edges",
            path,
            len(self._graph),
            self._graph.edge_count,
        )
        return self._graph
