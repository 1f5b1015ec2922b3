from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import TransitGraph


class IGraphRepository(ABC):
    """Persistence port for loading the stop/route graph."""

    @abstractmethod
    def load_graph(self) -> TransitGraph:
        """Load the graph (once) and return the shared read-only instance."""
