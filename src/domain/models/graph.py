from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from src.domain.exceptions import MalformedGraph

from .geo import GeoPoint

StopId = int
RouteId = str


@dataclass(frozen=True, slots=True)
class GraphNode:
    """A bus stop as seen by the planner.

    Only the coordinates and names are used: coordinates for walking distance,
    names for human-readable segments.
    """

    id: StopId
    name: str
    lat: float
    lng: float
    township: str | None = None
    alt_name: str | None = None  # secondary-language name, if the feed has one

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)

    @property
    def display_name(self) -> str:
        return self.name.strip() or f"Stop {self.id}"


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """A directed stop-to-stop hop served by one or more routes."""

    to: StopId
    routes: tuple[RouteId, ...]
    distance_m: float = 0.0

    def __post_init__(self) -> None:
        # Parallel lines sharing a road segment are listed once each, in a
        # stable order so route options are always explored the same way.
        routes = tuple(sorted({str(r) for r in self.routes}))
        if not routes:
            raise MalformedGraph(f"Edge to stop {self.to} lists no routes")
        distance = float(self.distance_m)
        if not math.isfinite(distance) or distance < 0.0:
            raise MalformedGraph(
                f"Edge to stop {self.to} has invalid distance: {self.distance_m}"
            )
        object.__setattr__(self, "routes", routes)
        object.__setattr__(self, "distance_m", distance)


@dataclass(frozen=True, slots=True, eq=False)
class TransitGraph:
    """Immutable stop/route graph shared by every query of a process.

    Construction validates that every adjacency key and every edge target
    references a known node.
    """

    nodes_by_id: Mapping[StopId, GraphNode]
    adjacency: Mapping[StopId, tuple[GraphEdge, ...]]

    def __post_init__(self) -> None:
        nodes = dict(self.nodes_by_id)
        for key, node in nodes.items():
            if key != node.id:
                raise MalformedGraph(f"Node key {key} does not match node id {node.id}")

        adjacency: dict[StopId, tuple[GraphEdge, ...]] = {}
        for stop_id, edges in self.adjacency.items():
            if stop_id not in nodes:
                raise MalformedGraph(f"Adjacency references unknown stop {stop_id}")
            for edge in edges:
                if edge.to not in nodes:
                    raise MalformedGraph(
                        f"Edge {stop_id} -> {edge.to} references unknown stop {edge.to}"
                    )
            adjacency[stop_id] = tuple(edges)

        object.__setattr__(self, "nodes_by_id", MappingProxyType(nodes))
        object.__setattr__(self, "adjacency", MappingProxyType(adjacency))

    def __contains__(self, stop_id: object) -> bool:
        return stop_id in self.nodes_by_id

    def __len__(self) -> int:
        return len(self.nodes_by_id)

    def stop_ids(self) -> Iterator[StopId]:
        return iter(self.nodes_by_id)

    def node(self, stop_id: StopId) -> GraphNode | None:
        return self.nodes_by_id.get(stop_id)

    def edges_from(self, stop_id: StopId) -> tuple[GraphEdge, ...]:
        return self.adjacency.get(stop_id, ())

    def has_adjacency(self, stop_id: StopId) -> bool:
        # Stops listed with an empty edge list count as having adjacency,
        # matching how the data feed marks stops that belong to a route.
        return stop_id in self.adjacency

    def display_name(self, stop_id: StopId) -> str:
        node = self.node(stop_id)
        return node.display_name if node is not None else f"Stop {stop_id}"

    def direct_routes(self, from_id: StopId, to_id: StopId) -> tuple[RouteId, ...]:
        """Routes serving the hop from_id -> to_id (empty if not connected)."""

        for edge in self.edges_from(from_id):
            if edge.to == to_id:
                return edge.routes
        return ()

    def are_directly_connected(self, from_id: StopId, to_id: StopId) -> bool:
        return any(edge.to == to_id for edge in self.edges_from(from_id))

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency.values())
