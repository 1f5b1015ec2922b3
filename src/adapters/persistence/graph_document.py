from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.domain.exceptions import MalformedGraph
from src.domain.models import GraphEdge, GraphNode, StopId, TransitGraph


class NodeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str | None = None
    name_en: str | None = None
    name_mm: str | None = None
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    township: str | None = None


class EdgeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    to: int
    routes: list[str]
    distance: float = 0.0
    route_count: int | None = None

    @field_validator("routes", mode="before")
    @classmethod
    def _routes_as_strings(cls, value: Any) -> Any:
        # Feeds mix "36" and 36 for the same line.
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return value


class GraphDocument(BaseModel):
    """The planner graph as published by the stop data feed.

    Stop ids arrive as JSON object keys (strings) and as numbers inside
    nodes and edges; both are validated into ``int``.
    """

    model_config = ConfigDict(extra="ignore")

    metadata: dict[str, Any] | None = None
    nodes: dict[int, NodeDocument]
    adjacency: dict[int, list[EdgeDocument]] = Field(default_factory=dict)


def _check_no_collisions(
    raw: Mapping[Any, Any], parsed: Mapping[int, Any], what: str
) -> None:
    if len(raw) != len(parsed):
        raise MalformedGraph(
            f"{what} lists the same stop id more than once "
            f"({len(raw)} keys, {len(parsed)} distinct ids)"
        )


def parse_graph_document(raw: Mapping[str, Any] | str | bytes) -> TransitGraph:
    """Validate a planner graph document and build the TransitGraph.

    Raises MalformedGraph for unparseable JSON, schema violations, ids that
    collide once normalized, edges pointing to unknown stops, empty route
    lists and negative distances.
    """

    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedGraph(f"Graph document is not valid JSON: {exc}") from exc
    else:
        data = raw
    if not isinstance(data, Mapping):
        raise MalformedGraph("Graph document must be a JSON object")

    try:
        doc = GraphDocument.model_validate(data)
    except ValidationError as exc:
        raise MalformedGraph(f"Invalid graph document: {exc}") from exc

    _check_no_collisions(data.get("nodes") or {}, doc.nodes, "nodes")
    _check_no_collisions(data.get("adjacency") or {}, doc.adjacency, "adjacency")

    nodes: dict[StopId, GraphNode] = {}
    for key, node in doc.nodes.items():
        node_id = node.id if node.id is not None else key
        if node_id != key:
            raise MalformedGraph(f"Node key {key} does not match node id {node_id}")
        nodes[key] = GraphNode(
            id=node_id,
            name=(node.name or node.name_en or "").strip(),
            lat=node.lat,
            lng=node.lng,
            township=node.township,
            alt_name=node.name_mm,
        )

    adjacency: dict[StopId, tuple[GraphEdge, ...]] = {}
    for stop_id, edges in doc.adjacency.items():
        adjacency[stop_id] = tuple(
            GraphEdge(to=e.to, routes=tuple(e.routes), distance_m=e.distance)
            for e in edges
        )

    return TransitGraph(nodes_by_id=nodes, adjacency=adjacency)


def graph_to_document(graph: TransitGraph) -> dict[str, Any]:
    """Inverse of parse_graph_document (JSON-ready, string keys)."""

    nodes: dict[str, Any] = {}
    for stop_id, node in graph.nodes_by_id.items():
        entry: dict[str, Any] = {
            "id": stop_id,
            "name": node.name,
            "lat": node.lat,
            "lng": node.lng,
            "township": node.township,
        }
        if node.alt_name is not None:
            entry["name_mm"] = node.alt_name
        nodes[str(stop_id)] = entry

    adjacency: dict[str, Any] = {
        str(stop_id): [
            {
                "to": edge.to,
                "routes": list(edge.routes),
                "distance": edge.distance_m,
                "route_count": len(edge.routes),
            }
            for edge in edges
        ]
        for stop_id, edges in graph.adjacency.items()
    }

    return {"nodes": nodes, "adjacency": adjacency}
