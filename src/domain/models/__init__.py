from .geo import GeoPoint
from .graph import GraphEdge, GraphNode, RouteId, StopId, TransitGraph
from .journey import PathResult, PathSegment, WalkingSuggestion
from .planner import DEFAULT_PLANNER_CONFIG, PlannerConfig

__all__ = [
    "DEFAULT_PLANNER_CONFIG",
    "GeoPoint",
    "GraphEdge",
    "GraphNode",
    "PathResult",
    "PathSegment",
    "PlannerConfig",
    "RouteId",
    "StopId",
    "TransitGraph",
    "WalkingSuggestion",
]
