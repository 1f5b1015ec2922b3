from __future__ import annotations

from dataclasses import dataclass, replace

from src.domain.models import (
    GraphEdge,
    PathResult,
    PathSegment,
    RouteId,
    StopId,
    TransitGraph,
)

# A search state is identified by the stop and the route the rider arrived on.
StateKey = tuple[StopId, RouteId | None]


@dataclass(frozen=True, slots=True)
class SearchParent:
    """How a state was reached: the previous state and the hop taken from it."""

    from_key: StateKey
    edge: GraphEdge
    route: RouteId
    cost: float

    @property
    def from_id(self) -> StopId:
        return self.from_key[0]


def reconstruct_path(
    graph: TransitGraph,
    parents: dict[StateKey, SearchParent],
    *,
    start_id: StopId,
    end_key: StateKey,
) -> PathResult:
    """Rebuild the journey ending at end_key from per-state parent links.

    Transfers are counted from the rebuilt segments rather than taken from the
    search, so the result always agrees with its own transfer markers.
    """

    origin_key: StateKey = (start_id, None)
    hops: list[tuple[StopId, StopId, SearchParent]] = []
    key = end_key
    while key != origin_key:
        parent = parents.get(key)
        if parent is None:
            raise RuntimeError(f"Broken parent chain at state {key}")
        hops.append((parent.from_id, key[0], parent))
        key = parent.from_key
    hops.reverse()

    path: list[StopId] = [start_id]
    segments: list[PathSegment] = []
    total_distance = 0.0
    for from_id, to_id, parent in hops:
        path.append(to_id)
        total_distance += parent.edge.distance_m
        segments.append(
            PathSegment(
                from_id=from_id,
                to_id=to_id,
                from_name=graph.display_name(from_id),
                to_name=graph.display_name(to_id),
                routes=parent.edge.routes,
                distance_m=parent.edge.distance_m,
                route_used=parent.route,
            )
        )

    segments = mark_transfer_points(segments)
    transfers = sum(1 for s in segments if s.is_transfer_point)

    return PathResult(
        found=True,
        path=tuple(path),
        segments=tuple(segments),
        total_distance_m=total_distance,
        total_stops=len(segments),
        transfers=transfers,
        suggested_route=segments[0].route_used if segments else None,
    )


def mark_transfer_points(segments: list[PathSegment]) -> list[PathSegment]:
    """Flag segment i when the next segment rides a different route."""

    out: list[PathSegment] = []
    for i, segment in enumerate(segments):
        is_transfer = (
            i + 1 < len(segments) and segment.route_used != segments[i + 1].route_used
        )
        out.append(replace(segment, is_transfer_point=is_transfer))
    return out
