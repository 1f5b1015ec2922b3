from __future__ import annotations

from dataclasses import dataclass, field, replace

from .graph import RouteId, StopId


@dataclass(frozen=True, slots=True)
class WalkingSuggestion:
    """A short walk between a requested stop and a better-served nearby stop."""

    from_stop_id: StopId
    from_stop_name: str
    to_stop_id: StopId
    to_stop_name: str
    distance_m: int
    time_minutes: int


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One traversed edge, annotated with the route actually ridden.

    ``is_transfer_point`` means the rider changes route at ``to_id``.
    """

    from_id: StopId
    to_id: StopId
    from_name: str
    to_name: str
    routes: tuple[RouteId, ...]
    distance_m: float
    route_used: RouteId
    is_transfer_point: bool = False


@dataclass(frozen=True, slots=True)
class PathResult:
    found: bool
    path: tuple[StopId, ...] = ()
    segments: tuple[PathSegment, ...] = ()
    total_distance_m: float = 0.0
    total_stops: int = 0
    transfers: int = 0
    suggested_route: RouteId | None = None
    walking_origin: WalkingSuggestion | None = field(default=None)
    walking_destination: WalkingSuggestion | None = field(default=None)

    @classmethod
    def not_found(cls) -> "PathResult":
        return cls(found=False)

    @classmethod
    def trivial(cls, stop_id: StopId) -> "PathResult":
        return cls(found=True, path=(stop_id,))

    @property
    def signature(self) -> tuple[tuple[StopId, StopId, RouteId], ...]:
        return tuple((s.from_id, s.to_id, s.route_used) for s in self.segments)

    @property
    def has_walking(self) -> bool:
        return self.walking_origin is not None or self.walking_destination is not None

    def cost(self, *, transfer_penalty: int = 100, stop_cost: int = 1) -> float:
        """Planner cost of the journey; infinite when nothing was found."""

        if not self.found:
            return float("inf")
        return float(self.transfers * transfer_penalty + self.total_stops * stop_cost)

    def with_walking(
        self,
        *,
        origin: WalkingSuggestion | None,
        destination: WalkingSuggestion | None,
    ) -> "PathResult":
        return replace(self, walking_origin=origin, walking_destination=destination)
