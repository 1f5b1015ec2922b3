"""Message shapes exchanged across the pathfinding execution boundary.

Requests:  {"type": "findPath", "requestId", "startId", "endId", "graph"?}
Replies:   {"type": "result", "requestId", "results", "duration"}
           {"type": "error", "requestId", "message"}
Startup:   {"type": "ready"}

``results`` is a list of journeys in the camelCase layout the UI consumes;
``duration`` is in milliseconds.
"""

from __future__ import annotations

from typing import Any, Mapping

from src.domain.models import PathResult, PathSegment, WalkingSuggestion

FIND_PATH = "findPath"
RESULT = "result"
ERROR = "error"
READY = "ready"


def ready_message() -> dict[str, Any]:
    return {"type": READY}


def find_path_request(
    *,
    request_id: int | str,
    start_id: int,
    end_id: int,
    graph: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    message: dict[str, Any] = {
        "type": FIND_PATH,
        "requestId": request_id,
        "startId": int(start_id),
        "endId": int(end_id),
    }
    if graph is not None:
        message["graph"] = graph
    return message


def result_message(
    *, request_id: int | str, results: list[PathResult], duration_ms: float
) -> dict[str, Any]:
    return {
        "type": RESULT,
        "requestId": request_id,
        "results": results_to_wire(results),
        "duration": float(duration_ms),
    }


def error_message(*, request_id: int | str | None, message: str) -> dict[str, Any]:
    return {"type": ERROR, "requestId": request_id, "message": message}


def _walking_to_wire(w: WalkingSuggestion | None) -> dict[str, Any] | None:
    if w is None:
        return None
    return {
        "fromStopId": w.from_stop_id,
        "fromStopName": w.from_stop_name,
        "toStopId": w.to_stop_id,
        "toStopName": w.to_stop_name,
        "distanceMeters": w.distance_m,
        "timeMinutes": w.time_minutes,
    }


def _walking_from_wire(data: Mapping[str, Any] | None) -> WalkingSuggestion | None:
    if not data:
        return None
    return WalkingSuggestion(
        from_stop_id=int(data["fromStopId"]),
        from_stop_name=str(data["fromStopName"]),
        to_stop_id=int(data["toStopId"]),
        to_stop_name=str(data["toStopName"]),
        distance_m=int(data["distanceMeters"]),
        time_minutes=int(data["timeMinutes"]),
    )


def path_result_to_wire(result: PathResult) -> dict[str, Any]:
    out: dict[str, Any] = {
        "found": result.found,
        "path": list(result.path),
        "segments": [
            {
                "from": s.from_id,
                "to": s.to_id,
                "fromName": s.from_name,
                "toName": s.to_name,
                "routes": list(s.routes),
                "distance": s.distance_m,
                "routeUsed": s.route_used,
                "isTransferPoint": s.is_transfer_point,
            }
            for s in result.segments
        ],
        "totalDistance": result.total_distance_m,
        "totalStops": result.total_stops,
        "transfers": result.transfers,
        "suggestedRoute": result.suggested_route,
    }
    # Optional keys are omitted rather than sent as null.
    if result.walking_origin is not None:
        out["walkingOrigin"] = _walking_to_wire(result.walking_origin)
    if result.walking_destination is not None:
        out["walkingDestination"] = _walking_to_wire(result.walking_destination)
    return out


def path_result_from_wire(data: Mapping[str, Any]) -> PathResult:
    return PathResult(
        found=bool(data["found"]),
        path=tuple(int(s) for s in data.get("path") or ()),
        segments=tuple(
            PathSegment(
                from_id=int(s["from"]),
                to_id=int(s["to"]),
                from_name=str(s["fromName"]),
                to_name=str(s["toName"]),
                routes=tuple(str(r) for r in s.get("routes") or ()),
                distance_m=float(s.get("distance") or 0.0),
                route_used=str(s["routeUsed"]),
                is_transfer_point=bool(s.get("isTransferPoint", False)),
            )
            for s in data.get("segments") or ()
        ),
        total_distance_m=float(data.get("totalDistance") or 0.0),
        total_stops=int(data.get("totalStops") or 0),
        transfers=int(data.get("transfers") or 0),
        suggested_route=data.get("suggestedRoute"),
        walking_origin=_walking_from_wire(data.get("walkingOrigin")),
        walking_destination=_walking_from_wire(data.get("walkingDestination")),
    )


def results_to_wire(results: list[PathResult]) -> list[dict[str, Any]]:
    return [path_result_to_wire(r) for r in results]


def results_from_wire(data: list[Mapping[str, Any]]) -> list[PathResult]:
    return [path_result_from_wire(r) for r in data]
