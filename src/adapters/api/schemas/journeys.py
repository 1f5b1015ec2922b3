from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class JourneyRequestSchema(_CamelModel):
    start_id: int = Field(..., alias="startId")
    end_id: int = Field(..., alias="endId")


class WalkingSuggestionSchema(_CamelModel):
    from_stop_id: int = Field(..., alias="fromStopId")
    from_stop_name: str = Field(..., alias="fromStopName")
    to_stop_id: int = Field(..., alias="toStopId")
    to_stop_name: str = Field(..., alias="toStopName")
    distance_m: int = Field(..., alias="distanceMeters")
    time_minutes: int = Field(..., alias="timeMinutes")


class PathSegmentSchema(_CamelModel):
    from_id: int = Field(..., alias="from")
    to_id: int = Field(..., alias="to")
    from_name: str = Field(..., alias="fromName")
    to_name: str = Field(..., alias="toName")
    routes: list[str] = []
    distance: float = 0.0
    route_used: str = Field(..., alias="routeUsed")
    is_transfer_point: bool = Field(False, alias="isTransferPoint")


class PathResultSchema(_CamelModel):
    found: bool
    path: list[int] = []
    segments: list[PathSegmentSchema] = []
    total_distance: float = Field(0.0, alias="totalDistance")
    total_stops: int = Field(0, alias="totalStops")
    transfers: int = 0
    suggested_route: str | None = Field(None, alias="suggestedRoute")
    walking_origin: WalkingSuggestionSchema | None = Field(
        None, alias="walkingOrigin"
    )
    walking_destination: WalkingSuggestionSchema | None = Field(
        None, alias="walkingDestination"
    )


class JourneyResponseSchema(_CamelModel):
    results: list[PathResultSchema]
    duration: float = Field(..., description="Planning time in milliseconds")


class EnqueueResponseSchema(_CamelModel):
    request_id: str = Field(..., alias="requestId")


class JourneyJobStatusSchema(BaseModel):
    request_id: str
    status: str | None = None
    created_at_ms: int | None = None
    updated_at_ms: int | None = None
    payload: dict[str, Any] | None = None
    result: dict[str, Any] | None = None
    error: str | None = None


class DirectConnectionSchema(_CamelModel):
    from_id: int = Field(..., alias="from")
    to_id: int = Field(..., alias="to")
    connected: bool
    routes: list[str] = []
