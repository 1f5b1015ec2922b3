from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import (
    get_journey_jobs_service,
    get_journey_planner,
)
from src.adapters.api.schemas.journeys import (
    DirectConnectionSchema,
    EnqueueResponseSchema,
    JourneyJobStatusSchema,
    JourneyRequestSchema,
    JourneyResponseSchema,
)
from src.adapters.messaging.pathfinder_protocol import results_to_wire
from src.app.services.journey_jobs_service import JourneyJobsService
from src.app.services.journey_planner import JourneyPlanner

router = APIRouter(tags=["journeys"])


@router.post("/journeys", response_model=JourneyResponseSchema)
def plan_journeys(
    req: JourneyRequestSchema,
    planner: JourneyPlanner = Depends(get_journey_planner),
) -> JourneyResponseSchema:
    started = time.perf_counter()
    results = planner.find_journeys(req.start_id, req.end_id)
    duration_ms = (time.perf_counter() - started) * 1000.0
    return JourneyResponseSchema.model_validate(
        {"results": results_to_wire(results), "duration": duration_ms}
    )


@router.post("/journeys/async", response_model=EnqueueResponseSchema)
def enqueue_journey(
    req: JourneyRequestSchema,
    service: JourneyJobsService = Depends(get_journey_jobs_service),
) -> EnqueueResponseSchema:
    request_id = service.submit(start_id=req.start_id, end_id=req.end_id)
    return EnqueueResponseSchema(request_id=request_id)


@router.get("/journeys/jobs/{request_id}", response_model=JourneyJobStatusSchema)
def get_journey_job(
    request_id: str,
    service: JourneyJobsService = Depends(get_journey_jobs_service),
) -> JourneyJobStatusSchema:
    job = service.get(request_id=request_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return JourneyJobStatusSchema(**dict(job))


@router.get(
    "/stops/{stop_id}/direct/{other_id}", response_model=DirectConnectionSchema
)
def direct_connection(
    stop_id: int,
    other_id: int,
    planner: JourneyPlanner = Depends(get_journey_planner),
) -> DirectConnectionSchema:
    for sid in (stop_id, other_id):
        if sid not in planner.graph:
            raise HTTPException(status_code=404, detail=f"Unknown stop {sid}")

    routes = planner.direct_routes(stop_id, other_id)
    return DirectConnectionSchema(
        from_id=stop_id, to_id=other_id, connected=bool(routes), routes=list(routes)
    )
