from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.journeys import router as journeys_router
from src.adapters.config import env_bool

logger = logging.getLogger("uvicorn.error")

# Configuration and data problems the caller can act on; MalformedGraph is a
# ValueError, so a broken graph file is reported as such.
_SAFE_TO_REVEAL = (FileNotFoundError, RuntimeError, ValueError)

app = FastAPI(title="BusRoute Planner")
app.include_router(journeys_router)


def _error_detail(exc: Exception) -> str:
    if env_bool("JOURNEY_REVEAL_ERRORS") or isinstance(exc, _SAFE_TO_REVEAL):
        return str(exc) or exc.__class__.__name__
    return "Internal Server Error"


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer every unhandled error with a JSON ``{"detail": ...}`` body.

    The journey UI renders ``detail`` next to the search form; Starlette's
    default plain-text 500 would show up there as an empty error.
    """

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})
    return JSONResponse(status_code=500, content={"detail": _error_detail(exc)})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
