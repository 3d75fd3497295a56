"""Health check endpoints for liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from donor_tracker.api.dependencies import StoreDep
from donor_tracker.application.results import Failure
from donor_tracker.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database not reachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(store: StoreDep) -> ReadinessResponse | JSONResponse:
    """Return 200 if the database answers a trivial query; 503 otherwise."""
    result = await store.ping()
    if isinstance(result, Failure):
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=result.message).model_dump(),
        )
    return ReadinessResponse()
