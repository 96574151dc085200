"""Health check endpoints, used for liveness and readiness probes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_database
from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import store_errors
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    database: Annotated[Database, Depends(get_database)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 if the database answers SELECT 1; 503 otherwise."""
    try:
        with store_errors():
            await database.ping()
    except StoreUnavailableException as e:
        logger.warning("Readiness check failed: %s", e.details.get("reason"))
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    return ReadinessResponse()
