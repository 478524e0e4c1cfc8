"""Health check endpoints: liveness (no dependencies) and readiness (backends reachable)."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from tsdb_platform.api.v1.dependencies import get_onboarding_service
from tsdb_platform.application.interfaces.services import IOnboardingService
from tsdb_platform.schemas.health import (
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
    responses={503: {"description": "Status store unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    onboarding_svc: IOnboardingService = Depends(get_onboarding_service),
) -> ReadinessResponse | JSONResponse:
    """Return 200 if the onboarding flag can be read; 503 otherwise."""
    try:
        await onboarding_svc.is_onboarding()
    except (RedisError, SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=f"status store unreachable: {e}").model_dump(),
        )
    return ReadinessResponse()
