"""Setup API: first-run onboarding. Thin routes delegating to OnboardingService."""

import logging

from fastapi import APIRouter, Depends

from tsdb_platform.api.v1.dependencies import get_onboarding_service
from tsdb_platform.application.interfaces.services import IOnboardingService
from tsdb_platform.core.config import get_settings
from tsdb_platform.schemas.onboarding import (
    SetupAllowedResponse,
    SetupRequest,
    SetupResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SetupAllowedResponse)
async def is_setup_allowed(
    onboarding_svc: IOnboardingService = Depends(get_onboarding_service),
) -> SetupAllowedResponse:
    """Return whether first-run setup may still be performed."""
    return SetupAllowedResponse(allowed=await onboarding_svc.is_onboarding())


@router.post(
    "",
    response_model=SetupResponse,
    status_code=201,
    responses={
        400: {"description": "A required field is empty"},
        409: {"description": "Setup has already been completed"},
    },
)
async def post_setup(
    body: SetupRequest,
    onboarding_svc: IOnboardingService = Depends(get_onboarding_service),
) -> SetupResponse:
    """Create the first user, organization, bucket and operator token.

    The response carries the only copy of the token returned by this API.
    """
    request = body.to_request(get_settings().default_retention_period_hours)
    result = await onboarding_svc.generate(request)
    return SetupResponse.from_result(result)
