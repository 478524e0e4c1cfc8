"""Setup (onboarding) API schemas.

Blank or missing names are accepted here and rejected by the onboarding
service, so the first empty field is reported in a fixed order.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from tsdb_platform.application.dtos.onboarding import OnboardingRequest, OnboardingResult
from tsdb_platform.domain.enums import Status


class SetupAllowedResponse(BaseModel):
    """Response for GET /setup."""

    allowed: bool = Field(..., description="True while first-run setup has not been completed")


class SetupRequest(BaseModel):
    """Request body for POST /setup."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(default="", description="Name of the first (operator) user")
    password: SecretStr = Field(default=SecretStr(""), description="Password for that user")
    org: str = Field(default="", description="Name of the first organization")
    bucket: str = Field(default="", description="Name of the first bucket")
    retention_period_hrs: int | None = Field(
        default=None,
        alias="retentionPeriodHrs",
        description="Bucket retention in hours; 0 keeps data forever. Defaults from settings.",
    )

    def to_request(self, default_retention_hours: int = 0) -> OnboardingRequest:
        retention = (
            self.retention_period_hrs
            if self.retention_period_hrs is not None
            else default_retention_hours
        )
        return OnboardingRequest(
            user=self.username,
            password=self.password.get_secret_value(),
            org=self.org,
            bucket=self.bucket,
            retention_period_hours=retention,
        )


class UserResponse(BaseModel):
    id: str
    name: str
    status: str


class OrganizationResponse(BaseModel):
    id: str
    name: str


class BucketResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    org_id: str = Field(..., alias="orgID")
    organization: str
    name: str
    retention_period_hrs: int = Field(..., alias="retentionPeriodHrs")


class AuthorizationResponse(BaseModel):
    """Issued token. Returned once; the token is not retrievable later through this API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    token: str
    status: str
    description: str
    user_id: str = Field(..., alias="userID")
    org_id: str = Field(..., alias="orgID")
    permissions: list[dict[str, Any]]


class SetupResponse(BaseModel):
    """Response for POST /setup (201)."""

    user: UserResponse
    org: OrganizationResponse
    bucket: BucketResponse
    auth: AuthorizationResponse

    @classmethod
    def from_result(cls, result: OnboardingResult) -> "SetupResponse":
        bucket = result.bucket
        auth = result.auth
        return cls(
            user=UserResponse(
                id=result.user.id,
                name=result.user.name,
                status=Status(result.user.status).value,
            ),
            org=OrganizationResponse(id=result.org.id, name=result.org.name),
            bucket=BucketResponse(
                id=bucket.id,
                org_id=bucket.org_id,
                organization=bucket.organization,
                name=bucket.name,
                retention_period_hrs=int(bucket.retention_period.total_seconds() // 3600),
            ),
            auth=AuthorizationResponse(
                id=auth.id,
                token=auth.token,
                status=Status(auth.status).value,
                description=auth.description,
                user_id=auth.user_id,
                org_id=auth.org_id,
                permissions=[p.to_dict() for p in auth.permissions],
            ),
        )
