"""First-run setup: initial user + credential, organization, bucket, and operator token."""

from __future__ import annotations

import logging
from datetime import timedelta

from tsdb_platform.application.dtos.onboarding import OnboardingRequest, OnboardingResult
from tsdb_platform.application.interfaces.repositories import (
    IAuthorizationRepository,
    IBucketRepository,
    IOnboardingStatusStore,
    IOrganizationRepository,
    IPasswordStore,
    IUserRepository,
)
from tsdb_platform.core.constants import ONBOARDING_CONFLICT_MESSAGE
from tsdb_platform.domain.exceptions import (
    ConflictException,
    EmptyValueException,
    InvalidException,
)
from tsdb_platform.domain.permissions import (
    PermissionFactory,
    new_permission_at_id,
    onboarding_permissions,
)
from tsdb_platform.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


def _validate_request(request: OnboardingRequest) -> None:
    """Fail on the first blank field, checked in order: password, user, org, bucket."""
    if request.password == "":
        raise EmptyValueException("password", "password is empty")
    if request.user == "":
        raise EmptyValueException("username", "username is empty")
    if request.org == "":
        raise EmptyValueException("org", "org name is empty")
    if request.bucket == "":
        raise EmptyValueException("bucket", "bucket name is empty")
    if request.retention_period_hours < 0:
        raise InvalidException(
            "retention period must be zero or positive", field="retention_period_hours"
        )


class OnboardingService:
    """Runs the one-time setup that turns a fresh install into a usable instance.

    The steps write to independent stores and are not atomic: if a step fails,
    everything created before it stays, and the onboarding flag is only set
    after the token is issued. A failed generate() may therefore have been
    partially applied, and a retry can create a second set of entities. Two
    concurrent first calls can both pass the flag check; nothing serializes
    them beyond the stores' own uniqueness rules.
    """

    def __init__(
        self,
        status_store: IOnboardingStatusStore,
        user_repo: IUserRepository,
        password_store: IPasswordStore,
        org_repo: IOrganizationRepository,
        bucket_repo: IBucketRepository,
        auth_repo: IAuthorizationRepository,
        permission_at_id: PermissionFactory = new_permission_at_id,
    ) -> None:
        self.status_store = status_store
        self.user_repo = user_repo
        self.password_store = password_store
        self.org_repo = org_repo
        self.bucket_repo = bucket_repo
        self.auth_repo = auth_repo
        self.permission_at_id = permission_at_id

    async def is_onboarding(self) -> bool:
        """Return True while setup has not been completed."""
        return not await self.status_store.is_onboarding_complete()

    async def put_onboarding_status(self, value: bool) -> None:
        """Overwrite the onboarding-complete flag."""
        await self.status_store.set_onboarding_complete(value)

    @traced("onboarding.generate")
    async def generate(self, request: OnboardingRequest) -> OnboardingResult:
        """Create the first user, organization, bucket and operator token.

        Raises:
            ConflictException: Setup was already completed; nothing is created.
            EmptyValueException: A required field is blank; nothing is created.
            InvalidException: retention_period_hours is negative.
            Any collaborator exception, unchanged, if a provisioning step fails.
        """
        if not await self.is_onboarding():
            logger.warning("Onboarding rejected: already completed")
            raise ConflictException(ONBOARDING_CONFLICT_MESSAGE)

        _validate_request(request)

        user = await self.user_repo.create_user(request.user)
        logger.debug("Onboarding: created user %s", user.id)

        # A failure here leaves the user without a password.
        await self.password_store.set_password(user.name, request.password)

        org = await self.org_repo.create_organization(request.org)
        logger.debug("Onboarding: created organization %s", org.id)

        bucket = await self.bucket_repo.create_bucket(
            org_id=org.id,
            organization=org.name,
            name=request.bucket,
            retention_period=timedelta(hours=request.retention_period_hours),
        )
        logger.debug("Onboarding: created bucket %s in organization %s", bucket.id, org.id)
        add_span_attributes(user_id=user.id, org_id=org.id, bucket_id=bucket.id)

        permissions = onboarding_permissions(org.id, bucket.id, self.permission_at_id)

        auth = await self.auth_repo.create_authorization(
            user_id=user.id,
            org_id=org.id,
            permissions=permissions,
            description=f"{user.name}'s Token",
        )
        logger.debug(
            "Onboarding: issued authorization %s with %d permissions",
            auth.id,
            len(auth.permissions),
        )

        await self.put_onboarding_status(True)

        logger.info(
            "Onboarding completed: user=%s org=%s bucket=%s",
            user.name,
            org.name,
            bucket.name,
        )
        return OnboardingResult(user=user, org=org, bucket=bucket, auth=auth)
