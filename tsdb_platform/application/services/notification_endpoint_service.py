"""Notification endpoint management: CRUD and filtered listing.

Secret values never live in the stored endpoint document. On create they are
moved to the secret store under '<endpoint id>-<field>' keys and the document
keeps only the key.
"""

from __future__ import annotations

import copy
import logging

from tsdb_platform.application.dtos.notification_endpoint import (
    FindOptions,
    NotificationEndpointFilter,
)
from tsdb_platform.application.interfaces.repositories import (
    INotificationEndpointRepository,
    IOrganizationRepository,
    ISecretStore,
)
from tsdb_platform.domain.entities.notification_endpoint import (
    NotificationEndpoint,
    NotificationEndpointUpdate,
)
from tsdb_platform.domain.exceptions import InvalidException, ResourceNotFoundException
from tsdb_platform.shared.utils import generate_id, utc_now

logger = logging.getLogger(__name__)

_SORT_KEYS = ("name", "created_at", "updated_at", "id")


class NotificationEndpointService:
    """Implements INotificationEndpointService over a repository and a secret store."""

    def __init__(
        self,
        endpoint_repo: INotificationEndpointRepository,
        secret_store: ISecretStore,
        org_repo: IOrganizationRepository,
    ) -> None:
        self.endpoint_repo = endpoint_repo
        self.secret_store = secret_store
        self.org_repo = org_repo

    async def find_by_id(self, endpoint_id: str) -> NotificationEndpoint:
        endpoint = await self.endpoint_repo.get(endpoint_id)
        if endpoint is None:
            raise ResourceNotFoundException("notification_endpoint", endpoint_id)
        return endpoint

    async def find(
        self,
        filter: NotificationEndpointFilter,
        options: FindOptions | None = None,
    ) -> tuple[list[NotificationEndpoint], int]:
        """Return (page, total) of endpoints matching every set filter field.

        Filtering by organization name resolves the name first; an unknown
        name raises ResourceNotFoundException.
        """
        options = options or FindOptions()
        if options.sort_by not in _SORT_KEYS:
            raise InvalidException(f"cannot sort by {options.sort_by!r}", field="sort_by")

        org_id = filter.org_id
        if filter.organization is not None:
            org = await self.org_repo.get_by_name(filter.organization)
            if org is None:
                raise ResourceNotFoundException("organization", filter.organization)
            if org_id is not None and org_id != org.id:
                return [], 0
            org_id = org.id

        matches = [
            e
            for e in await self.endpoint_repo.list_all()
            if (filter.id is None or e.id == filter.id)
            and (org_id is None or e.org_id == org_id)
        ]
        matches.sort(
            key=lambda e: (getattr(e, options.sort_by) is None, getattr(e, options.sort_by) or ""),
            reverse=options.descending,
        )
        total = len(matches)
        page = matches[options.offset :]
        if options.limit > 0:
            page = page[: options.limit]
        return page, total

    async def create(self, endpoint: NotificationEndpoint, user_id: str) -> NotificationEndpoint:
        """Validate and persist a new endpoint owned by endpoint.org_id.

        The caller's object is not mutated; the stored copy is returned.

        Raises:
            InvalidException: Invalid configuration or missing org_id.
            ResourceNotFoundException: org_id does not exist.
        """
        if not endpoint.org_id:
            raise InvalidException("organization id is required", field="org_id")
        endpoint.valid()
        if await self.org_repo.get_by_id(endpoint.org_id) is None:
            raise ResourceNotFoundException("organization", endpoint.org_id)

        stored = copy.deepcopy(endpoint)
        now = utc_now()
        stored.id = generate_id()
        stored.created_at = now
        stored.updated_at = now
        stored.backfill_secret_keys()
        for secret in stored.secret_fields():
            if secret.value is not None:
                await self.secret_store.put_secret(stored.org_id, secret.key, secret.value)
                secret.value = None

        await self.endpoint_repo.put(stored)
        logger.info(
            "Notification endpoint %s (%s) created in org %s by user %s",
            stored.id,
            stored.type,
            stored.org_id,
            user_id,
        )
        return stored

    async def patch(
        self, endpoint_id: str, update: NotificationEndpointUpdate
    ) -> NotificationEndpoint:
        endpoint = await self.find_by_id(endpoint_id)
        endpoint.update(update)
        await self.endpoint_repo.put(endpoint)
        return endpoint

    async def delete(self, endpoint_id: str) -> None:
        endpoint = await self.find_by_id(endpoint_id)
        for secret in endpoint.secret_fields():
            if secret.key:
                await self.secret_store.delete_secret(endpoint.org_id, secret.key)
        await self.endpoint_repo.delete(endpoint_id)
        logger.info("Notification endpoint %s deleted", endpoint_id)
