"""Process-local notification endpoint documents and organization secrets."""

from __future__ import annotations

import copy
import threading

from tsdb_platform.domain.entities.notification_endpoint import NotificationEndpoint
from tsdb_platform.domain.exceptions import InvalidException, ResourceNotFoundException


class InMemoryNotificationEndpointRepository:
    """Stores deep copies so callers cannot mutate stored state without put()."""

    def __init__(self) -> None:
        self._by_id: dict[str, NotificationEndpoint] = {}
        self._lock = threading.Lock()

    async def get(self, endpoint_id: str) -> NotificationEndpoint | None:
        with self._lock:
            endpoint = self._by_id.get(endpoint_id)
            return copy.deepcopy(endpoint) if endpoint is not None else None

    async def list_all(self) -> list[NotificationEndpoint]:
        with self._lock:
            return [copy.deepcopy(e) for e in self._by_id.values()]

    async def put(self, endpoint: NotificationEndpoint) -> None:
        if not endpoint.id:
            raise InvalidException("notification endpoint id is required", field="id")
        with self._lock:
            self._by_id[endpoint.id] = copy.deepcopy(endpoint)

    async def delete(self, endpoint_id: str) -> None:
        with self._lock:
            if self._by_id.pop(endpoint_id, None) is None:
                raise ResourceNotFoundException("notification_endpoint", endpoint_id)


class InMemorySecretStore:
    """Secret values keyed by (org_id, key)."""

    def __init__(self) -> None:
        self._secrets: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()

    async def put_secret(self, org_id: str, key: str, value: str) -> None:
        with self._lock:
            self._secrets[(org_id, key)] = value

    async def get_secret(self, org_id: str, key: str) -> str | None:
        with self._lock:
            return self._secrets.get((org_id, key))

    async def delete_secret(self, org_id: str, key: str) -> None:
        with self._lock:
            self._secrets.pop((org_id, key), None)
