"""Tests for the in-memory stores: uniqueness, references, and the onboarding flag."""

import asyncio
import threading
from datetime import timedelta

import pytest

from tsdb_platform.domain.enums import Action, ResourceType
from tsdb_platform.domain.exceptions import (
    BucketAlreadyExistsException,
    InvalidException,
    OrganizationAlreadyExistsException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from tsdb_platform.domain.permissions import new_permission_at_id
from tsdb_platform.infrastructure.inmem import (
    InMemoryBackend,
    InMemoryOnboardingStatusStore,
)


async def test_status_store_defaults_to_not_complete() -> None:
    store = InMemoryOnboardingStatusStore()
    assert await store.is_onboarding_complete() is False
    await store.set_onboarding_complete(True)
    assert await store.is_onboarding_complete() is True
    await store.set_onboarding_complete(False)
    assert await store.is_onboarding_complete() is False


def test_status_store_safe_across_threads() -> None:
    store = InMemoryOnboardingStatusStore()
    errors: list[Exception] = []

    def worker(value: bool) -> None:
        try:
            for _ in range(200):
                asyncio.run(store.set_onboarding_complete(value))
                asyncio.run(store.is_onboarding_complete())
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i % 2 == 0,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    asyncio.run(store.set_onboarding_complete(True))
    assert asyncio.run(store.is_onboarding_complete()) is True


async def test_user_names_unique(backend: InMemoryBackend) -> None:
    user = await backend.users.create_user("admin")
    assert await backend.users.get_by_name("admin") == user
    assert await backend.users.get_by_id(user.id) == user
    with pytest.raises(UserAlreadyExistsException):
        await backend.users.create_user("admin")


async def test_password_for_unknown_user(backend: InMemoryBackend) -> None:
    with pytest.raises(ResourceNotFoundException):
        await backend.passwords.set_password("ghost", "pw")
    assert await backend.passwords.compare_password("ghost", "pw") is False


async def test_concurrent_user_creation_admits_one(backend: InMemoryBackend) -> None:
    results = await asyncio.gather(
        *(backend.users.create_user("admin") for _ in range(10)), return_exceptions=True
    )
    created = [r for r in results if not isinstance(r, BaseException)]
    assert len(created) == 1
    errors = [r for r in results if isinstance(r, BaseException)]
    assert len(errors) == 9
    assert all(isinstance(e, UserAlreadyExistsException) for e in errors)


async def test_org_names_unique(backend: InMemoryBackend) -> None:
    org = await backend.orgs.create_organization("acme")
    assert await backend.orgs.get_by_name("acme") == org
    assert await backend.orgs.get_by_name("nope") is None
    with pytest.raises(OrganizationAlreadyExistsException):
        await backend.orgs.create_organization("acme")


async def test_bucket_requires_existing_org(backend: InMemoryBackend) -> None:
    with pytest.raises(ResourceNotFoundException):
        await backend.buckets.create_bucket("missing", "acme", "default", timedelta(0))


async def test_bucket_names_unique_per_org(backend: InMemoryBackend) -> None:
    acme = await backend.orgs.create_organization("acme")
    other = await backend.orgs.create_organization("other")
    await backend.buckets.create_bucket(acme.id, acme.name, "default", timedelta(0))
    await backend.buckets.create_bucket(other.id, other.name, "default", timedelta(0))
    with pytest.raises(BucketAlreadyExistsException):
        await backend.buckets.create_bucket(acme.id, acme.name, "default", timedelta(hours=1))


async def test_bucket_rejects_negative_retention(backend: InMemoryBackend) -> None:
    org = await backend.orgs.create_organization("acme")
    with pytest.raises(InvalidException):
        await backend.buckets.create_bucket(org.id, org.name, "default", timedelta(hours=-1))


async def test_authorization_requires_user_and_org(backend: InMemoryBackend) -> None:
    user = await backend.users.create_user("admin")
    org = await backend.orgs.create_organization("acme")
    perm = new_permission_at_id("b1", Action.READ, ResourceType.BUCKETS)

    with pytest.raises(ResourceNotFoundException):
        await backend.authorizations.create_authorization("nope", org.id, [perm], "d")
    with pytest.raises(ResourceNotFoundException):
        await backend.authorizations.create_authorization(user.id, "nope", [perm], "d")

    auth = await backend.authorizations.create_authorization(user.id, org.id, [perm], "d")
    assert auth.permissions == (perm,)
    other = await backend.authorizations.create_authorization(user.id, org.id, [perm], "d")
    assert other.token != auth.token
