"""Process-local users and their password hashes."""

from __future__ import annotations

import asyncio
import threading

from tsdb_platform.application.dtos.user import UserResult
from tsdb_platform.domain.exceptions import (
    EmptyValueException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from tsdb_platform.infrastructure.security.password import hash_password, verify_password
from tsdb_platform.shared.utils import generate_id


class InMemoryUserRepository:
    """Users keyed by ID with a unique-name index."""

    def __init__(self) -> None:
        self._by_id: dict[str, UserResult] = {}
        self._id_by_name: dict[str, str] = {}
        self._lock = threading.Lock()

    async def create_user(self, name: str) -> UserResult:
        if not name:
            raise EmptyValueException("name", "user name is empty")
        with self._lock:
            if name in self._id_by_name:
                raise UserAlreadyExistsException(name)
            user = UserResult(id=generate_id(), name=name)
            self._by_id[user.id] = user
            self._id_by_name[name] = user.id
        return user

    async def get_by_id(self, user_id: str) -> UserResult | None:
        with self._lock:
            return self._by_id.get(user_id)

    async def get_by_name(self, name: str) -> UserResult | None:
        with self._lock:
            user_id = self._id_by_name.get(name)
            return self._by_id.get(user_id) if user_id else None

    async def list_all(self) -> list[UserResult]:
        with self._lock:
            return list(self._by_id.values())


class InMemoryPasswordStore:
    """Password hashes keyed by user ID; users are resolved by name."""

    def __init__(self, user_repo: InMemoryUserRepository) -> None:
        self.user_repo = user_repo
        self._hashes: dict[str, str] = {}

    async def set_password(self, name: str, password: str) -> None:
        user = await self.user_repo.get_by_name(name)
        if user is None:
            raise ResourceNotFoundException("user", name)
        self._hashes[user.id] = await asyncio.to_thread(hash_password, password)

    async def compare_password(self, name: str, password: str) -> bool:
        """Return True if name has a password and it matches."""
        user = await self.user_repo.get_by_name(name)
        if user is None or user.id not in self._hashes:
            return False
        return await asyncio.to_thread(verify_password, password, self._hashes[user.id])
