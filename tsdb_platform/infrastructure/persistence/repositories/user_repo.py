"""User repository and password store. Returns application DTOs."""

from __future__ import annotations

import asyncio

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.application.dtos.user import UserResult
from tsdb_platform.domain.enums import Status
from tsdb_platform.domain.exceptions import (
    EmptyValueException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from tsdb_platform.infrastructure.persistence.models.user import User, UserPassword
from tsdb_platform.infrastructure.persistence.repositories.base import BaseRepository
from tsdb_platform.infrastructure.security.password import hash_password, verify_password


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(id=u.id, name=u.name, status=Status(u.status))


class UserRepository(BaseRepository[User]):
    """User repository. Names are unique across the instance."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def create_user(self, name: str) -> UserResult:
        """Create user; raise UserAlreadyExistsException on duplicate name."""
        if not name:
            raise EmptyValueException("name", "user name is empty")
        try:
            created = await self.create(User(name=name, status=Status.ACTIVE.value))
        except IntegrityError:
            raise UserAlreadyExistsException(name) from None
        return _user_to_result(created)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self.get_entity_by_id(user_id)
        return _user_to_result(user) if user else None

    async def get_by_name(self, name: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.name == name))
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None


class PasswordStore:
    """Stores one bcrypt hash per user in user_password."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_user(self, name: str) -> User | None:
        result = await self.db.execute(select(User).where(User.name == name))
        return result.scalar_one_or_none()

    async def set_password(self, name: str, password: str) -> None:
        """Hash and store password; replaces an existing hash."""
        user = await self._get_user(name)
        if user is None:
            raise ResourceNotFoundException("user", name)
        hashed = await asyncio.to_thread(hash_password, password)
        existing = await self.db.get(UserPassword, user.id)
        if existing is None:
            self.db.add(UserPassword(user_id=user.id, hashed_password=hashed))
        else:
            existing.hashed_password = hashed
        await self.db.flush()

    async def compare_password(self, name: str, password: str) -> bool:
        """Return True if name has a password and it matches."""
        user = await self._get_user(name)
        if user is None:
            return False
        stored = await self.db.get(UserPassword, user.id)
        if stored is None:
            return False
        return await asyncio.to_thread(verify_password, password, stored.hashed_password)
