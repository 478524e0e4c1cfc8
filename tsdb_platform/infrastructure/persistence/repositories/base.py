"""Base repository: lookup by primary key and insert with flush/refresh."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic get_by_id / create over one model, bound to a session.

    Repositories flush but never commit; the session owner
    (transactional_session) decides the transaction boundary.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; IntegrityError surfaces here on flush."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
