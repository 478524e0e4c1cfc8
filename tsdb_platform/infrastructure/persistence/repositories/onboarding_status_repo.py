"""Onboarding flag stored as a kv_store row."""

from sqlalchemy.ext.asyncio import AsyncSession

from tsdb_platform.core.constants import FLAG_FALSE, FLAG_TRUE, ONBOARDING_KEY
from tsdb_platform.infrastructure.persistence.models.kv_store import KeyValue


class SqlOnboardingStatusStore:
    """Reads and writes the 'onboarding_key' row; a missing row means not complete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def is_onboarding_complete(self) -> bool:
        row = await self.db.get(KeyValue, ONBOARDING_KEY)
        return row is not None and row.value == FLAG_TRUE

    async def set_onboarding_complete(self, value: bool) -> None:
        stored = FLAG_TRUE if value else FLAG_FALSE
        row = await self.db.get(KeyValue, ONBOARDING_KEY)
        if row is None:
            self.db.add(KeyValue(key=ONBOARDING_KEY, value=stored))
        else:
            row.value = stored
        await self.db.flush()
