"""Base repository: primary-key lookup, insertion-ordered listing, and inserts."""

from collections.abc import Sequence

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from donor_tracker.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, get_all, create and create_many.

    Repositories never commit; the caller owns the transaction so several
    repository calls can share one atomic unit.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def _pk_column(self):
        return sa_inspect(self.model).primary_key[0]

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def get_all(self) -> list[ModelType]:
        """Return all records in insertion (primary key) order."""
        result = await self.db.execute(select(self.model).order_by(self._pk_column))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server defaults (id, created_at)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def create_many(self, objs: Sequence[ModelType]) -> list[ModelType]:
        """Persist several records in one flush; ids are populated, defaults are not reloaded."""
        self.db.add_all(objs)
        await self.db.flush()
        return list(objs)
