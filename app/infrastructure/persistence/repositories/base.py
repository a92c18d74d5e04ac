"""Base repository: generic CRUD, read-through helper and lifecycle hooks (cache invalidation)."""

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import object_session

from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.database import Base

T = TypeVar("T")
ModelType = TypeVar("ModelType", bound=Base)


def contains_pattern(text: str) -> str:
    """ILIKE pattern matching text anywhere; % _ and \\ in text match literally."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def floored(column: Any, delta: int) -> Any:
    """SQL expression for column + delta, never below zero when delta is negative."""
    if delta >= 0:
        return column + delta
    return func.greatest(column + delta, 0)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create, update, delete and hooks.

    Subclasses override _on_after_create, _on_after_update, _on_after_delete
    for cache invalidation. Cached reads go through _read_through(); with no
    cache gateway they read straight from the database.

    Counters change through bulk UPDATE statements that bypass the identity
    map, so cached read queries load with populate_existing.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        self.db = db
        self.model = model
        self.cache = cache
        self.ttls = ttls

    async def _read_through(
        self, key: str, fetch: Callable[[], Awaitable[T]], ttl_seconds: int
    ) -> T:
        if self.cache is None:
            return await fetch()
        return await self.cache.get_or_set(key, fetch, ttl_seconds)

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes to a loaded record and run _on_after_update hook.

        Detached instances are merged into this session first.
        """
        if object_session(obj) is not self.db.sync_session:
            obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record and run _on_after_delete hook."""
        await self.db.delete(obj)
        await self.db.flush()
        await self._on_after_delete(obj)

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches."""

    async def _on_after_delete(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches."""
