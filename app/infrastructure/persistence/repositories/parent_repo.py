"""Parent repository: dashboard stats and children list (cached per parent)."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.parent import ParentStatsResult
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.keys import parent_children_key, parent_stats_key
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.models.child import Child
from app.infrastructure.persistence.models.parent import Parent
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.child_repo import child_to_result
from app.shared.utils.serialization import to_cache_payload


class ParentRepository(BaseRepository[Parent]):
    """Parent repository. Stats and children list are read-through per parent id.

    Writes that change them (child created or edited, post created) go through
    ChildRepository, which invalidates the parent keys.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        super().__init__(db, Parent, cache, ttls)

    async def exists(self, parent_id: str) -> bool:
        return await self.get_by_id(parent_id) is not None

    async def get_stats(self, parent_id: str) -> dict[str, Any]:
        """Return totals over all children of the parent."""

        async def fetch() -> dict[str, Any]:
            result = await self.db.execute(
                select(
                    func.count(Child.id),
                    func.coalesce(func.sum(Child.total_posts), 0),
                    func.coalesce(func.sum(Child.learning_hours), 0.0),
                ).where(Child.parent_id == parent_id)
            )
            total_children, total_posts, learning_hours = result.one()
            return to_cache_payload(
                ParentStatsResult(
                    total_children=int(total_children),
                    total_posts=int(total_posts),
                    learning_hours=float(learning_hours),
                )
            )

        return await self._read_through(
            parent_stats_key(parent_id), fetch, self.ttls.parent
        )

    async def get_children(self, parent_id: str) -> list[dict[str, Any]]:
        """Return the parent's children, newest first."""

        async def fetch() -> list[dict[str, Any]]:
            result = await self.db.execute(
                select(Child)
                .where(Child.parent_id == parent_id)
                .order_by(Child.created_at.desc())
                .execution_options(populate_existing=True)
            )
            return [to_cache_payload(child_to_result(c)) for c in result.scalars()]

        return await self._read_through(
            parent_children_key(parent_id), fetch, self.ttls.parent
        )
