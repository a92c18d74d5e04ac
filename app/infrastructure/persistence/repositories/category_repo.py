"""Category repository. Taxonomy list cached under categories:all."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.category import CategoryCreate, CategoryResult
from app.domain.exceptions import ValidationException
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import invalidate_categories
from app.infrastructure.cache.keys import categories_key
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.serialization import to_cache_payload


def _category_to_result(c: Category) -> CategoryResult:
    return CategoryResult(id=c.id, name=c.name, icon=c.icon, color=c.color)


class CategoryRepository(BaseRepository[Category]):
    """Category repository. get_categories() is read-through; create invalidates it."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        super().__init__(db, Category, cache, ttls)

    async def get_categories(self) -> list[dict[str, Any]]:
        """Return all categories ordered by name."""

        async def fetch() -> list[dict[str, Any]]:
            result = await self.db.execute(select(Category).order_by(Category.name))
            return [to_cache_payload(_category_to_result(c)) for c in result.scalars()]

        return await self._read_through(categories_key(), fetch, self.ttls.categories)

    async def exists(self, category_id: str) -> bool:
        return await self.get_by_id(category_id) is not None

    async def create_category(self, data: CategoryCreate) -> CategoryResult:
        """Create a category. Raises ValidationException when the name is taken."""
        category = Category(name=data.name, icon=data.icon, color=data.color)
        try:
            created = await self.create(category)
        except IntegrityError as e:
            raise ValidationException(
                f"Category already exists: {data.name}", field="name"
            ) from e
        return _category_to_result(created)

    async def _on_after_create(self, obj: Category) -> None:
        await invalidate_categories(self.cache)
