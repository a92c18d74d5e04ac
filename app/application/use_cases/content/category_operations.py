"""Category taxonomy: list (cached) and create."""

from __future__ import annotations

from typing import Any

from app.application.dtos.category import CategoryCreate, CategoryResult
from app.application.interfaces.repositories import ICategoryRepository
from app.domain.exceptions import ValidationException


class CategoryService:
    def __init__(self, category_repo: ICategoryRepository) -> None:
        self.category_repo = category_repo

    async def get_categories(self) -> list[dict[str, Any]]:
        return await self.category_repo.get_categories()

    async def create_category(self, data: CategoryCreate) -> CategoryResult:
        if not data.name.strip():
            raise ValidationException("Category name must not be empty", field="name")
        return await self.category_repo.create_category(data)
