"""Parent dashboard: stats and children list (cached), child details (uncached)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.child import ChildResult
from app.application.interfaces.repositories import IChildRepository, IParentRepository
from app.domain.exceptions import ResourceNotFoundException


class ParentDashboardService:
    def __init__(
        self, parent_repo: IParentRepository, child_repo: IChildRepository
    ) -> None:
        self.parent_repo = parent_repo
        self.child_repo = child_repo

    async def get_parent_stats(self, parent_id: str) -> dict[str, Any]:
        """Return {total_children, total_posts, learning_hours} over the parent's children."""
        return await self.parent_repo.get_stats(parent_id)

    async def get_my_children(self, parent_id: str) -> list[dict[str, Any]]:
        return await self.parent_repo.get_children(parent_id)

    async def get_child_details(self, parent_id: str, child_id: str) -> ChildResult:
        """Return one child; raises ResourceNotFoundException unless it belongs to parent_id."""
        child = await self.child_repo.get_child_for_parent(parent_id, child_id)
        if child is None:
            raise ResourceNotFoundException("child", child_id)
        return child
