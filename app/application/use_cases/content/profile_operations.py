"""Public child profiles and their posts."""

from __future__ import annotations

from typing import Any

from app.application.interfaces.repositories import IChildRepository, IPostRepository
from app.domain.exceptions import ResourceNotFoundException


class ProfileService:
    """Read child profiles by username. Missing profiles raise and are not cached."""

    def __init__(self, child_repo: IChildRepository, post_repo: IPostRepository) -> None:
        self.child_repo = child_repo
        self.post_repo = post_repo

    async def get_child_profile(self, username: str) -> dict[str, Any]:
        profile = await self.child_repo.get_profile(username)
        if profile is None:
            raise ResourceNotFoundException("child", username)
        return profile

    async def get_child_posts(self, username: str) -> list[dict[str, Any]]:
        """Return the child's active posts; the profile lookup resolves the child id."""
        profile = await self.get_child_profile(username)
        return await self.post_repo.get_child_posts(profile["id"])
