"""Follow repository. Follow edges are never cached; profile counts are."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.actor import Actor
from app.domain.enums import ActorType
from app.infrastructure.persistence.models.follow import Follow
from app.infrastructure.persistence.repositories.base import BaseRepository


def _edge_filters(follower: Actor, target_id: str, target_type: ActorType) -> list:
    filters = []
    if follower.is_child:
        filters.append(Follow.follower_child_id == follower.actor_id)
    else:
        filters.append(Follow.follower_parent_id == follower.actor_id)
    if target_type is ActorType.CHILD:
        filters.append(Follow.following_child_id == target_id)
    else:
        filters.append(Follow.following_parent_id == target_id)
    return filters


class FollowRepository(BaseRepository[Follow]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Follow)

    async def find_id(
        self, follower: Actor, target_id: str, target_type: ActorType
    ) -> str | None:
        """Return the id of the follow edge follower -> target, or None."""
        result = await self.db.execute(
            select(Follow.id).where(*_edge_filters(follower, target_id, target_type))
        )
        return result.scalars().first()

    async def add_follow(
        self, follower: Actor, target_id: str, target_type: ActorType
    ) -> None:
        await self.create(
            Follow(
                follower_type=follower.actor_type.value,
                follower_child_id=follower.actor_id if follower.is_child else None,
                follower_parent_id=follower.actor_id if follower.is_parent else None,
                following_type=target_type.value,
                following_child_id=target_id if target_type is ActorType.CHILD else None,
                following_parent_id=target_id if target_type is ActorType.PARENT else None,
            )
        )

    async def remove_follow(self, follow_id: str) -> None:
        follow = await self.get_by_id(follow_id)
        if follow is not None:
            await self.delete(follow)
