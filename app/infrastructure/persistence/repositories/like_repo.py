"""Like repository. Like state is never cached."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.actor import Actor
from app.infrastructure.persistence.models.like import Like
from app.infrastructure.persistence.repositories.base import BaseRepository


def _actor_filter(actor: Actor):
    if actor.is_child:
        return Like.child_id == actor.actor_id
    return Like.parent_id == actor.actor_id


class LikeRepository(BaseRepository[Like]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Like)

    async def find_id(self, actor: Actor, post_id: str) -> str | None:
        """Return the id of actor's like on post_id, or None."""
        result = await self.db.execute(
            select(Like.id).where(Like.post_id == post_id, _actor_filter(actor))
        )
        return result.scalar_one_or_none()

    async def add_like(self, actor: Actor, post_id: str) -> None:
        await self.create(
            Like(
                post_id=post_id,
                child_id=actor.actor_id if actor.is_child else None,
                parent_id=actor.actor_id if actor.is_parent else None,
            )
        )

    async def remove_like(self, like_id: str) -> None:
        like = await self.get_by_id(like_id)
        if like is not None:
            await self.delete(like)
