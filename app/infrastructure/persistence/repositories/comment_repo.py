"""Comment repository: comment lists cached per post; add and delete invalidate them."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.dtos.actor import Actor
from app.application.dtos.comment import CommentAuthor, CommentRef, CommentResult
from app.domain.enums import ActorType
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import invalidate_comments, invalidate_feed
from app.infrastructure.cache.keys import comments_key
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.models.comment import Comment
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.generators import generate_comment_code
from app.shared.utils.serialization import to_cache_payload


def _comment_to_result(c: Comment) -> CommentResult:
    child = c.child
    return CommentResult(
        id=c.id,
        code=c.code,
        post_id=c.post_id,
        content=c.content,
        likes_count=c.likes_count,
        is_edited=c.is_edited,
        created_at=c.created_at,
        author=CommentAuthor(
            author_type=ActorType(c.author_type),
            child_id=c.child_id,
            parent_id=c.parent_id,
            name=child.name if child else None,
            username=child.username if child else None,
            avatar=child.avatar if child else None,
        ),
    )


def _comment_to_ref(c: Comment) -> CommentRef:
    return CommentRef(
        id=c.id, code=c.code, post_id=c.post_id, child_id=c.child_id, parent_id=c.parent_id
    )


class CommentRepository(BaseRepository[Comment]):
    """Comment repository. get_comments() is read-through on comments:<post_id>.

    Adding or deleting a comment changes the post's comments_count shown in
    feed pages, so both drop the comment list and the feed:posts:* family.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        super().__init__(db, Comment, cache, ttls)

    async def get_comments(self, post_id: str) -> list[dict[str, Any]]:
        """Return active comments of a post, newest first, with author summary."""

        async def fetch() -> list[dict[str, Any]]:
            result = await self.db.execute(
                select(Comment)
                .options(joinedload(Comment.child))
                .where(Comment.post_id == post_id, Comment.is_active.is_(True))
                .order_by(Comment.created_at.desc(), Comment.id.desc())
                .execution_options(populate_existing=True)
            )
            return [to_cache_payload(_comment_to_result(c)) for c in result.scalars()]

        return await self._read_through(comments_key(post_id), fetch, self.ttls.comments)

    async def get_ref(self, comment_id: str) -> CommentRef | None:
        comment = await self.get_by_id(comment_id)
        return _comment_to_ref(comment) if comment else None

    async def add_comment(self, actor: Actor, post_id: str, content: str) -> CommentRef:
        comment = Comment(
            code=generate_comment_code(),
            post_id=post_id,
            author_type=actor.actor_type.value,
            child_id=actor.actor_id if actor.is_child else None,
            parent_id=actor.actor_id if actor.is_parent else None,
            content=content,
            likes_count=0,
            is_edited=False,
            is_active=True,
        )
        created = await self.create(comment)
        return _comment_to_ref(created)

    async def delete_comment(self, comment_id: str) -> CommentRef | None:
        """Delete a comment by id; return its ref, or None if it does not exist."""
        comment = await self.get_by_id(comment_id)
        if comment is None:
            return None
        ref = _comment_to_ref(comment)
        await self.delete(comment)
        return ref

    async def _invalidate(self, obj: Comment) -> None:
        await invalidate_comments(self.cache, obj.post_id)
        await invalidate_feed(self.cache)

    async def _on_after_create(self, obj: Comment) -> None:
        await self._invalidate(obj)

    async def _on_after_delete(self, obj: Comment) -> None:
        await self._invalidate(obj)
