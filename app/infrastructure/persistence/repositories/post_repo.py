"""Post repository: feed pages and profile posts (read-through), post creation and counters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.dtos.child import ChildSummary
from app.application.dtos.post import (
    CategorySummary,
    FeedPostResult,
    PostCreate,
    PostResult,
)
from app.domain.enums import MediaType
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import (
    invalidate_child_profile,
    invalidate_feed,
)
from app.infrastructure.cache.keys import feed_posts_key, profile_posts_key
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.models.comment import Comment
from app.infrastructure.persistence.models.post import Post
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    contains_pattern,
    floored,
)
from app.shared.utils.generators import generate_post_code
from app.shared.utils.serialization import to_cache_payload


def _post_to_feed_result(p: Post) -> FeedPostResult:
    """Map ORM Post (child and category loaded) to FeedPostResult."""
    return FeedPostResult(
        id=p.id,
        code=p.code,
        child_id=p.child_id,
        category_id=p.category_id,
        title=p.title,
        content=p.content,
        media_type=MediaType(p.media_type),
        media_url=p.media_url,
        media_thumbnail=p.media_thumbnail,
        likes_count=p.likes_count,
        comments_count=p.comments_count,
        views_count=p.views_count,
        created_at=p.created_at,
        child=ChildSummary(
            name=p.child.name,
            username=p.child.username,
            avatar=p.child.avatar,
            age=p.child.age,
            level=p.child.level,
        ),
        category=CategorySummary(
            name=p.category.name, color=p.category.color, icon=p.category.icon
        ),
    )


def _post_to_result(p: Post) -> PostResult:
    return PostResult(
        id=p.id,
        code=p.code,
        child_id=p.child_id,
        category_id=p.category_id,
        title=p.title,
        content=p.content,
        media_type=MediaType(p.media_type),
        media_url=p.media_url,
        media_thumbnail=p.media_thumbnail,
        created_at=p.created_at,
    )


class PostRepository(BaseRepository[Post]):
    """Post repository. Feed pages and profile posts are read-through.

    A new post shifts every feed page, so creation drops the whole
    feed:posts:* family plus the author's profile posts.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        super().__init__(db, Post, cache, ttls)

    def _listing(self):
        return (
            select(Post)
            .options(
                joinedload(Post.child, innerjoin=True),
                joinedload(Post.category, innerjoin=True),
            )
            .where(Post.is_active.is_(True))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .execution_options(populate_existing=True)
        )

    async def get_feed_posts(
        self,
        page: int = 1,
        limit: int = 10,
        category_ids: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Return one feed page of active posts, newest first, optionally filtered by category."""
        key = feed_posts_key(page, limit, category_ids)
        categories = sorted(set(category_ids or []))

        async def fetch() -> list[dict[str, Any]]:
            stmt = self._listing()
            if categories:
                stmt = stmt.where(Post.category_id.in_(categories))
            stmt = stmt.offset((page - 1) * limit).limit(limit)
            result = await self.db.execute(stmt)
            return [to_cache_payload(_post_to_feed_result(p)) for p in result.scalars()]

        return await self._read_through(key, fetch, self.ttls.feed)

    async def get_child_posts(self, child_id: str) -> list[dict[str, Any]]:
        """Return all active posts of a child, newest first."""

        async def fetch() -> list[dict[str, Any]]:
            result = await self.db.execute(
                self._listing().where(Post.child_id == child_id)
            )
            return [to_cache_payload(_post_to_feed_result(p)) for p in result.scalars()]

        return await self._read_through(
            profile_posts_key(child_id), fetch, self.ttls.profile_posts
        )

    async def search_posts(self, query: str, limit: int) -> list[FeedPostResult]:
        """Return active posts whose title or content contains query, newest first (uncached)."""
        pattern = contains_pattern(query)
        result = await self.db.execute(
            self._listing()
            .where(
                or_(
                    Post.title.ilike(pattern, escape="\\"),
                    Post.content.ilike(pattern, escape="\\"),
                )
            )
            .limit(limit)
        )
        return [_post_to_feed_result(p) for p in result.scalars()]

    async def get_owner_id(self, post_id: str) -> str | None:
        """Return the authoring child id of an active post, or None."""
        result = await self.db.execute(
            select(Post.child_id).where(Post.id == post_id, Post.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    async def create_post(self, data: PostCreate) -> PostResult:
        post = Post(
            code=generate_post_code(),
            child_id=data.child_id,
            category_id=data.category_id,
            title=data.title,
            content=data.content,
            media_type=data.media_type.value,
            media_url=data.media_url,
            media_thumbnail=data.media_thumbnail,
            likes_count=0,
            comments_count=0,
            views_count=0,
            is_active=True,
        )
        created = await self.create(post)
        return _post_to_result(created)

    async def adjust_likes(self, post_id: str, delta: int) -> int:
        """Add delta to likes_count (floored at 0); return the new count."""
        result = await self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(likes_count=floored(Post.likes_count, delta))
            .returning(Post.likes_count)
            .execution_options(synchronize_session=False)
        )
        return int(result.scalar_one())

    async def recount_comments(self, post_id: str) -> int:
        """Set comments_count from the active comment rows; return it."""
        count_q = (
            select(func.count())
            .select_from(Comment)
            .where(Comment.post_id == post_id, Comment.is_active.is_(True))
            .scalar_subquery()
        )
        result = await self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(comments_count=count_q)
            .returning(Post.comments_count)
            .execution_options(synchronize_session=False)
        )
        return int(result.scalar_one())

    async def _on_after_create(self, obj: Post) -> None:
        await invalidate_feed(self.cache)
        await invalidate_child_profile(self.cache, None, obj.child_id)
