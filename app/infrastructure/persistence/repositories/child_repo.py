"""Child repository: public profiles (cached by username), stats and profile edits."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.child import (
    ChildCreate,
    ChildProfileResult,
    ChildProfileUpdate,
    ChildRef,
    ChildResult,
)
from app.application.dtos.search import ChildSearchResult
from app.domain.exceptions import UsernameTakenException
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import (
    invalidate_child_profile,
    invalidate_parent_cache,
)
from app.infrastructure.cache.keys import profile_key
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs
from app.infrastructure.persistence.models.child import Child
from app.infrastructure.persistence.models.follow import Follow
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    contains_pattern,
    floored,
)
from app.shared.utils.generators import generate_child_code
from app.shared.utils.serialization import to_cache_payload

logger = logging.getLogger(__name__)

_CODE_ATTEMPTS = 5


def child_to_result(c: Child) -> ChildResult:
    """Map ORM Child to the parent-facing ChildResult."""
    return ChildResult(
        id=c.id,
        code=c.code,
        parent_id=c.parent_id,
        name=c.name,
        username=c.username,
        bio=c.bio,
        avatar=c.avatar,
        birth_date=c.birth_date,
        age=c.age,
        gender=c.gender,
        preferred_categories=list(c.preferred_categories or []),
        xp_points=c.xp_points,
        level=c.level,
        total_posts=c.total_posts,
        learning_hours=c.learning_hours,
        is_active=c.is_active,
        created_at=c.created_at,
    )


def _child_to_profile(c: Child, followers: int, following: int) -> ChildProfileResult:
    return ChildProfileResult(
        id=c.id,
        code=c.code,
        name=c.name,
        username=c.username,
        bio=c.bio,
        avatar=c.avatar,
        age=c.age,
        level=c.level,
        xp_points=c.xp_points,
        total_posts=c.total_posts,
        total_likes_received=c.total_likes_received,
        total_comments_made=c.total_comments_made,
        followers_count=followers,
        following_count=following,
        created_at=c.created_at,
    )


class ChildRepository(BaseRepository[Child]):
    """Child repository. Profile reads are read-through on profile:<username>.

    Stat changes and profile edits invalidate the profile key of the affected
    username; edits and new children also drop the owning parent's dashboard.
    """

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheGateway | None = None,
        ttls: CacheTTLs = DEFAULT_CACHE_TTLS,
    ) -> None:
        super().__init__(db, Child, cache, ttls)

    async def _count_follows(self, column: Any, child_id: str) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Follow).where(column == child_id)
        )
        return int(result.scalar_one())

    async def get_profile(self, username: str) -> dict[str, Any] | None:
        """Return the public profile of an active child, or None (never cached)."""

        async def fetch() -> dict[str, Any] | None:
            result = await self.db.execute(
                select(Child)
                .where(Child.username == username, Child.is_active.is_(True))
                .execution_options(populate_existing=True)
            )
            child = result.scalar_one_or_none()
            if child is None:
                return None
            followers = await self._count_follows(Follow.following_child_id, child.id)
            following = await self._count_follows(Follow.follower_child_id, child.id)
            return to_cache_payload(_child_to_profile(child, followers, following))

        return await self._read_through(profile_key(username), fetch, self.ttls.profile)

    async def get_ref(self, child_id: str) -> ChildRef | None:
        result = await self.db.execute(
            select(Child.id, Child.username, Child.parent_id).where(Child.id == child_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return ChildRef(id=row.id, username=row.username, parent_id=row.parent_id)

    async def _get_for_parent(self, parent_id: str, child_id: str) -> Child | None:
        result = await self.db.execute(
            select(Child).where(Child.id == child_id, Child.parent_id == parent_id)
        )
        return result.scalar_one_or_none()

    async def get_child_for_parent(
        self, parent_id: str, child_id: str
    ) -> ChildResult | None:
        """Return the child only if it belongs to parent_id (uncached)."""
        child = await self._get_for_parent(parent_id, child_id)
        return child_to_result(child) if child else None

    async def username_exists(
        self, username: str, exclude_child_id: str | None = None
    ) -> bool:
        stmt = select(Child.id).where(Child.username == username)
        if exclude_child_id:
            stmt = stmt.where(Child.id != exclude_child_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def _unique_code(self) -> str:
        code = generate_child_code()
        for _ in range(_CODE_ATTEMPTS):
            result = await self.db.execute(select(Child.id).where(Child.code == code))
            if result.scalar_one_or_none() is None:
                return code
            code = generate_child_code()
        return code

    async def create_child(
        self,
        parent_id: str,
        data: ChildCreate,
        password_hash: str,
        default_avatar: str | None = None,
    ) -> ChildResult:
        """Create a child under parent_id. Raises UsernameTakenException on conflict."""
        child = Child(
            code=await self._unique_code(),
            parent_id=parent_id,
            name=data.name,
            username=data.username,
            bio=data.bio,
            avatar=data.avatar or default_avatar,
            password_hash=password_hash,
            birth_date=data.birth_date,
            age=data.age,
            gender=data.gender,
            preferred_categories=list(data.preferred_categories),
            xp_points=0,
            level=1,
            is_active=True,
        )
        try:
            created = await self.create(child)
        except IntegrityError as e:
            raise UsernameTakenException(data.username) from e
        logger.info("Child created: %s (parent %s)", created.id, parent_id)
        return child_to_result(created)

    async def update_profile(
        self, parent_id: str, child_id: str, data: ChildProfileUpdate
    ) -> ChildResult | None:
        """Apply a profile edit to a child of parent_id; None if it is not theirs.

        Drops the cached profile under the old username too.
        """
        child = await self._get_for_parent(parent_id, child_id)
        if child is None:
            return None
        old_username = child.username
        child.name = data.name
        child.username = data.username
        child.bio = data.bio
        if data.avatar is not None:
            child.avatar = data.avatar
        try:
            updated = await self.update(child)
        except IntegrityError as e:
            raise UsernameTakenException(data.username) from e
        if old_username != updated.username:
            await invalidate_child_profile(self.cache, old_username)
        return child_to_result(updated)

    async def adjust_stats(
        self,
        child_id: str,
        *,
        xp_points: int = 0,
        total_posts: int = 0,
        total_likes_received: int = 0,
        total_comments_made: int = 0,
        include_parent_cache: bool = False,
    ) -> ChildRef | None:
        """Add deltas to a child's counters (negative results floor at 0).

        Invalidates the child's profile, and the parent dashboard when
        include_parent_cache is set. Returns None if the child does not exist.
        """
        deltas = {
            "xp_points": xp_points,
            "total_posts": total_posts,
            "total_likes_received": total_likes_received,
            "total_comments_made": total_comments_made,
        }
        values = {
            name: floored(getattr(Child, name), delta)
            for name, delta in deltas.items()
            if delta
        }
        if not values:
            return await self.get_ref(child_id)
        result = await self.db.execute(
            update(Child)
            .where(Child.id == child_id)
            .values(**values)
            .returning(Child.id, Child.username, Child.parent_id)
            .execution_options(synchronize_session=False)
        )
        row = result.one_or_none()
        if row is None:
            return None
        ref = ChildRef(id=row.id, username=row.username, parent_id=row.parent_id)
        await invalidate_child_profile(self.cache, ref.username)
        if include_parent_cache:
            await invalidate_parent_cache(self.cache, ref.parent_id)
        return ref

    async def search_children(self, query: str, limit: int) -> list[ChildSearchResult]:
        """Return active children whose name or username contains query (case-insensitive)."""
        pattern = contains_pattern(query)
        result = await self.db.execute(
            select(Child)
            .where(
                Child.is_active.is_(True),
                or_(
                    Child.name.ilike(pattern, escape="\\"),
                    Child.username.ilike(pattern, escape="\\"),
                ),
            )
            .order_by(Child.username)
            .limit(limit)
        )
        return [
            ChildSearchResult(
                id=c.id,
                code=c.code,
                name=c.name,
                username=c.username,
                age=c.age,
                avatar=c.avatar,
                xp_points=c.xp_points,
                level=c.level,
                total_posts=c.total_posts,
            )
            for c in result.scalars()
        ]

    async def set_password(self, parent_id: str, child_id: str, password_hash: str) -> bool:
        """Replace the password hash of a child of parent_id; False if it is not theirs.

        No cached view carries the hash, so nothing is invalidated.
        """
        result = await self.db.execute(
            update(Child)
            .where(Child.id == child_id, Child.parent_id == parent_id)
            .values(password_hash=password_hash)
            .returning(Child.id)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none() is not None

    async def invalidate_profile(self, child_id: str) -> None:
        """Drop the cached profile of a child known only by id."""
        if self.cache is None:
            return
        ref = await self.get_ref(child_id)
        if ref is not None:
            await invalidate_child_profile(self.cache, ref.username)

    async def _on_after_create(self, obj: Child) -> None:
        await invalidate_parent_cache(self.cache, obj.parent_id)

    async def _on_after_update(self, obj: Child) -> None:
        await invalidate_child_profile(self.cache, obj.username)
        await invalidate_parent_cache(self.cache, obj.parent_id)
