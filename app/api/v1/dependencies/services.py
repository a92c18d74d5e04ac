"""Use case dependencies (composition root).

Read endpoints get services over a plain session (get_db); write endpoints
get them over a transactional session (get_db_transactional), so cache
invalidation runs after the rows are flushed and the commit follows the
handler. Every repository receives the request's CacheGateway (None when
caching is disabled) and the configured TTLs.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies.cache import get_cache, get_cache_ttls
from app.application.use_cases import (
    CategoryService,
    ChildManagementService,
    CommentService,
    FeedService,
    FollowService,
    LikeService,
    ParentDashboardService,
    PostService,
    ProfileService,
    SearchService,
)
from app.core.config import get_settings
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.policy import CacheTTLs
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    CategoryRepository,
    ChildRepository,
    CommentRepository,
    FollowRepository,
    LikeRepository,
    ParentRepository,
    PostRepository,
)
from app.infrastructure.security.password import get_password_hash

ReadDb = Annotated[AsyncSession, Depends(get_db)]
WriteDb = Annotated[AsyncSession, Depends(get_db_transactional)]
Cache = Annotated[CacheGateway | None, Depends(get_cache)]
TTLs = Annotated[CacheTTLs, Depends(get_cache_ttls)]


# ---- Reads ----


async def get_feed_service(db: ReadDb, cache: Cache, ttls: TTLs) -> FeedService:
    return FeedService(PostRepository(db, cache, ttls))


async def get_category_service(db: ReadDb, cache: Cache, ttls: TTLs) -> CategoryService:
    return CategoryService(CategoryRepository(db, cache, ttls))


async def get_profile_service(db: ReadDb, cache: Cache, ttls: TTLs) -> ProfileService:
    return ProfileService(ChildRepository(db, cache, ttls), PostRepository(db, cache, ttls))


async def get_comment_service(db: ReadDb, cache: Cache, ttls: TTLs) -> CommentService:
    return CommentService(
        CommentRepository(db, cache, ttls),
        PostRepository(db, cache, ttls),
        ChildRepository(db, cache, ttls),
    )


async def get_like_service(db: ReadDb, cache: Cache, ttls: TTLs) -> LikeService:
    return LikeService(
        LikeRepository(db), PostRepository(db, cache, ttls), ChildRepository(db, cache, ttls)
    )


async def get_follow_service(db: ReadDb, cache: Cache, ttls: TTLs) -> FollowService:
    return FollowService(
        FollowRepository(db),
        ChildRepository(db, cache, ttls),
        ParentRepository(db, cache, ttls),
    )


async def get_search_service(db: ReadDb, cache: Cache, ttls: TTLs) -> SearchService:
    return SearchService(ChildRepository(db, cache, ttls), PostRepository(db, cache, ttls))


async def get_parent_dashboard_service(
    db: ReadDb, cache: Cache, ttls: TTLs
) -> ParentDashboardService:
    return ParentDashboardService(
        ParentRepository(db, cache, ttls), ChildRepository(db, cache, ttls)
    )


def _child_management(
    db: AsyncSession, cache: CacheGateway | None, ttls: CacheTTLs
) -> ChildManagementService:
    return ChildManagementService(
        ChildRepository(db, cache, ttls),
        ParentRepository(db, cache, ttls),
        hash_password=get_password_hash,
        default_avatar=get_settings().default_child_avatar,
    )


async def get_username_check_service(
    db: ReadDb, cache: Cache, ttls: TTLs
) -> ChildManagementService:
    return _child_management(db, cache, ttls)


# ---- Writes ----


async def get_post_write_service(db: WriteDb, cache: Cache, ttls: TTLs) -> PostService:
    return PostService(
        PostRepository(db, cache, ttls),
        ChildRepository(db, cache, ttls),
        CategoryRepository(db, cache, ttls),
    )


async def get_category_write_service(
    db: WriteDb, cache: Cache, ttls: TTLs
) -> CategoryService:
    return CategoryService(CategoryRepository(db, cache, ttls))


async def get_comment_write_service(
    db: WriteDb, cache: Cache, ttls: TTLs
) -> CommentService:
    return CommentService(
        CommentRepository(db, cache, ttls),
        PostRepository(db, cache, ttls),
        ChildRepository(db, cache, ttls),
    )


async def get_like_write_service(db: WriteDb, cache: Cache, ttls: TTLs) -> LikeService:
    return LikeService(
        LikeRepository(db), PostRepository(db, cache, ttls), ChildRepository(db, cache, ttls)
    )


async def get_follow_write_service(
    db: WriteDb, cache: Cache, ttls: TTLs
) -> FollowService:
    return FollowService(
        FollowRepository(db),
        ChildRepository(db, cache, ttls),
        ParentRepository(db, cache, ttls),
    )


async def get_child_management_service(
    db: WriteDb, cache: Cache, ttls: TTLs
) -> ChildManagementService:
    return _child_management(db, cache, ttls)
