"""Invalidation helpers for write paths.

Each helper enumerates the cache keys a kind of write can make stale,
using the same key builders as the read paths. Call them after the write
has been flushed to the datastore. Keys not listed here are only
refreshed by TTL expiry.
"""

from __future__ import annotations

from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.keys import (
    categories_key,
    comments_key,
    feed_posts_pattern,
    parent_children_key,
    parent_role_key,
    parent_stats_key,
    profile_key,
    profile_posts_key,
)


async def invalidate_feed(cache: CacheGateway | None) -> int:
    """Drop every cached feed page (all page sizes and category filters)."""
    if cache is None:
        return 0
    return await cache.invalidate(feed_posts_pattern())


async def invalidate_child_profile(
    cache: CacheGateway | None, username: str | None, child_id: str | None = None
) -> int:
    """Drop a child's profile (by username) and, if child_id is given, its profile posts."""
    if cache is None:
        return 0
    keys: list[str] = []
    if username:
        keys.append(profile_key(username))
    if child_id:
        keys.append(profile_posts_key(child_id))
    return await cache.invalidate_many(keys)


async def invalidate_comments(cache: CacheGateway | None, post_id: str) -> int:
    if cache is None:
        return 0
    return await cache.invalidate(comments_key(post_id))


async def invalidate_categories(cache: CacheGateway | None) -> int:
    if cache is None:
        return 0
    return await cache.invalidate(categories_key())


async def invalidate_parent_cache(cache: CacheGateway | None, parent_id: str | None) -> int:
    """Drop a parent's dashboard stats, children list and role flag."""
    if cache is None or not parent_id:
        return 0
    return await cache.invalidate_many(
        [
            parent_stats_key(parent_id),
            parent_children_key(parent_id),
            parent_role_key(parent_id),
        ]
    )
