"""Cache: Redis store, read-through gateway, key builders and invalidation helpers.

Used by repositories for feed, profile, category, comment and parent
dashboard reads. Key format lives in keys.py; reads and writes share it.
"""

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import (
    invalidate_categories,
    invalidate_child_profile,
    invalidate_comments,
    invalidate_feed,
    invalidate_parent_cache,
)
from app.infrastructure.cache.keys import (
    categories_key,
    comments_key,
    feed_posts_key,
    feed_posts_pattern,
    parent_children_key,
    parent_role_key,
    parent_stats_key,
    profile_key,
    profile_posts_key,
)
from app.infrastructure.cache.policy import (
    DEFAULT_CACHE_TTLS,
    CacheTTLs,
    EmptyResultPolicy,
)
from app.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheGateway",
    "CacheProtocol",
    "CacheService",
    "CacheTTLs",
    "DEFAULT_CACHE_TTLS",
    "EmptyResultPolicy",
    "categories_key",
    "comments_key",
    "feed_posts_key",
    "feed_posts_pattern",
    "invalidate_categories",
    "invalidate_child_profile",
    "invalidate_comments",
    "invalidate_feed",
    "invalidate_parent_cache",
    "parent_children_key",
    "parent_role_key",
    "parent_stats_key",
    "profile_key",
    "profile_posts_key",
]
