"""Per-feature TTL policy and the empty-result caching policy.

TTLs are the maximum staleness each feature tolerates: long for the
category taxonomy, minutes for profile aggregates, tens of seconds for
feed pages.
"""

from dataclasses import dataclass
from enum import Enum

from app.core.config import Settings


class EmptyResultPolicy(str, Enum):
    """Whether empty or falsy fetch results ([], "", 0, False) are written to the cache.

    SKIP recomputes empty results on every request, which avoids pinning a
    transient empty state; STORE caches them like any other value. None is
    never cached under either policy.
    """

    SKIP = "skip"
    STORE = "store"


@dataclass(frozen=True)
class CacheTTLs:
    """TTL in seconds for each cached read."""

    feed: int = 60
    categories: int = 3600
    profile: int = 300
    profile_posts: int = 60
    comments: int = 300
    parent: int = 600

    @classmethod
    def from_settings(cls, settings: Settings) -> "CacheTTLs":
        return cls(
            feed=settings.cache_ttl_feed,
            categories=settings.cache_ttl_categories,
            profile=settings.cache_ttl_profile,
            profile_posts=settings.cache_ttl_profile_posts,
            comments=settings.cache_ttl_comments,
            parent=settings.cache_ttl_parent,
        )


DEFAULT_CACHE_TTLS = CacheTTLs()
