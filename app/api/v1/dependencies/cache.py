"""Cache dependencies: the gateway and TTL policy wired by the lifespan."""

from __future__ import annotations

from fastapi import Request

from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.policy import DEFAULT_CACHE_TTLS, CacheTTLs


def get_cache(request: Request) -> CacheGateway | None:
    """Return the app's CacheGateway, or None when caching is disabled."""
    return getattr(request.app.state, "cache", None)


def get_cache_ttls(request: Request) -> CacheTTLs:
    return getattr(request.app.state, "cache_ttls", DEFAULT_CACHE_TTLS)
