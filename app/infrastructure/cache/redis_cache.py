"""Redis-based cache store.

Provides async Redis access with TTL support for the read-through cache
(feed pages, profiles, categories, comments, parent dashboards). Values
are JSON-serialized. Connection problems never propagate: the store logs,
tries one reconnect, and reports a neutral result so callers degrade to
direct datastore reads. While Redis is down, ensure_connected() retries
the connection at most once per reconnect interval.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import redis.asyncio as redis

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Keys per UNLINK round-trip in delete_pattern.
PATTERN_DELETE_CHUNK_SIZE = 500


class CacheService:
    """Async Redis cache store with TTL support.

    Uses app.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI. When given,
                the service is considered connected.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None
        self.reconnect_interval_seconds = self.settings.cache_reconnect_interval_seconds
        self._next_connect_at = 0.0

    def _build_client(self) -> redis.Redis:
        timeout = self.settings.cache_op_timeout_seconds
        if self.settings.redis_url:
            return redis.from_url(
                self.settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
            )
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
            socket_keepalive=True,
        )

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup.

        A failed attempt leaves the cache disabled; ensure_connected() retries
        it later, at most once per reconnect interval.
        """
        if self.redis is not None:
            return
        client = self._build_client()
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self._next_connect_at = time.monotonic() + self.reconnect_interval_seconds
            try:
                await client.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing failed Redis client")
            return
        self.redis = client
        self._connected = True
        logger.info("Redis cache connected")

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after a dropped connection. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing stale Redis connection")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    async def ensure_connected(self) -> bool:
        """Return True if usable, retrying connect() when the cache is down and a retry is due."""
        if self.is_available():
            return True
        if time.monotonic() < self._next_connect_at:
            return False
        self._next_connect_at = time.monotonic() + self.reconnect_interval_seconds
        await self.connect()
        return self.is_available()

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    @staticmethod
    def _decode(key: str, raw: str | None) -> Any | None:
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Cache value for key %s is not valid JSON; treating as miss", key)
            return None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable.

        Args:
            key: Cache key (use app.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        if not self.is_available() or self.redis is None:
            return None
        try:
            return self._decode(key, await self.redis.get(key))
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    return self._decode(key, await self.redis.get(key))
                except redis.RedisError:
                    logger.exception("Cache get error for key %s after reconnect", key)
                    return None
            logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
            return None
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success.

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable).
            ttl: Time-to-live in seconds (default 300).

        Returns:
            True if stored, False otherwise.
        """
        if not self.is_available() or self.redis is None:
            return False
        try:
            serialized = json.dumps(value)
        except TypeError:
            logger.exception("Cache value for key %s is not JSON-serializable", key)
            return False
        try:
            await self.redis.setex(key, ttl, serialized)
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    await self.redis.setex(key, ttl, serialized)
                    return True
                except redis.RedisError:
                    logger.exception("Cache set error for key %s after reconnect", key)
            logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
            return False
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Missing keys are a no-op.

        Args:
            key: Cache key to delete.

        Returns:
            True if a key was removed, False if it was absent or Redis failed.
        """
        if not self.is_available() or self.redis is None:
            return False
        try:
            removed = await self.redis.delete(key)
            logger.debug("Cache DELETE: %s", key)
            return bool(removed)
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    return bool(await self.redis.delete(key))
                except redis.RedisError:
                    logger.exception("Cache delete error for key %s after reconnect", key)
            return False
        except redis.RedisError:
            logger.exception("Cache delete error for key %s", key)
            return False

    async def _unlink_chunk(self, chunk: list[str]) -> int:
        async with self.redis.pipeline(transaction=False) as pipe:
            pipe.unlink(*chunk)
            results = await pipe.execute()
        return sum(int(r or 0) for r in results)

    async def delete_pattern(self, pattern: str, *, _retry: bool = True) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        SCAN walks the whole keyspace, so cost grows with total key count,
        not with the number of matches.

        Args:
            pattern: Redis SCAN match pattern (e.g. feed:posts:*).

        Returns:
            Number of keys deleted.
        """
        if not self.is_available() or self.redis is None:
            return 0
        deleted = 0
        try:
            chunk: list[str] = []
            async for key in self.redis.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= PATTERN_DELETE_CHUNK_SIZE:
                    deleted += await self._unlink_chunk(chunk)
                    chunk = []
            if chunk:
                deleted += await self._unlink_chunk(chunk)
            if deleted > 0:
                logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
            return deleted
        except (redis.ConnectionError, redis.TimeoutError):
            if _retry and await self._reconnect():
                return deleted + await self.delete_pattern(pattern, _retry=False)
            logger.warning(
                "Cache delete_pattern unavailable for %s (Redis disconnected)", pattern
            )
            return deleted
        except redis.RedisError:
            logger.exception("Cache delete_pattern error for %s", pattern)
            return deleted
