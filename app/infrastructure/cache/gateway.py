"""Read-through cache gateway with explicit key and pattern invalidation.

Reads go through get_or_set(): on a hit the stored value is returned, on a
miss the caller's fetch coroutine runs against the datastore and its result
is stored with a TTL. Writes bypass the cache and call invalidate() after
the datastore write, once per key or pattern they know may be stale.

The store is treated as optional infrastructure: every store call is
bounded by a timeout, and store errors or timeouts are logged and handled
as a miss (reads) or dropped (writes and invalidation). Errors raised by
fetch propagate unchanged and nothing is cached for them.

Concurrent misses on the same key are not de-duplicated; each one calls
fetch. Short TTLs on hot, cheap keys bound the cost.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import is_pattern
from app.infrastructure.cache.policy import EmptyResultPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_empty(value: Any) -> bool:
    """Return True for falsy results: empty collections, "", 0 and False."""
    return not value


class CacheGateway:
    """Read-through accessor and invalidator over a CacheProtocol store."""

    def __init__(
        self,
        store: CacheProtocol,
        *,
        op_timeout_seconds: float = 2.0,
        empty_result_policy: EmptyResultPolicy = EmptyResultPolicy.SKIP,
    ) -> None:
        """Initialize the gateway.

        Args:
            store: Cache store (Redis CacheService in production, fakes in tests).
            op_timeout_seconds: Upper bound for each individual store call.
            empty_result_policy: Whether empty fetch results are cached.
        """
        self.store = store
        self.op_timeout_seconds = op_timeout_seconds
        self.empty_result_policy = empty_result_policy

    def is_available(self) -> bool:
        try:
            return bool(self.store.is_available())
        except Exception:
            logger.warning("Cache availability check failed; treating store as unavailable", exc_info=True)
            return False

    async def ensure_available(self) -> bool:
        """Like is_available(), but lets a down store try to reconnect first."""
        ok, available = await self._call("connect", "store", self.store.ensure_connected)
        return bool(ok and available)

    async def _call(
        self, op: str, key: str, call: Callable[[], Awaitable[Any]]
    ) -> tuple[bool, Any]:
        """Run one store call under the timeout. Returns (ok, result); never raises."""
        try:
            return True, await asyncio.wait_for(call(), timeout=self.op_timeout_seconds)
        except TimeoutError:
            logger.warning(
                "Cache %s timed out after %ss for %s", op, self.op_timeout_seconds, key
            )
        except Exception as e:
            logger.warning("Cache %s error for %s: %s", op, key, e)
        return False, None

    def _should_store(self, value: Any) -> bool:
        if value is None:
            return False
        if self.empty_result_policy is EmptyResultPolicy.STORE:
            return True
        return not _is_empty(value)

    async def get_or_set(
        self,
        key: str,
        fetch: Callable[[], Awaitable[T]],
        ttl_seconds: int,
    ) -> T:
        """Return the cached value for key, or fetch, store and return it.

        Args:
            key: Cache key built with app.infrastructure.cache.keys.
            fetch: Zero-argument coroutine function reading from the datastore.
            ttl_seconds: Expiry for a freshly stored value.

        Returns:
            The cached value on a hit, otherwise the result of fetch().

        Raises:
            ValueError: If key is empty or ttl_seconds is not positive.
            Exception: Whatever fetch() raises, unchanged.
        """
        if not key:
            raise ValueError("Cache key must be a non-empty string")
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be a positive integer, got {ttl_seconds!r}")

        available = await self.ensure_available()
        if available:
            ok, cached = await self._call("get", key, lambda: self.store.get(key))
            if ok and cached is not None:
                logger.debug("Cache HIT: %s", key)
                return cached
        logger.debug("Cache MISS: %s", key)

        value = await fetch()

        if available and self._should_store(value):
            await self._call("set", key, lambda: self.store.set(key, value, ttl=ttl_seconds))
        return value

    async def invalidate(self, key_or_pattern: str) -> int:
        """Remove one key, or every key matching a glob pattern.

        Missing keys are a silent no-op. Store errors are logged, not raised.

        Returns:
            Number of keys removed (best effort; 0 when unknown or on error).
        """
        if not key_or_pattern:
            raise ValueError("Cache key or pattern must be a non-empty string")
        if not await self.ensure_available():
            return 0
        if is_pattern(key_or_pattern):
            ok, removed = await self._call(
                "delete_pattern",
                key_or_pattern,
                lambda: self.store.delete_pattern(key_or_pattern),
            )
            return int(removed or 0) if ok else 0
        ok, deleted = await self._call(
            "delete", key_or_pattern, lambda: self.store.delete(key_or_pattern)
        )
        if ok:
            logger.debug("Cache INVALIDATE: %s", key_or_pattern)
        return 1 if ok and deleted else 0

    async def invalidate_many(self, keys_or_patterns: Iterable[str]) -> int:
        """Invalidate each key or pattern in order; return total removed."""
        total = 0
        for key in keys_or_patterns:
            total += await self.invalidate(key)
        return total
