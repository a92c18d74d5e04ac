"""Cache store protocol consumed by CacheGateway. Redis implementation in redis_cache."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache stores (e.g. Redis). Used by CacheGateway."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def ensure_connected(self) -> bool:
        """Retry a dropped or never-made connection if one is due; return availability."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds. Returns True on success."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key from cache; True if it existed. Missing keys are not an error."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Remove every key matching a glob pattern; return number removed."""
        ...
