"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, Redis
cache store and gateway, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.policy import CacheTTLs, EmptyResultPolicy
from app.infrastructure.cache.redis_cache import CacheService
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, Redis cache (if enabled). A failed Redis connection
    leaves the gateway in place with an unavailable store, so reads fall
    through to the database. Shutdown: cache disconnect, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.cache_ttls = CacheTTLs.from_settings(settings)
    if settings.redis_enabled:
        store = CacheService()
        await store.connect()
        app.state.cache_store = store
        app.state.cache = CacheGateway(
            store,
            op_timeout_seconds=settings.cache_op_timeout_seconds,
            empty_result_policy=EmptyResultPolicy(settings.cache_empty_result_policy),
        )
    else:
        logger.info("Redis cache disabled; reads go straight to the database")
        app.state.cache_store = None
        app.state.cache = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache_store", None) is not None:
        await app.state.cache_store.disconnect()
        logger.info("Cache disconnected")

    from app.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
