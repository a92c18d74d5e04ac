"""Smoke tests for health and app wiring."""

from httpx import AsyncClient

from app.api.v1.dependencies import get_cache
from app.infrastructure.cache.gateway import CacheGateway
from app.main import app


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_health_echoes_request_id(client: AsyncClient) -> None:
    """A well-formed X-Request-ID is returned unchanged on the response."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-abc-123"})
    assert response.headers.get("X-Request-ID") == "req-abc-123"


async def test_health_generates_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")


async def test_ready_reports_cache_disabled(client: AsyncClient) -> None:
    """Without a gateway (REDIS_ENABLED=false or lifespan not run) the cache is 'disabled'."""
    app.dependency_overrides[get_cache] = lambda: None
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "disabled"}


async def test_ready_reports_cache_up(client: AsyncClient, cache: CacheGateway) -> None:
    app.dependency_overrides[get_cache] = lambda: cache
    response = await client.get("/api/v1/health/ready")
    assert response.json()["cache"] == "up"


async def test_ready_reports_cache_down_but_stays_ready(
    client: AsyncClient, cache: CacheGateway, cache_store
) -> None:
    """An unreachable cache is reported, but the service is still ready (reads hit the DB)."""
    cache_store.available = False
    app.dependency_overrides[get_cache] = lambda: cache
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "down"}


async def test_unknown_route_returns_json_error(client: AsyncClient) -> None:
    response = await client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
