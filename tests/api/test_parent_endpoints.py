"""Parent dashboard and children management endpoint tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

from httpx import AsyncClient

from app.api.v1.dependencies import (
    get_child_management_service,
    get_parent_dashboard_service,
    get_username_check_service,
)
from app.application.dtos.child import ChildResult
from app.application.use_cases import ChildManagementService, ParentDashboardService
from app.main import app


def _child(username: str = "ada") -> ChildResult:
    return ChildResult(
        id="c1",
        code="QC25ABC123",
        parent_id="parent-1",
        name="Ada",
        username=username,
        bio=None,
        avatar="default.png",
        birth_date=None,
        age=8,
        gender=None,
        preferred_categories=["science"],
        xp_points=0,
        level=1,
        total_posts=0,
        learning_hours=0.0,
        is_active=True,
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


def _child_mgmt(taken: bool = False) -> tuple[ChildManagementService, AsyncMock]:
    child_repo = AsyncMock()
    parent_repo = AsyncMock()
    parent_repo.exists = AsyncMock(return_value=True)
    child_repo.username_exists = AsyncMock(return_value=taken)
    child_repo.create_child = AsyncMock(return_value=_child())
    child_repo.update_profile = AsyncMock(return_value=_child("ada_b"))
    svc = ChildManagementService(
        child_repo, parent_repo, hash_password=lambda p: f"h:{p}", default_avatar="default.png"
    )
    return svc, child_repo


async def test_parent_stats(client: AsyncClient, parent_headers: dict[str, str]) -> None:
    parent_repo = AsyncMock()
    parent_repo.get_stats = AsyncMock(
        return_value={"total_children": 2, "total_posts": 7, "learning_hours": 3.5}
    )
    app.dependency_overrides[get_parent_dashboard_service] = lambda: ParentDashboardService(
        parent_repo, AsyncMock()
    )
    response = await client.get("/api/v1/parents/me/stats", headers=parent_headers)
    assert response.status_code == 200
    assert response.json() == {"total_children": 2, "total_posts": 7, "learning_hours": 3.5}
    parent_repo.get_stats.assert_awaited_once_with("parent-1")


async def test_parent_routes_reject_children(
    client: AsyncClient, child_headers: dict[str, str]
) -> None:
    app.dependency_overrides[get_parent_dashboard_service] = lambda: ParentDashboardService(
        AsyncMock(), AsyncMock()
    )
    response = await client.get("/api/v1/parents/me/children", headers=child_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"


async def test_child_details_of_another_parent_is_404(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    child_repo = AsyncMock()
    child_repo.get_child_for_parent = AsyncMock(return_value=None)
    app.dependency_overrides[get_parent_dashboard_service] = lambda: ParentDashboardService(
        AsyncMock(), child_repo
    )
    response = await client.get("/api/v1/parents/me/children/c1", headers=parent_headers)
    assert response.status_code == 404


async def test_create_child(client: AsyncClient, parent_headers: dict[str, str]) -> None:
    svc, child_repo = _child_mgmt()
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children",
        json={"name": "Ada", "username": "ada", "password": "1234", "age": 8},
        headers=parent_headers,
    )
    assert response.status_code == 201
    assert response.json()["username"] == "ada"
    assert child_repo.create_child.await_args.kwargs["password_hash"] == "h:1234"


async def test_create_child_username_taken_is_409(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    svc, _ = _child_mgmt(taken=True)
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children",
        json={"name": "Ada", "username": "ada", "password": "1234", "age": 8},
        headers=parent_headers,
    )
    assert response.status_code == 409
    assert response.json()["error"] == "USERNAME_TAKEN"


async def test_create_child_invalid_username_is_422(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    svc, _ = _child_mgmt()
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children",
        json={"name": "Ada", "username": "a d", "password": "1234", "age": 8},
        headers=parent_headers,
    )
    assert response.status_code == 422


async def test_update_child_profile(client: AsyncClient, parent_headers: dict[str, str]) -> None:
    svc, child_repo = _child_mgmt()
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.patch(
        "/api/v1/children/c1",
        json={"name": "Ada", "username": "ada_b"},
        headers=parent_headers,
    )
    assert response.status_code == 200
    assert response.json()["username"] == "ada_b"
    assert child_repo.update_profile.await_args.args[:2] == ("parent-1", "c1")


async def test_check_username(client: AsyncClient) -> None:
    svc, _ = _child_mgmt()
    app.dependency_overrides[get_username_check_service] = lambda: svc
    response = await client.get("/api/v1/children/check-username", params={"username": "ada"})
    assert response.status_code == 200
    assert response.json() == {"username": "ada", "available": True}


async def test_change_child_password(client: AsyncClient, parent_headers: dict[str, str]) -> None:
    svc, child_repo = _child_mgmt()
    child_repo.set_password = AsyncMock(return_value=True)
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children/c1/password", json={"new_password": "secret1"}, headers=parent_headers
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}
    child_repo.set_password.assert_awaited_once_with("parent-1", "c1", "h:secret1")


async def test_change_child_password_too_short_is_400(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    svc, child_repo = _child_mgmt()
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children/c1/password", json={"new_password": "12345"}, headers=parent_headers
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "password"}
    child_repo.set_password.assert_not_awaited()


async def test_change_password_of_unknown_child_is_404(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    svc, child_repo = _child_mgmt()
    child_repo.set_password = AsyncMock(return_value=False)
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children/c9/password", json={"new_password": "secret1"}, headers=parent_headers
    )
    assert response.status_code == 404


async def test_child_cannot_change_passwords(
    client: AsyncClient, child_headers: dict[str, str]
) -> None:
    svc, child_repo = _child_mgmt()
    app.dependency_overrides[get_child_management_service] = lambda: svc
    response = await client.post(
        "/api/v1/children/c1/password", json={"new_password": "secret1"}, headers=child_headers
    )
    assert response.status_code == 403
    child_repo.set_password.assert_not_awaited()
