"""Feed, post, category, profile and search endpoint tests. Services run over mocked repos."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

from httpx import AsyncClient

from app.api.v1.dependencies import (
    get_category_service,
    get_category_write_service,
    get_feed_service,
    get_post_write_service,
    get_profile_service,
    get_search_service,
)
from app.application.dtos.category import CategoryResult
from app.application.dtos.child import ChildRef, ChildSummary
from app.application.dtos.post import CategorySummary, FeedPostResult, PostResult
from app.application.dtos.search import ChildSearchResult
from app.application.use_cases import (
    CategoryService,
    FeedService,
    PostService,
    ProfileService,
    SearchService,
)
from app.domain.enums import MediaType
from app.main import app

FEED_POST = {
    "id": "p1",
    "code": "post_m5x1_ab12",
    "child_id": "child-1",
    "category_id": "cat1",
    "title": "Volcano",
    "content": "I built a volcano!",
    "media_type": "NONE",
    "media_url": None,
    "media_thumbnail": None,
    "likes_count": 2,
    "comments_count": 1,
    "views_count": 0,
    "created_at": "2025-01-15T12:00:00+00:00",
    "child": {"name": "Ada", "username": "ada", "avatar": None, "age": 8, "level": 2},
    "category": {"name": "Science", "color": "green", "icon": "flask"},
}

PROFILE = {
    "id": "child-1",
    "code": "QC25ABC123",
    "name": "Ada",
    "username": "ada",
    "bio": None,
    "avatar": None,
    "age": 8,
    "level": 2,
    "xp_points": 40,
    "total_posts": 3,
    "total_likes_received": 4,
    "total_comments_made": 1,
    "followers_count": 2,
    "following_count": 0,
    "created_at": "2025-01-01T00:00:00+00:00",
}


async def test_feed_returns_posts(client: AsyncClient) -> None:
    post_repo = AsyncMock()
    post_repo.get_feed_posts = AsyncMock(return_value=[FEED_POST])
    app.dependency_overrides[get_feed_service] = lambda: FeedService(post_repo)

    response = await client.get(
        "/api/v1/feed", params={"page": 2, "limit": 5, "category_id": ["b", "a"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == ["p1"]
    assert data[0]["child"]["username"] == "ada"
    post_repo.get_feed_posts.assert_awaited_once_with(page=2, limit=5, category_ids=["b", "a"])


async def test_feed_limit_out_of_range_is_422(client: AsyncClient) -> None:
    app.dependency_overrides[get_feed_service] = lambda: FeedService(AsyncMock())
    response = await client.get("/api/v1/feed", params={"limit": 500})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_feed_malformed_category_id_is_400(client: AsyncClient) -> None:
    post_repo = AsyncMock()
    app.dependency_overrides[get_feed_service] = lambda: FeedService(post_repo)
    response = await client.get("/api/v1/feed", params={"category_id": "a:b"})
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "category_id"}
    post_repo.get_feed_posts.assert_not_awaited()


async def test_create_post_requires_actor(client: AsyncClient) -> None:
    app.dependency_overrides[get_post_write_service] = lambda: PostService(
        AsyncMock(), AsyncMock(), AsyncMock()
    )
    response = await client.post(
        "/api/v1/posts", json={"category_id": "cat1", "content": "hello"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_create_post_as_parent_forbidden(
    client: AsyncClient, parent_headers: dict[str, str]
) -> None:
    app.dependency_overrides[get_post_write_service] = lambda: PostService(
        AsyncMock(), AsyncMock(), AsyncMock()
    )
    response = await client.post(
        "/api/v1/posts",
        json={"category_id": "cat1", "content": "hello"},
        headers=parent_headers,
    )
    assert response.status_code == 403


async def test_create_post_as_child(client: AsyncClient, child_headers: dict[str, str]) -> None:
    post_repo = AsyncMock()
    child_repo = AsyncMock()
    category_repo = AsyncMock()
    child_repo.get_ref = AsyncMock(
        return_value=ChildRef(id="child-1", username="ada", parent_id="parent-1")
    )
    category_repo.exists = AsyncMock(return_value=True)
    post_repo.create_post = AsyncMock(
        return_value=PostResult(
            id="p9",
            code="post_m5x1_zz99",
            child_id="child-1",
            category_id="cat1",
            title=None,
            content="hello",
            media_type=MediaType.NONE,
            media_url=None,
            media_thumbnail=None,
            created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
        )
    )
    app.dependency_overrides[get_post_write_service] = lambda: PostService(
        post_repo, child_repo, category_repo
    )

    response = await client.post(
        "/api/v1/posts",
        json={"category_id": "cat1", "content": "hello"},
        headers=child_headers,
    )

    assert response.status_code == 201
    assert response.json()["id"] == "p9"
    created = post_repo.create_post.await_args.args[0]
    assert created.child_id == "child-1"


async def test_create_post_empty_content_is_422(
    client: AsyncClient, child_headers: dict[str, str]
) -> None:
    app.dependency_overrides[get_post_write_service] = lambda: PostService(
        AsyncMock(), AsyncMock(), AsyncMock()
    )
    response = await client.post(
        "/api/v1/posts", json={"category_id": "cat1", "content": ""}, headers=child_headers
    )
    assert response.status_code == 422


async def test_list_categories(client: AsyncClient) -> None:
    repo = AsyncMock()
    repo.get_categories = AsyncMock(
        return_value=[{"id": "cat1", "name": "Art", "icon": "brush", "color": "red"}]
    )
    app.dependency_overrides[get_category_service] = lambda: CategoryService(repo)
    response = await client.get("/api/v1/categories")
    assert response.status_code == 200
    assert response.json() == [{"id": "cat1", "name": "Art", "icon": "brush", "color": "red"}]


async def test_create_category_parent_only(
    client: AsyncClient, child_headers: dict[str, str], parent_headers: dict[str, str]
) -> None:
    repo = AsyncMock()
    repo.create_category = AsyncMock(
        return_value=CategoryResult(id="cat2", name="Music", icon="note", color="blue")
    )
    app.dependency_overrides[get_category_write_service] = lambda: CategoryService(repo)
    body = {"name": "Music", "icon": "note", "color": "blue"}

    denied = await client.post("/api/v1/categories", json=body, headers=child_headers)
    created = await client.post("/api/v1/categories", json=body, headers=parent_headers)

    assert denied.status_code == 403
    assert created.status_code == 201
    assert created.json()["id"] == "cat2"


async def test_profile_found_and_missing(client: AsyncClient) -> None:
    child_repo = AsyncMock()
    child_repo.get_profile = AsyncMock(side_effect=lambda u: PROFILE if u == "ada" else None)
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(child_repo, AsyncMock())

    found = await client.get("/api/v1/profiles/ada")
    missing = await client.get("/api/v1/profiles/ghost")

    assert found.status_code == 200
    assert found.json()["followers_count"] == 2
    assert missing.status_code == 404
    assert missing.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_profile_username_pattern_enforced(client: AsyncClient) -> None:
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(AsyncMock(), AsyncMock())
    response = await client.get("/api/v1/profiles/bad*name")
    assert response.status_code == 422


async def test_profile_posts(client: AsyncClient) -> None:
    child_repo = AsyncMock()
    child_repo.get_profile = AsyncMock(return_value=PROFILE)
    post_repo = AsyncMock()
    post_repo.get_child_posts = AsyncMock(return_value=[FEED_POST])
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(child_repo, post_repo)

    response = await client.get("/api/v1/profiles/ada/posts")

    assert response.status_code == 200
    assert response.json()[0]["id"] == "p1"
    post_repo.get_child_posts.assert_awaited_once_with("child-1")


def _search_service() -> tuple[SearchService, AsyncMock, AsyncMock]:
    child_repo, post_repo = AsyncMock(), AsyncMock()
    child_repo.search_children = AsyncMock(
        return_value=[
            ChildSearchResult(
                id="child-1",
                code="QC25ABC123",
                name="Ada",
                username="ada",
                age=8,
                avatar=None,
                xp_points=40,
                level=2,
                total_posts=3,
            )
        ]
    )
    post_repo.search_posts = AsyncMock(
        return_value=[
            FeedPostResult(
                id="p1",
                code="post_m5x1_ab12",
                child_id="child-1",
                category_id="cat1",
                title="Volcano",
                content="I built a volcano!",
                media_type=MediaType.NONE,
                media_url=None,
                media_thumbnail=None,
                likes_count=2,
                comments_count=1,
                views_count=0,
                created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
                child=ChildSummary(name="Ada", username="ada", avatar=None, age=8, level=2),
                category=CategorySummary(name="Science", color="green", icon="flask"),
            )
        ]
    )
    return SearchService(child_repo, post_repo), child_repo, post_repo


async def test_search_returns_children_then_posts(client: AsyncClient) -> None:
    svc, child_repo, _ = _search_service()
    app.dependency_overrides[get_search_service] = lambda: svc

    response = await client.get("/api/v1/search", params={"q": " ada "})

    assert response.status_code == 200
    results = response.json()["results"]
    assert [(r["type"], r["id"]) for r in results] == [("child", "child-1"), ("post", "p1")]
    assert results[1]["child"]["username"] == "ada"
    child_repo.search_children.assert_awaited_once_with("ada", 10)


async def test_search_blank_query_returns_nothing(client: AsyncClient) -> None:
    svc, child_repo, _ = _search_service()
    app.dependency_overrides[get_search_service] = lambda: svc
    response = await client.get("/api/v1/search")
    assert response.status_code == 200
    assert response.json() == {"results": []}
    child_repo.search_children.assert_not_awaited()
