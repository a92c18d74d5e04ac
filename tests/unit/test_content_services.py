"""Feed, post, category, profile and search use case tests with mocked repos."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.actor import Actor
from app.application.dtos.category import CategoryCreate
from app.application.dtos.child import ChildRef
from app.application.dtos.post import PostCreate, PostResult
from app.application.dtos.search import SearchResults
from app.application.use_cases import (
    CategoryService,
    FeedService,
    PostService,
    ProfileService,
    SearchService,
)
from app.core.constants import (
    MAX_FEED_PAGE_SIZE,
    MAX_SEARCH_QUERY_LENGTH,
    SEARCH_RESULT_LIMIT,
    XP_PER_POST,
)
from app.domain.enums import ActorType, MediaType
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

CHILD = Actor(ActorType.CHILD, "c1")


def _post_create(content: str = "I built a volcano!") -> PostCreate:
    return PostCreate(child_id="c1", category_id="cat1", content=content)


def _post_result() -> PostResult:
    return PostResult(
        id="p1",
        code="post_abc_1234",
        child_id="c1",
        category_id="cat1",
        title=None,
        content="I built a volcano!",
        media_type=MediaType.NONE,
        media_url=None,
        media_thumbnail=None,
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def post_service_mocks():
    post_repo = AsyncMock()
    child_repo = AsyncMock()
    category_repo = AsyncMock()
    child_repo.get_ref = AsyncMock(return_value=ChildRef(id="c1", username="ada", parent_id="u1"))
    category_repo.exists = AsyncMock(return_value=True)
    post_repo.create_post = AsyncMock(return_value=_post_result())
    svc = PostService(post_repo, child_repo, category_repo)
    return svc, post_repo, child_repo, category_repo


async def test_feed_passes_paging_and_filters() -> None:
    post_repo = AsyncMock()
    post_repo.get_feed_posts = AsyncMock(return_value=[{"id": "p1"}])
    svc = FeedService(post_repo)

    result = await svc.get_feed(page=2, limit=5, category_ids=["b", "", "a"])

    assert result == [{"id": "p1"}]
    post_repo.get_feed_posts.assert_awaited_once_with(page=2, limit=5, category_ids=["b", "a"])


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, MAX_FEED_PAGE_SIZE + 1)])
async def test_feed_rejects_bad_paging(page: int, limit: int) -> None:
    post_repo = AsyncMock()
    with pytest.raises(ValidationException):
        await FeedService(post_repo).get_feed(page=page, limit=limit)
    post_repo.get_feed_posts.assert_not_awaited()


@pytest.mark.parametrize("category_id", ["a:b", "a,b", "sci*", "sci?", "[ab]"])
async def test_feed_rejects_malformed_category_ids(category_id: str) -> None:
    post_repo = AsyncMock()
    with pytest.raises(ValidationException) as exc:
        await FeedService(post_repo).get_feed(category_ids=["cat1", category_id])
    assert exc.value.details == {"field": "category_id"}
    post_repo.get_feed_posts.assert_not_awaited()


async def test_create_post_rewards_author(post_service_mocks) -> None:
    svc, post_repo, child_repo, _ = post_service_mocks
    result = await svc.create_post(CHILD, _post_create())

    assert result.id == "p1"
    post_repo.create_post.assert_awaited_once()
    child_repo.adjust_stats.assert_awaited_once_with(
        "c1", total_posts=1, xp_points=XP_PER_POST, include_parent_cache=True
    )


async def test_create_post_for_other_child_forbidden(post_service_mocks) -> None:
    svc, post_repo, _, _ = post_service_mocks
    with pytest.raises(AuthorizationException):
        await svc.create_post(Actor(ActorType.CHILD, "c2"), _post_create())
    post_repo.create_post.assert_not_awaited()


async def test_create_post_by_parent_forbidden(post_service_mocks) -> None:
    svc, _, _, _ = post_service_mocks
    with pytest.raises(AuthorizationException):
        await svc.create_post(Actor(ActorType.PARENT, "c1"), _post_create())


async def test_create_post_blank_content(post_service_mocks) -> None:
    svc, post_repo, _, _ = post_service_mocks
    with pytest.raises(ValidationException):
        await svc.create_post(CHILD, _post_create(content="   "))
    post_repo.create_post.assert_not_awaited()


async def test_create_post_unknown_category(post_service_mocks) -> None:
    svc, post_repo, child_repo, category_repo = post_service_mocks
    category_repo.exists.return_value = False
    with pytest.raises(ResourceNotFoundException):
        await svc.create_post(CHILD, _post_create())
    post_repo.create_post.assert_not_awaited()
    child_repo.adjust_stats.assert_not_awaited()


async def test_create_post_unknown_child(post_service_mocks) -> None:
    svc, _, child_repo, _ = post_service_mocks
    child_repo.get_ref.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await svc.create_post(CHILD, _post_create())


async def test_create_category_requires_name() -> None:
    repo = AsyncMock()
    with pytest.raises(ValidationException):
        await CategoryService(repo).create_category(CategoryCreate(" ", "x", "red"))
    repo.create_category.assert_not_awaited()


async def test_get_categories_delegates() -> None:
    repo = AsyncMock()
    repo.get_categories = AsyncMock(return_value=[{"id": "cat1", "name": "Art"}])
    assert await CategoryService(repo).get_categories() == [{"id": "cat1", "name": "Art"}]


async def test_profile_not_found() -> None:
    child_repo = AsyncMock()
    child_repo.get_profile = AsyncMock(return_value=None)
    svc = ProfileService(child_repo, AsyncMock())
    with pytest.raises(ResourceNotFoundException):
        await svc.get_child_profile("ghost")


async def test_child_posts_resolve_id_from_profile() -> None:
    child_repo = AsyncMock()
    child_repo.get_profile = AsyncMock(return_value={"id": "c1", "username": "ada"})
    post_repo = AsyncMock()
    post_repo.get_child_posts = AsyncMock(return_value=[{"id": "p1"}])
    svc = ProfileService(child_repo, post_repo)

    assert await svc.get_child_posts("ada") == [{"id": "p1"}]
    post_repo.get_child_posts.assert_awaited_once_with("c1")


async def test_child_posts_unknown_user_skips_post_query() -> None:
    child_repo = AsyncMock()
    child_repo.get_profile = AsyncMock(return_value=None)
    post_repo = AsyncMock()
    with pytest.raises(ResourceNotFoundException):
        await ProfileService(child_repo, post_repo).get_child_posts("ghost")
    post_repo.get_child_posts.assert_not_awaited()


async def test_search_blank_query_skips_repos() -> None:
    child_repo, post_repo = AsyncMock(), AsyncMock()
    result = await SearchService(child_repo, post_repo).search("   ")
    assert result == SearchResults(children=[], posts=[])
    child_repo.search_children.assert_not_awaited()
    post_repo.search_posts.assert_not_awaited()


async def test_search_trims_and_caps_each_kind() -> None:
    child_repo, post_repo = AsyncMock(), AsyncMock()
    child_repo.search_children = AsyncMock(return_value=["child"])
    post_repo.search_posts = AsyncMock(return_value=["post"])

    result = await SearchService(child_repo, post_repo).search("  volcano ")

    assert result == SearchResults(children=["child"], posts=["post"])
    child_repo.search_children.assert_awaited_once_with("volcano", SEARCH_RESULT_LIMIT)
    post_repo.search_posts.assert_awaited_once_with("volcano", SEARCH_RESULT_LIMIT)


async def test_search_query_too_long() -> None:
    with pytest.raises(ValidationException):
        await SearchService(AsyncMock(), AsyncMock()).search("x" * (MAX_SEARCH_QUERY_LENGTH + 1))
