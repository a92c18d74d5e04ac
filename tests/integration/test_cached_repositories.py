"""Repository integration tests against Postgres with the in-memory cache store.

Require Postgres; session is rolled back after each test. They check that
a read issued after a write (through the same repositories and gateway)
sees the write, i.e. every write path drops the keys it makes stale.
"""

import uuid

import pytest

from app.application.dtos.actor import Actor
from app.application.dtos.category import CategoryCreate
from app.application.dtos.child import ChildCreate, ChildProfileUpdate
from app.application.dtos.post import PostCreate
from app.application.use_cases import (
    ChildManagementService,
    CommentService,
    FeedService,
    LikeService,
    PostService,
    SearchService,
)
from app.core.constants import XP_PER_LIKE, XP_PER_POST
from app.domain.enums import ActorType
from app.domain.exceptions import UsernameTakenException
from app.infrastructure.cache.keys import (
    categories_key,
    feed_posts_key,
    parent_stats_key,
    profile_key,
)
from app.infrastructure.persistence.models.parent import Parent
from app.infrastructure.persistence.repositories import (
    CategoryRepository,
    ChildRepository,
    CommentRepository,
    LikeRepository,
    ParentRepository,
    PostRepository,
)


def _suffix() -> str:
    return uuid.uuid4().hex[:8]


async def _seed(db_session, cache):
    """Create a parent with one child and one category; return their ids and repos."""
    parent = Parent(external_auth_id=f"auth-{_suffix()}", name="Pat")
    db_session.add(parent)
    await db_session.flush()

    child_repo = ChildRepository(db_session, cache)
    parent_repo = ParentRepository(db_session, cache)
    child = await child_repo.create_child(
        parent.id,
        ChildCreate(name="Ada", username=f"ada_{_suffix()}", password="x", age=8),
        password_hash="hash",
        default_avatar="default.png",
    )
    category = await CategoryRepository(db_session, cache).create_category(
        CategoryCreate(name=f"Science {_suffix()}", icon="flask", color="green")
    )
    return parent.id, child, category, child_repo, parent_repo


def _post_service(db_session, cache) -> PostService:
    return PostService(
        PostRepository(db_session, cache),
        ChildRepository(db_session, cache),
        CategoryRepository(db_session, cache),
    )


@pytest.mark.requires_db
async def test_new_post_visible_in_cached_feed(db_session, cache, cache_store) -> None:
    _, child, category, _, _ = await _seed(db_session, cache)
    actor = Actor(ActorType.CHILD, child.id)
    posts = _post_service(db_session, cache)
    feed = FeedService(PostRepository(db_session, cache))

    first = await posts.create_post(actor, PostCreate(child.id, category.id, "first"))
    page = await feed.get_feed(page=1, limit=50, category_ids=[category.id])
    assert [p["id"] for p in page] == [first.id]
    assert feed_posts_key(1, 50, [category.id]) in cache_store.keys()

    second = await posts.create_post(actor, PostCreate(child.id, category.id, "second"))
    page = await feed.get_feed(page=1, limit=50, category_ids=[category.id])

    assert {p["id"] for p in page} == {first.id, second.id}


@pytest.mark.requires_db
async def test_cached_feed_hit_matches_miss(db_session, cache) -> None:
    _, child, category, _, _ = await _seed(db_session, cache)
    await _post_service(db_session, cache).create_post(
        Actor(ActorType.CHILD, child.id), PostCreate(child.id, category.id, "hello")
    )
    feed = FeedService(PostRepository(db_session, cache))
    miss = await feed.get_feed(page=1, limit=10, category_ids=[category.id])
    hit = await feed.get_feed(page=1, limit=10, category_ids=[category.id])
    assert miss == hit


@pytest.mark.requires_db
async def test_profile_reflects_stat_changes(db_session, cache, cache_store) -> None:
    parent_id, child, category, child_repo, parent_repo = await _seed(db_session, cache)
    before = await child_repo.get_profile(child.username)
    stats = await parent_repo.get_stats(parent_id)
    assert before["xp_points"] == 0
    assert stats["total_posts"] == 0
    assert profile_key(child.username) in cache_store.keys()

    await _post_service(db_session, cache).create_post(
        Actor(ActorType.CHILD, child.id), PostCreate(child.id, category.id, "hello")
    )

    after = await child_repo.get_profile(child.username)
    assert after["xp_points"] == XP_PER_POST
    assert after["total_posts"] == 1
    assert (await parent_repo.get_stats(parent_id))["total_posts"] == 1


@pytest.mark.requires_db
async def test_like_toggle_and_floor(db_session, cache) -> None:
    _, child, category, child_repo, _ = await _seed(db_session, cache)
    post = await _post_service(db_session, cache).create_post(
        Actor(ActorType.CHILD, child.id), PostCreate(child.id, category.id, "hello")
    )
    post_repo = PostRepository(db_session, cache)
    likes = LikeService(LikeRepository(db_session), post_repo, child_repo)
    parent_actor = Actor(ActorType.PARENT, child.parent_id)

    liked = await likes.toggle_like(parent_actor, post.id)
    assert (liked.is_liked, liked.likes_count) == (True, 1)
    profile = await child_repo.get_profile(child.username)
    assert profile["xp_points"] == XP_PER_POST + XP_PER_LIKE
    assert profile["total_likes_received"] == 1

    unliked = await likes.toggle_like(parent_actor, post.id)
    assert (unliked.is_liked, unliked.likes_count) == (False, 0)
    assert await post_repo.adjust_likes(post.id, -1) == 0


@pytest.mark.requires_db
async def test_comment_add_and_delete_refresh_list(db_session, cache) -> None:
    _, child, category, child_repo, _ = await _seed(db_session, cache)
    post = await _post_service(db_session, cache).create_post(
        Actor(ActorType.CHILD, child.id), PostCreate(child.id, category.id, "hello")
    )
    comment_repo = CommentRepository(db_session, cache)
    comments = CommentService(comment_repo, PostRepository(db_session, cache), child_repo)
    actor = Actor(ActorType.CHILD, child.id)

    assert await comments.get_comments(post.id) == []
    added = await comments.add_comment(actor, post.id, "my own comment")
    assert added.comments_count == 1
    listed = await comments.get_comments(post.id)
    assert [c["id"] for c in listed] == [added.comment_id]
    assert listed[0]["author"]["username"] == child.username

    removed = await comments.delete_comment(actor, added.comment_id)
    assert removed.comments_count == 0
    assert await comments.get_comments(post.id) == []
    profile = await child_repo.get_profile(child.username)
    assert profile["total_comments_made"] == 0


@pytest.mark.requires_db
async def test_child_create_and_rename_invalidate(db_session, cache, cache_store) -> None:
    parent_id, child, _, child_repo, parent_repo = await _seed(db_session, cache)
    assert (await parent_repo.get_stats(parent_id))["total_children"] == 1
    await child_repo.get_profile(child.username)

    mgmt = ChildManagementService(child_repo, parent_repo, hash_password=lambda p: "h")
    await mgmt.create_child(
        parent_id, ChildCreate(name="Bo", username=f"bo_{_suffix()}", password="x", age=6)
    )
    assert parent_stats_key(parent_id) not in cache_store.keys()
    assert (await parent_repo.get_stats(parent_id))["total_children"] == 2

    new_name = f"ada_new_{_suffix()}"
    await mgmt.update_child_profile(
        parent_id, child.id, ChildProfileUpdate(name="Ada", username=new_name)
    )
    assert profile_key(child.username) not in cache_store.keys()
    assert await child_repo.get_profile(child.username) is None
    assert (await child_repo.get_profile(new_name))["id"] == child.id


@pytest.mark.requires_db
async def test_new_category_invalidates_list(db_session, cache, cache_store) -> None:
    repo = CategoryRepository(db_session, cache)
    await repo.create_category(CategoryCreate(name=f"Art {_suffix()}", icon="brush", color="red"))
    before = await repo.get_categories()
    assert categories_key() in cache_store.keys()
    created = await repo.create_category(
        CategoryCreate(name=f"Music {_suffix()}", icon="note", color="blue")
    )
    after = await repo.get_categories()
    assert len(after) == len(before) + 1
    assert created.id in {c["id"] for c in after}


@pytest.mark.requires_db
async def test_duplicate_username_raises(db_session, cache) -> None:
    parent_id, child, _, child_repo, _ = await _seed(db_session, cache)
    with pytest.raises(UsernameTakenException):
        await child_repo.create_child(
            parent_id,
            ChildCreate(name="Copy", username=child.username, password="x", age=7),
            password_hash="hash",
        )


@pytest.mark.requires_db
async def test_search_matches_children_and_posts(db_session, cache) -> None:
    _, child, category, child_repo, _ = await _seed(db_session, cache)
    marker = _suffix()
    await _post_service(db_session, cache).create_post(
        Actor(ActorType.CHILD, child.id),
        PostCreate(child.id, category.id, f"my volcano {marker} erupted"),
    )
    search = SearchService(child_repo, PostRepository(db_session, cache))

    by_post = await search.search(marker.upper())
    assert [p.content for p in by_post.posts] == [f"my volcano {marker} erupted"]
    assert by_post.posts[0].child.username == child.username

    by_child = await search.search(child.username)
    assert [c.id for c in by_child.children] == [child.id]


@pytest.mark.requires_db
async def test_search_treats_like_wildcards_literally(db_session, cache) -> None:
    _, _, _, child_repo, _ = await _seed(db_session, cache)
    assert await child_repo.search_children("%", 10) == []


@pytest.mark.requires_db
async def test_set_password_is_scoped_to_parent(db_session, cache) -> None:
    parent_id, child, _, child_repo, _ = await _seed(db_session, cache)
    assert await child_repo.set_password("someone-else", child.id, "other") is False
    assert await child_repo.set_password(parent_id, child.id, "new-hash") is True
