"""Invalidation helper tests: which keys each kind of write drops."""

from app.infrastructure.cache.gateway import CacheGateway
from app.infrastructure.cache.invalidation import (
    invalidate_categories,
    invalidate_child_profile,
    invalidate_comments,
    invalidate_feed,
    invalidate_parent_cache,
)
from app.infrastructure.cache.keys import (
    categories_key,
    comments_key,
    feed_posts_key,
    parent_children_key,
    parent_role_key,
    parent_stats_key,
    profile_key,
    profile_posts_key,
)


async def _fill(cache_store, *keys: str) -> None:
    for key in keys:
        await cache_store.set(key, {"k": key}, ttl=600)


async def test_invalidate_feed_drops_all_pages(cache: CacheGateway, cache_store) -> None:
    await _fill(
        cache_store,
        feed_posts_key(1, 10),
        feed_posts_key(2, 10, ["art"]),
        categories_key(),
    )
    assert await invalidate_feed(cache) == 2
    assert cache_store.keys() == {categories_key()}


async def test_invalidate_child_profile_by_username_and_id(
    cache: CacheGateway, cache_store
) -> None:
    await _fill(cache_store, profile_key("ada"), profile_posts_key("c1"), profile_key("bob"))
    await invalidate_child_profile(cache, "ada", "c1")
    assert cache_store.keys() == {profile_key("bob")}


async def test_invalidate_child_profile_posts_only(cache: CacheGateway, cache_store) -> None:
    await _fill(cache_store, profile_key("ada"), profile_posts_key("c1"))
    await invalidate_child_profile(cache, None, "c1")
    assert cache_store.keys() == {profile_key("ada")}


async def test_invalidate_parent_cache_drops_stats_children_and_role(
    cache: CacheGateway, cache_store
) -> None:
    await _fill(
        cache_store,
        parent_stats_key("u1"),
        parent_children_key("u1"),
        parent_role_key("u1"),
        parent_stats_key("u2"),
    )
    assert await invalidate_parent_cache(cache, "u1") == 3
    assert cache_store.keys() == {parent_stats_key("u2")}


async def test_invalidate_comments_and_categories(cache: CacheGateway, cache_store) -> None:
    await _fill(cache_store, comments_key("p1"), comments_key("p2"), categories_key())
    await invalidate_comments(cache, "p1")
    await invalidate_categories(cache)
    assert cache_store.keys() == {comments_key("p2")}


async def test_helpers_are_noops_without_cache() -> None:
    assert await invalidate_feed(None) == 0
    assert await invalidate_child_profile(None, "ada", "c1") == 0
    assert await invalidate_comments(None, "p1") == 0
    assert await invalidate_categories(None) == 0
    assert await invalidate_parent_cache(None, "u1") == 0


async def test_parent_cache_without_parent_id_is_noop(cache: CacheGateway) -> None:
    assert await invalidate_parent_cache(cache, None) == 0
