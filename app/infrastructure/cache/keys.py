"""Cache key builders. Single place for key format.

Reads that populate the cache and writes that invalidate it must build
their keys here, so both sides produce byte-identical strings. Key
components (usernames, ids) must not contain CACHE_KEY_SEP or glob
characters to avoid ambiguous keys and accidental pattern matches.
"""

from collections.abc import Iterable

from app.core.constants import (
    CACHE_GLOB_CHARS,
    CACHE_KEY_SEP,
    CACHE_LIST_SEP,
    CACHE_PREFIX_CATEGORIES,
    CACHE_PREFIX_COMMENTS,
    CACHE_PREFIX_FEED,
    CACHE_PREFIX_PARENT,
    CACHE_PREFIX_PROFILE,
    CACHE_PREFIX_USER_ROLE,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the separator or a glob character.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty, contains CACHE_KEY_SEP or a glob character.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )
    if any(ch in CACHE_GLOB_CHARS for ch in value):
        raise ValueError(
            f"Cache key component {name!r} must not contain glob characters"
        )


def _validate_key_components(components: list[tuple[str, str]]) -> None:
    """Validate multiple key components; raise on first invalid one."""
    for value, name in components:
        _validate_key_component(value, name)


def _join(*parts: object) -> str:
    return CACHE_KEY_SEP.join(str(p) for p in parts)


def canonical_id_list(ids: Iterable[str]) -> str:
    """Return ids sorted and de-duplicated, joined by CACHE_LIST_SEP.

    The same logical filter set always yields the same string regardless of
    client-supplied order.
    """
    unique = sorted(set(ids))
    for value in unique:
        _validate_key_component(value, "category_id")
        if CACHE_LIST_SEP in value:
            raise ValueError(
                f"Cache key component 'category_id' must not contain {CACHE_LIST_SEP!r}"
            )
    return CACHE_LIST_SEP.join(unique)


def feed_posts_key(
    page: int, limit: int, category_ids: Iterable[str] | None = None
) -> str:
    """Cache key for one page of the feed, optionally filtered by categories."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    key = _join(CACHE_PREFIX_FEED, "posts", page, limit)
    cats = canonical_id_list(category_ids or [])
    if cats:
        key = _join(key, "cats", cats)
    return key


def feed_posts_pattern() -> str:
    """Pattern matching every cached feed page (all page sizes and filters)."""
    return _join(CACHE_PREFIX_FEED, "posts", "*")


def categories_key() -> str:
    """Cache key for the full category taxonomy."""
    return _join(CACHE_PREFIX_CATEGORIES, "all")


def profile_key(username: str) -> str:
    """Cache key for a child profile by username."""
    _validate_key_component(username, "username")
    return _join(CACHE_PREFIX_PROFILE, username)


def profile_posts_key(child_id: str) -> str:
    """Cache key for the posts shown on a child's profile."""
    _validate_key_component(child_id, "child_id")
    return _join(CACHE_PREFIX_PROFILE, "posts", child_id)


def comments_key(post_id: str) -> str:
    """Cache key for the comment list of a post."""
    _validate_key_component(post_id, "post_id")
    return _join(CACHE_PREFIX_COMMENTS, post_id)


def parent_stats_key(parent_id: str) -> str:
    """Cache key for parent dashboard stats."""
    _validate_key_component(parent_id, "parent_id")
    return _join(CACHE_PREFIX_PARENT, "stats", parent_id)


def parent_children_key(parent_id: str) -> str:
    """Cache key for the children list of a parent."""
    _validate_key_component(parent_id, "parent_id")
    return _join(CACHE_PREFIX_PARENT, "children", parent_id)


def parent_role_key(parent_id: str) -> str:
    """Cache key for the parent-role flag of a user."""
    _validate_key_component(parent_id, "parent_id")
    return _join(CACHE_PREFIX_USER_ROLE, "parent", parent_id)


def is_pattern(key_or_pattern: str) -> bool:
    """Return True if the argument uses glob syntax (invalidate by pattern)."""
    return any(ch in CACHE_GLOB_CHARS for ch in key_or_pattern)
