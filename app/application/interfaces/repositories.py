"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Cached reads return JSON-compatible payloads (dicts and lists), the same
shape whether they were served from the cache or from the database.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.actor import Actor
    from app.application.dtos.category import CategoryCreate, CategoryResult
    from app.application.dtos.child import (
        ChildCreate,
        ChildProfileUpdate,
        ChildRef,
        ChildResult,
    )
    from app.application.dtos.comment import CommentRef
    from app.application.dtos.post import FeedPostResult, PostCreate, PostResult
    from app.application.dtos.search import ChildSearchResult
    from app.domain.enums import ActorType


class IPostRepository(Protocol):
    """Protocol for post repository (DIP)."""

    async def get_feed_posts(
        self, page: int = 1, limit: int = 10, category_ids: Sequence[str] | None = None
    ) -> list[dict[str, Any]]:
        """Return one feed page (read-through)."""

    async def get_child_posts(self, child_id: str) -> list[dict[str, Any]]:
        """Return a child's active posts (read-through)."""

    async def search_posts(self, query: str, limit: int) -> list[FeedPostResult]:
        """Return active posts whose title or content contains query (uncached)."""

    async def get_owner_id(self, post_id: str) -> str | None:
        """Return the authoring child id of an active post."""

    async def create_post(self, data: PostCreate) -> PostResult:
        """Insert a post; invalidates feed pages and the author's profile posts."""

    async def adjust_likes(self, post_id: str, delta: int) -> int:
        """Add delta to likes_count (floored at 0); return the new count."""

    async def recount_comments(self, post_id: str) -> int:
        """Recompute comments_count from rows; return it."""


class ICategoryRepository(Protocol):
    """Protocol for category repository (DIP)."""

    async def get_categories(self) -> list[dict[str, Any]]:
        """Return all categories (read-through)."""

    async def exists(self, category_id: str) -> bool:
        """Return True if the category exists."""

    async def create_category(self, data: CategoryCreate) -> CategoryResult:
        """Insert a category; invalidates the category list."""


class IChildRepository(Protocol):
    """Protocol for child repository (DIP)."""

    async def get_profile(self, username: str) -> dict[str, Any] | None:
        """Return a public profile by username (read-through)."""

    async def get_ref(self, child_id: str) -> ChildRef | None:
        """Return id, username and parent id of a child."""

    async def get_child_for_parent(
        self, parent_id: str, child_id: str
    ) -> ChildResult | None:
        """Return the child if it belongs to parent_id."""

    async def username_exists(
        self, username: str, exclude_child_id: str | None = None
    ) -> bool:
        """Return True if another child already uses username."""

    async def create_child(
        self,
        parent_id: str,
        data: ChildCreate,
        password_hash: str,
        default_avatar: str | None = None,
    ) -> ChildResult:
        """Insert a child; invalidates the parent dashboard."""

    async def update_profile(
        self, parent_id: str, child_id: str, data: ChildProfileUpdate
    ) -> ChildResult | None:
        """Edit a child's profile; invalidates old and new profile keys and the parent dashboard."""

    async def adjust_stats(
        self,
        child_id: str,
        *,
        xp_points: int = 0,
        total_posts: int = 0,
        total_likes_received: int = 0,
        total_comments_made: int = 0,
        include_parent_cache: bool = False,
    ) -> ChildRef | None:
        """Add deltas to counters (floored at 0); invalidates the child's profile."""

    async def search_children(self, query: str, limit: int) -> list[ChildSearchResult]:
        """Return active children whose name or username contains query (uncached)."""

    async def set_password(self, parent_id: str, child_id: str, password_hash: str) -> bool:
        """Replace a child's password hash; False unless the child belongs to parent_id."""

    async def invalidate_profile(self, child_id: str) -> None:
        """Drop the cached profile of a child."""


class IParentRepository(Protocol):
    """Protocol for parent repository (DIP)."""

    async def exists(self, parent_id: str) -> bool:
        """Return True if the parent exists."""

    async def get_stats(self, parent_id: str) -> dict[str, Any]:
        """Return dashboard totals (read-through)."""

    async def get_children(self, parent_id: str) -> list[dict[str, Any]]:
        """Return the parent's children (read-through)."""


class ICommentRepository(Protocol):
    """Protocol for comment repository (DIP)."""

    async def get_comments(self, post_id: str) -> list[dict[str, Any]]:
        """Return comments of a post (read-through)."""

    async def get_ref(self, comment_id: str) -> CommentRef | None:
        """Return ownership info of a comment."""

    async def add_comment(self, actor: Actor, post_id: str, content: str) -> CommentRef:
        """Insert a comment; invalidates the comment list and feed pages."""

    async def delete_comment(self, comment_id: str) -> CommentRef | None:
        """Delete a comment; invalidates the comment list and feed pages."""


class ILikeRepository(Protocol):
    """Protocol for like repository (DIP)."""

    async def find_id(self, actor: Actor, post_id: str) -> str | None:
        """Return the id of actor's like on the post."""

    async def add_like(self, actor: Actor, post_id: str) -> None:
        """Insert a like."""

    async def remove_like(self, like_id: str) -> None:
        """Delete a like."""


class IFollowRepository(Protocol):
    """Protocol for follow repository (DIP)."""

    async def find_id(
        self, follower: Actor, target_id: str, target_type: ActorType
    ) -> str | None:
        """Return the id of the follow edge."""

    async def add_follow(
        self, follower: Actor, target_id: str, target_type: ActorType
    ) -> None:
        """Insert a follow edge."""

    async def remove_follow(self, follow_id: str) -> None:
        """Delete a follow edge."""
