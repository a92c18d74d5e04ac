"""DTOs for child profiles and child management (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class ChildSummary:
    """Author block embedded in feed posts."""

    name: str
    username: str
    avatar: str | None
    age: int
    level: int


@dataclass(frozen=True)
class ChildProfileResult:
    """Public child profile aggregate (cached by username)."""

    id: str
    code: str
    name: str
    username: str
    bio: str | None
    avatar: str | None
    age: int
    level: int
    xp_points: int
    total_posts: int
    total_likes_received: int
    total_comments_made: int
    followers_count: int
    following_count: int
    created_at: datetime


@dataclass(frozen=True)
class ChildResult:
    """Child as seen by its parent (dashboard list and details)."""

    id: str
    code: str
    parent_id: str
    name: str
    username: str
    bio: str | None
    avatar: str | None
    birth_date: date | None
    age: int
    gender: str | None
    preferred_categories: list[str]
    xp_points: int
    level: int
    total_posts: int
    learning_hours: float
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class ChildCreate:
    """Input for creating a child profile under a parent."""

    name: str
    username: str
    password: str
    age: int
    birth_date: date | None = None
    bio: str | None = None
    gender: str | None = None
    avatar: str | None = None
    preferred_categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChildProfileUpdate:
    """Input for a parent editing a child's public profile."""

    name: str
    username: str
    bio: str | None = None
    avatar: str | None = None


@dataclass(frozen=True)
class ChildRef:
    """Identity of a child whose cached views may need invalidation."""

    id: str
    username: str
    parent_id: str
