"""DTOs for posts and feed pages (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.child import ChildSummary
from app.domain.enums import MediaType


@dataclass(frozen=True)
class CategorySummary:
    """Category block embedded in feed posts."""

    name: str
    color: str
    icon: str


@dataclass(frozen=True)
class FeedPostResult:
    """Post as shown in feeds and on profiles (with author and category)."""

    id: str
    code: str
    child_id: str
    category_id: str
    title: str | None
    content: str
    media_type: MediaType
    media_url: str | None
    media_thumbnail: str | None
    likes_count: int
    comments_count: int
    views_count: int
    created_at: datetime
    child: ChildSummary
    category: CategorySummary


@dataclass(frozen=True)
class PostCreate:
    """Input for creating a post."""

    child_id: str
    category_id: str
    content: str
    media_type: MediaType = MediaType.NONE
    title: str | None = None
    media_url: str | None = None
    media_thumbnail: str | None = None


@dataclass(frozen=True)
class PostResult:
    """Created post (write-path result)."""

    id: str
    code: str
    child_id: str
    category_id: str
    title: str | None
    content: str
    media_type: MediaType
    media_url: str | None
    media_thumbnail: str | None
    created_at: datetime
