"""DTOs for the children-and-posts search (no dependency on ORM)."""

from dataclasses import dataclass

from app.application.dtos.post import FeedPostResult


@dataclass(frozen=True)
class ChildSearchResult:
    """Child matched by name or username."""

    id: str
    code: str
    name: str
    username: str
    age: int
    avatar: str | None
    xp_points: int
    level: int
    total_posts: int


@dataclass(frozen=True)
class SearchResults:
    children: list[ChildSearchResult]
    posts: list[FeedPostResult]
