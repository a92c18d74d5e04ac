"""DTOs for likes and follows (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LikeToggleResult:
    is_liked: bool
    likes_count: int


@dataclass(frozen=True)
class FollowToggleResult:
    is_following: bool
