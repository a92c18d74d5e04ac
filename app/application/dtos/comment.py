"""DTOs for comments (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import ActorType


@dataclass(frozen=True)
class CommentAuthor:
    """Author block of a comment. Name fields are only filled for child authors."""

    author_type: ActorType
    child_id: str | None
    parent_id: str | None
    name: str | None
    username: str | None
    avatar: str | None


@dataclass(frozen=True)
class CommentResult:
    id: str
    code: str
    post_id: str
    content: str
    likes_count: int
    is_edited: bool
    created_at: datetime
    author: CommentAuthor


@dataclass(frozen=True)
class CommentRef:
    """Identity and ownership of a stored comment (for delete)."""

    id: str
    code: str
    post_id: str
    child_id: str | None
    parent_id: str | None


@dataclass(frozen=True)
class CommentMutationResult:
    """Outcome of add/delete: the affected comment and the recounted total."""

    comment_id: str
    comment_code: str
    comments_count: int
