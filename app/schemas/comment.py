"""Comment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_COMMENT_LENGTH
from app.domain.enums import ActorType


class CommentAuthorResponse(BaseModel):
    """Comment author. name/username/avatar are set for child authors only."""

    author_type: ActorType
    child_id: str | None = None
    parent_id: str | None = None
    name: str | None = None
    username: str | None = None
    avatar: str | None = None


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    post_id: str
    content: str
    likes_count: int
    is_edited: bool
    created_at: datetime
    author: CommentAuthorResponse


class CommentCreateRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=MAX_COMMENT_LENGTH)


class CommentMutationResponse(BaseModel):
    """Result of adding or deleting a comment, with the post's recounted total."""

    model_config = ConfigDict(from_attributes=True)

    comment_id: str
    comment_code: str
    comments_count: int
