"""Feed and post API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import MediaType


class ChildSummaryResponse(BaseModel):
    """Author block of a feed post."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    username: str
    avatar: str | None = None
    age: int
    level: int


class CategorySummaryResponse(BaseModel):
    """Category block of a feed post."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    color: str
    icon: str


class FeedPostResponse(BaseModel):
    """Post as shown in the feed and on profiles."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    child_id: str
    category_id: str
    title: str | None = None
    content: str
    media_type: MediaType
    media_url: str | None = None
    media_thumbnail: str | None = None
    likes_count: int
    comments_count: int
    views_count: int
    created_at: datetime
    child: ChildSummaryResponse
    category: CategorySummaryResponse


class PostCreateRequest(BaseModel):
    """Request body for creating a post as the acting child."""

    category_id: str = Field(..., min_length=1)
    title: str | None = Field(default=None, max_length=255)
    content: str = Field(..., min_length=1, max_length=5000)
    media_type: MediaType = Field(default=MediaType.NONE)
    media_url: str | None = Field(default=None, description="URL of uploaded media")
    media_thumbnail: str | None = Field(default=None)


class PostResponse(BaseModel):
    """Created post."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    child_id: str
    category_id: str
    title: str | None = None
    content: str
    media_type: MediaType
    media_url: str | None = None
    media_thumbnail: str | None = None
    created_at: datetime
