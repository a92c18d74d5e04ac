"""Like and follow API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import ActorType


class LikeToggleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_liked: bool
    likes_count: int


class LikeStatusResponse(BaseModel):
    is_liked: bool


class FollowRequest(BaseModel):
    """Request body for toggling a follow."""

    target_id: str = Field(..., min_length=1, description="Child or parent id to follow")
    target_type: ActorType = Field(..., description="CHILD or PARENT")


class FollowToggleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_following: bool


class FollowStatusResponse(BaseModel):
    is_following: bool
