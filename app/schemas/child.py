"""Child profile and child management API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_PASSWORD_BYTES, MIN_USERNAME_LENGTH

USERNAME_REGEX = r"^[A-Za-z0-9_.-]+$"


class ChildProfileResponse(BaseModel):
    """Public profile of a child."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    username: str
    bio: str | None = None
    avatar: str | None = None
    age: int
    level: int
    xp_points: int
    total_posts: int
    total_likes_received: int
    total_comments_made: int
    followers_count: int
    following_count: int
    created_at: datetime


class ChildResponse(BaseModel):
    """Child as shown to its parent."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    parent_id: str
    name: str
    username: str
    bio: str | None = None
    avatar: str | None = None
    birth_date: date | None = None
    age: int
    gender: str | None = None
    preferred_categories: list[str] = Field(default_factory=list)
    xp_points: int
    level: int
    total_posts: int
    learning_hours: float
    is_active: bool
    created_at: datetime


class ChildCreateRequest(BaseModel):
    """Request body for creating a child profile under the acting parent."""

    name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(
        ..., min_length=MIN_USERNAME_LENGTH, max_length=50, pattern=USERNAME_REGEX
    )
    password: str = Field(..., min_length=4, max_length=128)
    age: int = Field(..., ge=1, le=25)
    birth_date: date | None = None
    bio: str | None = Field(default=None, max_length=500)
    gender: str | None = Field(default=None, max_length=20)
    avatar: str | None = None
    preferred_categories: list[str] = Field(default_factory=list)


class ChildProfileUpdateRequest(BaseModel):
    """Request body for a parent editing a child's public profile."""

    name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(
        ..., min_length=MIN_USERNAME_LENGTH, max_length=50, pattern=USERNAME_REGEX
    )
    bio: str | None = Field(default=None, max_length=500)
    avatar: str | None = None


class UsernameAvailabilityResponse(BaseModel):
    username: str
    available: bool


class ChildPasswordChangeRequest(BaseModel):
    """Request body for a parent setting a child's new password (length checked by the service)."""

    new_password: str = Field(..., max_length=MAX_PASSWORD_BYTES)


class PasswordChangeResponse(BaseModel):
    success: bool = True
