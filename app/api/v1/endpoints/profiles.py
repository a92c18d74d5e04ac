"""Profile API: public child profiles and their posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.api.v1.dependencies import get_profile_service
from app.application.use_cases import ProfileService
from app.schemas.child import USERNAME_REGEX, ChildProfileResponse
from app.schemas.post import FeedPostResponse

router = APIRouter()

Username = Annotated[str, Path(min_length=1, max_length=50, pattern=USERNAME_REGEX)]


@router.get("/{username}", response_model=ChildProfileResponse)
async def get_child_profile(
    username: Username,
    profile_svc: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Return a child's public profile (404 if unknown)."""
    profile = await profile_svc.get_child_profile(username)
    return ChildProfileResponse.model_validate(profile)


@router.get("/{username}/posts", response_model=list[FeedPostResponse])
async def get_child_posts(
    username: Username,
    profile_svc: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Return a child's active posts, newest first."""
    posts = await profile_svc.get_child_posts(username)
    return [FeedPostResponse.model_validate(p) for p in posts]
