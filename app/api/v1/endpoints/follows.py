"""Follow API: toggle and status."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_actor,
    get_follow_service,
    get_follow_write_service,
)
from app.application.dtos.actor import Actor
from app.application.use_cases import FollowService
from app.core.limiter import limit_writes
from app.domain.enums import ActorType
from app.schemas.social import FollowRequest, FollowStatusResponse, FollowToggleResponse

router = APIRouter()


@router.post("", response_model=FollowToggleResponse)
@limit_writes
async def toggle_follow(
    request: Request,
    body: FollowRequest,
    actor: Annotated[Actor, Depends(get_actor)],
    follow_svc: Annotated[FollowService, Depends(get_follow_write_service)],
):
    """Follow the target, or unfollow if already following."""
    result = await follow_svc.toggle_follow(actor, body.target_id, body.target_type)
    return FollowToggleResponse.model_validate(result)


@router.get("/status", response_model=FollowStatusResponse)
async def get_follow_status(
    actor: Annotated[Actor, Depends(get_actor)],
    follow_svc: Annotated[FollowService, Depends(get_follow_service)],
    target_id: Annotated[str, Query(min_length=1)],
    target_type: Annotated[ActorType, Query()],
):
    """Return whether the actor follows the target."""
    following = await follow_svc.get_follow_status(actor, target_id, target_type)
    return FollowStatusResponse(is_following=following)
