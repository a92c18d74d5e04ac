"""Like API: toggle and status on a post."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_actor, get_like_service, get_like_write_service
from app.api.v1.params import EntityId
from app.application.dtos.actor import Actor
from app.application.use_cases import LikeService
from app.core.limiter import limit_writes
from app.schemas.social import LikeStatusResponse, LikeToggleResponse

router = APIRouter()


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
@limit_writes
async def toggle_like(
    request: Request,
    post_id: EntityId,
    actor: Annotated[Actor, Depends(get_actor)],
    like_svc: Annotated[LikeService, Depends(get_like_write_service)],
):
    """Like the post, or remove the actor's like if present."""
    result = await like_svc.toggle_like(actor, post_id)
    return LikeToggleResponse.model_validate(result)


@router.get("/{post_id}/like", response_model=LikeStatusResponse)
async def get_like_status(
    post_id: EntityId,
    actor: Annotated[Actor, Depends(get_actor)],
    like_svc: Annotated[LikeService, Depends(get_like_service)],
):
    """Return whether the actor has liked the post."""
    return LikeStatusResponse(is_liked=await like_svc.has_liked(actor, post_id))
