"""Post API: create a post as the acting child."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_child_actor, get_post_write_service
from app.application.dtos.actor import Actor
from app.application.dtos.post import PostCreate
from app.application.use_cases import PostService
from app.core.limiter import limit_writes
from app.schemas.post import PostCreateRequest, PostResponse

router = APIRouter()


@router.post("", response_model=PostResponse, status_code=201)
@limit_writes
async def create_post(
    request: Request,
    body: PostCreateRequest,
    actor: Annotated[Actor, Depends(get_child_actor)],
    post_svc: Annotated[PostService, Depends(get_post_write_service)],
):
    """Create a post; the author earns XP and cached feed and profile views are refreshed."""
    created = await post_svc.create_post(
        actor,
        PostCreate(
            child_id=actor.actor_id,
            category_id=body.category_id,
            title=body.title,
            content=body.content,
            media_type=body.media_type,
            media_url=body.media_url,
            media_thumbnail=body.media_thumbnail,
        ),
    )
    return PostResponse.model_validate(created)
