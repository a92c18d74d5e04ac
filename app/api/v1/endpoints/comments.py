"""Comment API: list and add comments on a post; delete own comments."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_actor,
    get_comment_service,
    get_comment_write_service,
)
from app.api.v1.params import EntityId
from app.application.dtos.actor import Actor
from app.application.use_cases import CommentService
from app.core.limiter import limit_writes
from app.schemas.comment import (
    CommentCreateRequest,
    CommentMutationResponse,
    CommentResponse,
)

router = APIRouter()


@router.get("/posts/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    post_id: EntityId,
    comment_svc: Annotated[CommentService, Depends(get_comment_service)],
):
    """Return the post's comments, newest first."""
    comments = await comment_svc.get_comments(post_id)
    return [CommentResponse.model_validate(c) for c in comments]


@router.post(
    "/posts/{post_id}/comments", response_model=CommentMutationResponse, status_code=201
)
@limit_writes
async def add_comment(
    request: Request,
    post_id: EntityId,
    body: CommentCreateRequest,
    actor: Annotated[Actor, Depends(get_actor)],
    comment_svc: Annotated[CommentService, Depends(get_comment_write_service)],
):
    """Add a comment as the acting child or parent."""
    result = await comment_svc.add_comment(actor, post_id, body.content)
    return CommentMutationResponse.model_validate(result)


@router.delete("/comments/{comment_id}", response_model=CommentMutationResponse)
@limit_writes
async def delete_comment(
    request: Request,
    comment_id: EntityId,
    actor: Annotated[Actor, Depends(get_actor)],
    comment_svc: Annotated[CommentService, Depends(get_comment_write_service)],
):
    """Delete a comment (author only)."""
    result = await comment_svc.delete_comment(actor, comment_id)
    return CommentMutationResponse.model_validate(result)
