"""Children management API: create child profiles, edit them, change passwords, check usernames."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_child_management_service,
    get_parent_actor,
    get_username_check_service,
)
from app.api.v1.params import EntityId
from app.application.dtos.actor import Actor
from app.application.dtos.child import ChildCreate, ChildProfileUpdate
from app.application.use_cases import ChildManagementService
from app.core.limiter import limit_create_child, limit_writes
from app.schemas.child import (
    ChildCreateRequest,
    ChildPasswordChangeRequest,
    ChildProfileUpdateRequest,
    ChildResponse,
    PasswordChangeResponse,
    UsernameAvailabilityResponse,
)

router = APIRouter()


@router.get("/check-username", response_model=UsernameAvailabilityResponse)
async def check_username(
    username: Annotated[str, Query(min_length=1, max_length=50)],
    child_svc: Annotated[ChildManagementService, Depends(get_username_check_service)],
):
    """Return whether username can be used for a new child."""
    available = await child_svc.check_username(username)
    return UsernameAvailabilityResponse(username=username, available=available)


@router.post("", response_model=ChildResponse, status_code=201)
@limit_create_child
async def create_child(
    request: Request,
    body: ChildCreateRequest,
    actor: Annotated[Actor, Depends(get_parent_actor)],
    child_svc: Annotated[ChildManagementService, Depends(get_child_management_service)],
):
    """Create a child profile under the acting parent (409 if the username is taken)."""
    created = await child_svc.create_child(
        actor.actor_id,
        ChildCreate(
            name=body.name,
            username=body.username,
            password=body.password,
            age=body.age,
            birth_date=body.birth_date,
            bio=body.bio,
            gender=body.gender,
            avatar=body.avatar,
            preferred_categories=body.preferred_categories,
        ),
    )
    return ChildResponse.model_validate(created)


@router.patch("/{child_id}", response_model=ChildResponse)
@limit_writes
async def update_child_profile(
    request: Request,
    child_id: EntityId,
    body: ChildProfileUpdateRequest,
    actor: Annotated[Actor, Depends(get_parent_actor)],
    child_svc: Annotated[ChildManagementService, Depends(get_child_management_service)],
):
    """Edit a child's public profile (404 unless the child belongs to the parent)."""
    updated = await child_svc.update_child_profile(
        actor.actor_id,
        child_id,
        ChildProfileUpdate(
            name=body.name, username=body.username, bio=body.bio, avatar=body.avatar
        ),
    )
    return ChildResponse.model_validate(updated)


@router.post("/{child_id}/password", response_model=PasswordChangeResponse)
@limit_writes
async def change_child_password(
    request: Request,
    child_id: EntityId,
    body: ChildPasswordChangeRequest,
    actor: Annotated[Actor, Depends(get_parent_actor)],
    child_svc: Annotated[ChildManagementService, Depends(get_child_management_service)],
):
    """Set a new password on one of the parent's children (at least 6 characters)."""
    await child_svc.change_password(actor.actor_id, child_id, body.new_password)
    return PasswordChangeResponse()
