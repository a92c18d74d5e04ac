"""Parent dashboard API for the acting parent."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_parent_actor, get_parent_dashboard_service
from app.api.v1.params import EntityId
from app.application.dtos.actor import Actor
from app.application.use_cases import ParentDashboardService
from app.schemas.child import ChildResponse
from app.schemas.parent import ParentStatsResponse

router = APIRouter()


@router.get("/me/stats", response_model=ParentStatsResponse)
async def get_parent_stats(
    actor: Annotated[Actor, Depends(get_parent_actor)],
    dashboard_svc: Annotated[ParentDashboardService, Depends(get_parent_dashboard_service)],
):
    stats = await dashboard_svc.get_parent_stats(actor.actor_id)
    return ParentStatsResponse.model_validate(stats)


@router.get("/me/children", response_model=list[ChildResponse])
async def get_my_children(
    actor: Annotated[Actor, Depends(get_parent_actor)],
    dashboard_svc: Annotated[ParentDashboardService, Depends(get_parent_dashboard_service)],
):
    children = await dashboard_svc.get_my_children(actor.actor_id)
    return [ChildResponse.model_validate(c) for c in children]


@router.get("/me/children/{child_id}", response_model=ChildResponse)
async def get_child_details(
    child_id: EntityId,
    actor: Annotated[Actor, Depends(get_parent_actor)],
    dashboard_svc: Annotated[ParentDashboardService, Depends(get_parent_dashboard_service)],
):
    """Return one of the parent's children (404 if it belongs to someone else)."""
    child = await dashboard_svc.get_child_details(actor.actor_id, child_id)
    return ChildResponse.model_validate(child)
