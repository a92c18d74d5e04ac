"""Category API: list and create."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    get_category_service,
    get_category_write_service,
    get_parent_actor,
)
from app.application.dtos.actor import Actor
from app.application.dtos.category import CategoryCreate
from app.application.use_cases import CategoryService
from app.core.limiter import limit_writes
from app.schemas.category import CategoryCreateRequest, CategoryResponse

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    category_svc: Annotated[CategoryService, Depends(get_category_service)],
):
    """Return all categories ordered by name."""
    categories = await category_svc.get_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post("", response_model=CategoryResponse, status_code=201)
@limit_writes
async def create_category(
    request: Request,
    body: CategoryCreateRequest,
    _: Annotated[Actor, Depends(get_parent_actor)],
    category_svc: Annotated[CategoryService, Depends(get_category_write_service)],
):
    """Create a category (parent accounts only)."""
    created = await category_svc.create_category(
        CategoryCreate(name=body.name, icon=body.icon, color=body.color)
    )
    return CategoryResponse.model_validate(created)
