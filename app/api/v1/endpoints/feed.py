"""Feed API: paginated list of recent posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_feed_service
from app.application.use_cases import FeedService
from app.core.constants import MAX_FEED_PAGE_SIZE
from app.schemas.post import FeedPostResponse

router = APIRouter()


@router.get("", response_model=list[FeedPostResponse])
async def get_feed(
    feed_svc: Annotated[FeedService, Depends(get_feed_service)],
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_FEED_PAGE_SIZE)] = 10,
    category_ids: Annotated[
        list[str] | None,
        Query(alias="category_id", description="Repeat to filter by several categories"),
    ] = None,
):
    """Return active posts, newest first."""
    posts = await feed_svc.get_feed(page=page, limit=limit, category_ids=category_ids)
    return [FeedPostResponse.model_validate(p) for p in posts]
