"""Search API: children and posts matching a text query."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_search_service
from app.application.use_cases import SearchService
from app.core.constants import MAX_SEARCH_QUERY_LENGTH
from app.schemas.search import ChildSearchResponse, PostSearchResponse, SearchResponse

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: Annotated[str, Query(max_length=MAX_SEARCH_QUERY_LENGTH)] = "",
):
    """Return active children and posts containing q; a blank q returns no results."""
    found = await search_svc.search(q)
    results: list[ChildSearchResponse | PostSearchResponse] = [
        ChildSearchResponse.model_validate(c) for c in found.children
    ]
    results.extend(PostSearchResponse.model_validate(p) for p in found.posts)
    return SearchResponse(results=results)
