"""Search API schemas. Each result carries a `type` tag: child or post."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from app.schemas.post import FeedPostResponse


class ChildSearchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: Literal["child"] = "child"
    id: str
    code: str
    name: str
    username: str
    age: int
    avatar: str | None = None
    xp_points: int
    level: int
    total_posts: int


class PostSearchResponse(FeedPostResponse):
    type: Literal["post"] = "post"


class SearchResponse(BaseModel):
    """Children first, then posts newest first."""

    results: list[ChildSearchResponse | PostSearchResponse]
