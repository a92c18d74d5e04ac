"""Parent dashboard API schemas."""

from pydantic import BaseModel, Field


class ParentStatsResponse(BaseModel):
    """Aggregates over all children of the acting parent."""

    total_children: int = Field(..., ge=0)
    total_posts: int = Field(..., ge=0)
    learning_hours: float = Field(..., ge=0)
