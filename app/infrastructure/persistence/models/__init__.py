"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.category import Category
from app.infrastructure.persistence.models.child import Child
from app.infrastructure.persistence.models.comment import Comment
from app.infrastructure.persistence.models.follow import Follow
from app.infrastructure.persistence.models.like import Like
from app.infrastructure.persistence.models.mixins import (
    ActiveMixin,
    CreatedAtMixin,
    CuidMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.parent import Parent
from app.infrastructure.persistence.models.post import Post

__all__ = [
    "ActiveMixin",
    "Category",
    "Child",
    "Comment",
    "CreatedAtMixin",
    "CuidMixin",
    "Follow",
    "Like",
    "Parent",
    "Post",
    "TimestampMixin",
]
