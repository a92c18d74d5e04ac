"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.category_repo import CategoryRepository
from app.infrastructure.persistence.repositories.child_repo import ChildRepository
from app.infrastructure.persistence.repositories.comment_repo import CommentRepository
from app.infrastructure.persistence.repositories.follow_repo import FollowRepository
from app.infrastructure.persistence.repositories.like_repo import LikeRepository
from app.infrastructure.persistence.repositories.parent_repo import ParentRepository
from app.infrastructure.persistence.repositories.post_repo import PostRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ChildRepository",
    "CommentRepository",
    "FollowRepository",
    "LikeRepository",
    "ParentRepository",
    "PostRepository",
]
