"""Engagement use cases: likes, comments, follows."""

from app.application.use_cases.engagement.comment_operations import CommentService
from app.application.use_cases.engagement.follow_operations import FollowService
from app.application.use_cases.engagement.like_operations import LikeService

__all__ = ["CommentService", "FollowService", "LikeService"]
