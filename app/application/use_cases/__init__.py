"""Application use cases: one entry point per workflow."""

from app.application.use_cases.content import (
    CategoryService,
    FeedService,
    PostService,
    ProfileService,
    SearchService,
)
from app.application.use_cases.engagement import (
    CommentService,
    FollowService,
    LikeService,
)
from app.application.use_cases.parents import (
    ChildManagementService,
    ParentDashboardService,
)

__all__ = [
    "CategoryService",
    "ChildManagementService",
    "CommentService",
    "FeedService",
    "FollowService",
    "LikeService",
    "ParentDashboardService",
    "PostService",
    "ProfileService",
    "SearchService",
]
