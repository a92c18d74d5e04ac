"""Application DTOs (no ORM dependency)."""

from app.application.dtos.actor import Actor
from app.application.dtos.category import CategoryCreate, CategoryResult
from app.application.dtos.child import (
    ChildCreate,
    ChildProfileResult,
    ChildProfileUpdate,
    ChildRef,
    ChildResult,
    ChildSummary,
)
from app.application.dtos.comment import (
    CommentAuthor,
    CommentMutationResult,
    CommentRef,
    CommentResult,
)
from app.application.dtos.parent import ParentStatsResult
from app.application.dtos.post import (
    CategorySummary,
    FeedPostResult,
    PostCreate,
    PostResult,
)
from app.application.dtos.search import ChildSearchResult, SearchResults
from app.application.dtos.social import FollowToggleResult, LikeToggleResult

__all__ = [
    "Actor",
    "CategoryCreate",
    "CategoryResult",
    "CategorySummary",
    "ChildCreate",
    "ChildProfileResult",
    "ChildProfileUpdate",
    "ChildRef",
    "ChildResult",
    "ChildSearchResult",
    "ChildSummary",
    "CommentAuthor",
    "CommentMutationResult",
    "CommentRef",
    "CommentResult",
    "FeedPostResult",
    "FollowToggleResult",
    "LikeToggleResult",
    "ParentStatsResult",
    "PostCreate",
    "PostResult",
    "SearchResults",
]
