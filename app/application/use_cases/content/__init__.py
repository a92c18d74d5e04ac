"""Content use cases: feed, posts, categories, profiles, search."""

from app.application.use_cases.content.category_operations import CategoryService
from app.application.use_cases.content.feed_operations import FeedService
from app.application.use_cases.content.post_operations import PostService
from app.application.use_cases.content.profile_operations import ProfileService
from app.application.use_cases.content.search_operations import SearchService

__all__ = [
    "CategoryService",
    "FeedService",
    "PostService",
    "ProfileService",
    "SearchService",
]
