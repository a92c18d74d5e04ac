"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the acting account, the cache gateway and
application use cases. Routes depend only on these, not on infra directly.
"""

from app.api.v1.dependencies.actor import (
    get_actor,
    get_child_actor,
    get_optional_actor,
    get_parent_actor,
)
from app.api.v1.dependencies.cache import get_cache, get_cache_ttls
from app.api.v1.dependencies.services import (
    get_category_service,
    get_category_write_service,
    get_child_management_service,
    get_comment_service,
    get_comment_write_service,
    get_feed_service,
    get_follow_service,
    get_follow_write_service,
    get_like_service,
    get_like_write_service,
    get_parent_dashboard_service,
    get_post_write_service,
    get_profile_service,
    get_search_service,
    get_username_check_service,
)

__all__ = [
    "get_actor",
    "get_cache",
    "get_cache_ttls",
    "get_category_service",
    "get_category_write_service",
    "get_child_actor",
    "get_child_management_service",
    "get_comment_service",
    "get_comment_write_service",
    "get_feed_service",
    "get_follow_service",
    "get_follow_write_service",
    "get_like_service",
    "get_like_write_service",
    "get_optional_actor",
    "get_parent_actor",
    "get_parent_dashboard_service",
    "get_post_write_service",
    "get_profile_service",
    "get_search_service",
    "get_username_check_service",
]
