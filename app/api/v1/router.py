"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    categories,
    children,
    comments,
    feed,
    follows,
    health,
    likes,
    parents,
    posts,
    profiles,
    search,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(feed.router, prefix="/feed", tags=["feed"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(likes.router, prefix="/posts", tags=["likes"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(follows.router, prefix="/follows", tags=["follows"])
api_router.include_router(parents.router, prefix="/parents", tags=["parents"])
api_router.include_router(children.router, prefix="/children", tags=["children"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
