"""Post creation: insert, reward the author, refresh dependent caches."""

from __future__ import annotations

import logging

from app.application.dtos.actor import Actor
from app.application.dtos.post import PostCreate, PostResult
from app.application.interfaces.repositories import (
    ICategoryRepository,
    IChildRepository,
    IPostRepository,
)
from app.core.constants import XP_PER_POST
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class PostService:
    """Create posts for the acting child.

    Side effects on success: author total_posts +1 and xp_points +XP_PER_POST;
    feed pages, the author's profile and profile posts, and the author's
    parent dashboard are invalidated (by the repositories, after the write).
    """

    def __init__(
        self,
        post_repo: IPostRepository,
        child_repo: IChildRepository,
        category_repo: ICategoryRepository,
    ) -> None:
        self.post_repo = post_repo
        self.child_repo = child_repo
        self.category_repo = category_repo

    async def create_post(self, actor: Actor, data: PostCreate) -> PostResult:
        if not actor.is_child or actor.actor_id != data.child_id:
            raise AuthorizationException("post", "create")
        if not data.content or not data.content.strip():
            raise ValidationException("Post content must not be empty", field="content")
        if await self.child_repo.get_ref(data.child_id) is None:
            raise ResourceNotFoundException("child", data.child_id)
        if not await self.category_repo.exists(data.category_id):
            raise ResourceNotFoundException("category", data.category_id)

        post = await self.post_repo.create_post(data)
        await self.child_repo.adjust_stats(
            data.child_id,
            total_posts=1,
            xp_points=XP_PER_POST,
            include_parent_cache=True,
        )
        logger.info("Post created: %s by child %s", post.id, data.child_id)
        return post
