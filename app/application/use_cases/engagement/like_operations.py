"""Likes: toggle and status for child or parent actors."""

from __future__ import annotations

import logging

from app.application.dtos.actor import Actor
from app.application.dtos.social import LikeToggleResult
from app.application.interfaces.repositories import (
    IChildRepository,
    ILikeRepository,
    IPostRepository,
)
from app.core.constants import XP_PER_LIKE
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)


class LikeService:
    """Toggle likes on posts.

    Like: post likes_count +1, owner xp_points +XP_PER_LIKE and
    total_likes_received +1. Unlike reverses both, floored at 0. Only the
    owner's profile is invalidated; feed pages catch up on TTL expiry.
    """

    def __init__(
        self,
        like_repo: ILikeRepository,
        post_repo: IPostRepository,
        child_repo: IChildRepository,
    ) -> None:
        self.like_repo = like_repo
        self.post_repo = post_repo
        self.child_repo = child_repo

    async def toggle_like(self, actor: Actor, post_id: str) -> LikeToggleResult:
        owner_id = await self.post_repo.get_owner_id(post_id)
        if owner_id is None:
            raise ResourceNotFoundException("post", post_id)

        like_id = await self.like_repo.find_id(actor, post_id)
        if like_id:
            await self.like_repo.remove_like(like_id)
            sign = -1
        else:
            await self.like_repo.add_like(actor, post_id)
            sign = 1

        likes_count = await self.post_repo.adjust_likes(post_id, sign)
        await self.child_repo.adjust_stats(
            owner_id,
            xp_points=sign * XP_PER_LIKE,
            total_likes_received=sign,
        )
        logger.debug("Like toggled on %s by %s: %s", post_id, actor.actor_id, sign > 0)
        return LikeToggleResult(is_liked=sign > 0, likes_count=likes_count)

    async def has_liked(self, actor: Actor, post_id: str) -> bool:
        return await self.like_repo.find_id(actor, post_id) is not None
