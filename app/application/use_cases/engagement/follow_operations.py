"""Follows between child and parent accounts."""

from __future__ import annotations

from app.application.dtos.actor import Actor
from app.application.dtos.social import FollowToggleResult
from app.application.interfaces.repositories import (
    IChildRepository,
    IFollowRepository,
    IParentRepository,
)
from app.core.constants import XP_PER_FOLLOW
from app.domain.enums import ActorType
from app.domain.exceptions import ResourceNotFoundException, SelfFollowException


class FollowService:
    """Toggle follow edges. Following a child grants it XP_PER_FOLLOW xp.

    Unfollowing removes it again (floored at 0). The child target's profile
    and, when the follower is a child, the follower's profile are invalidated.
    """

    def __init__(
        self,
        follow_repo: IFollowRepository,
        child_repo: IChildRepository,
        parent_repo: IParentRepository,
    ) -> None:
        self.follow_repo = follow_repo
        self.child_repo = child_repo
        self.parent_repo = parent_repo

    async def _ensure_target(self, target_id: str, target_type: ActorType) -> None:
        if target_type is ActorType.CHILD:
            found = await self.child_repo.get_ref(target_id) is not None
        else:
            found = await self.parent_repo.exists(target_id)
        if not found:
            raise ResourceNotFoundException(target_type.value.lower(), target_id)

    async def toggle_follow(
        self, actor: Actor, target_id: str, target_type: ActorType
    ) -> FollowToggleResult:
        if actor.actor_type is target_type and actor.actor_id == target_id:
            raise SelfFollowException()
        await self._ensure_target(target_id, target_type)

        follow_id = await self.follow_repo.find_id(actor, target_id, target_type)
        if follow_id:
            await self.follow_repo.remove_follow(follow_id)
            sign = -1
        else:
            await self.follow_repo.add_follow(actor, target_id, target_type)
            sign = 1

        if target_type is ActorType.CHILD:
            await self.child_repo.adjust_stats(target_id, xp_points=sign * XP_PER_FOLLOW)
        if actor.is_child:
            await self.child_repo.invalidate_profile(actor.actor_id)
        return FollowToggleResult(is_following=sign > 0)

    async def get_follow_status(
        self, actor: Actor, target_id: str, target_type: ActorType
    ) -> bool:
        return await self.follow_repo.find_id(actor, target_id, target_type) is not None
