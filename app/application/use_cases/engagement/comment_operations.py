"""Comments: list (cached per post), add and delete with stat bookkeeping."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.actor import Actor
from app.application.dtos.comment import CommentMutationResult, CommentRef
from app.application.interfaces.repositories import (
    IChildRepository,
    ICommentRepository,
    IPostRepository,
)
from app.core.constants import MAX_COMMENT_LENGTH, XP_PER_COMMENT
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def _is_author(actor: Actor, comment: CommentRef) -> bool:
    if actor.is_child:
        return comment.child_id == actor.actor_id
    return comment.parent_id == actor.actor_id


class CommentService:
    """Add and delete comments.

    The post's comments_count is recomputed from rows after each change.
    Post owner xp_points moves by XP_PER_COMMENT and a commenting child's
    total_comments_made by 1 (both floored at 0 on delete). The comment
    list, feed pages, owner profile and commenter profile are invalidated.
    """

    def __init__(
        self,
        comment_repo: ICommentRepository,
        post_repo: IPostRepository,
        child_repo: IChildRepository,
    ) -> None:
        self.comment_repo = comment_repo
        self.post_repo = post_repo
        self.child_repo = child_repo

    async def get_comments(self, post_id: str) -> list[dict[str, Any]]:
        return await self.comment_repo.get_comments(post_id)

    async def _apply_stats(
        self, actor: Actor, owner_id: str | None, sign: int
    ) -> None:
        if owner_id:
            await self.child_repo.adjust_stats(owner_id, xp_points=sign * XP_PER_COMMENT)
        if actor.is_child:
            await self.child_repo.adjust_stats(actor.actor_id, total_comments_made=sign)

    async def add_comment(
        self, actor: Actor, post_id: str, content: str
    ) -> CommentMutationResult:
        if not content or not content.strip() or len(content) > MAX_COMMENT_LENGTH:
            raise ValidationException(
                f"Comment must be between 1 and {MAX_COMMENT_LENGTH} characters.",
                field="content",
            )
        owner_id = await self.post_repo.get_owner_id(post_id)
        if owner_id is None:
            raise ResourceNotFoundException("post", post_id)

        comment = await self.comment_repo.add_comment(actor, post_id, content)
        comments_count = await self.post_repo.recount_comments(post_id)
        await self._apply_stats(actor, owner_id, 1)
        logger.info("Comment %s added to post %s", comment.id, post_id)
        return CommentMutationResult(
            comment_id=comment.id,
            comment_code=comment.code,
            comments_count=comments_count,
        )

    async def delete_comment(self, actor: Actor, comment_id: str) -> CommentMutationResult:
        comment = await self.comment_repo.get_ref(comment_id)
        if comment is None:
            raise ResourceNotFoundException("comment", comment_id)
        if not _is_author(actor, comment):
            raise AuthorizationException("comment", "delete")

        await self.comment_repo.delete_comment(comment_id)
        comments_count = await self.post_repo.recount_comments(comment.post_id)
        owner_id = await self.post_repo.get_owner_id(comment.post_id)
        await self._apply_stats(actor, owner_id, -1)
        logger.info("Comment %s deleted from post %s", comment.id, comment.post_id)
        return CommentMutationResult(
            comment_id=comment.id,
            comment_code=comment.code,
            comments_count=comments_count,
        )
