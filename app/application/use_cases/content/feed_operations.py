"""Feed: paginated, category-filtered list of recent posts (delegates to IPostRepository)."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from app.application.interfaces.repositories import IPostRepository
from app.core.constants import ENTITY_ID_REGEX, MAX_ENTITY_ID_LENGTH, MAX_FEED_PAGE_SIZE
from app.domain.exceptions import ValidationException

_ENTITY_ID = re.compile(ENTITY_ID_REGEX)


class FeedService:
    """Serve feed pages. Pages are cached per (page, limit, category filter)."""

    def __init__(self, post_repo: IPostRepository) -> None:
        self.post_repo = post_repo

    async def get_feed(
        self,
        page: int = 1,
        limit: int = 10,
        category_ids: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Return active posts newest first; page >= 1 and 1 <= limit <= MAX_FEED_PAGE_SIZE."""
        if page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if limit < 1 or limit > MAX_FEED_PAGE_SIZE:
            raise ValidationException(
                f"limit must be between 1 and {MAX_FEED_PAGE_SIZE}", field="limit"
            )
        ids = [c for c in (category_ids or []) if c]
        for category_id in ids:
            if len(category_id) > MAX_ENTITY_ID_LENGTH or not _ENTITY_ID.match(category_id):
                raise ValidationException(
                    f"Invalid category id: {category_id!r}", field="category_id"
                )
        return await self.post_repo.get_feed_posts(page=page, limit=limit, category_ids=ids)
