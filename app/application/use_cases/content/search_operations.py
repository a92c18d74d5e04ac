"""Search: children by name or username and posts by title or content."""

from __future__ import annotations

import logging

from app.application.dtos.search import SearchResults
from app.application.interfaces.repositories import IChildRepository, IPostRepository
from app.core.constants import MAX_SEARCH_QUERY_LENGTH, SEARCH_RESULT_LIMIT
from app.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)


class SearchService:
    """Case-insensitive substring search over active children and posts.

    Results are not cached; each kind is capped at `limit` rows.
    """

    def __init__(
        self,
        child_repo: IChildRepository,
        post_repo: IPostRepository,
        limit: int = SEARCH_RESULT_LIMIT,
    ) -> None:
        self.child_repo = child_repo
        self.post_repo = post_repo
        self.limit = limit

    async def search(self, query: str) -> SearchResults:
        """Return matching children and posts; a blank query matches nothing."""
        q = (query or "").strip()
        if not q:
            return SearchResults(children=[], posts=[])
        if len(q) > MAX_SEARCH_QUERY_LENGTH:
            raise ValidationException(
                f"Search query must be at most {MAX_SEARCH_QUERY_LENGTH} characters",
                field="q",
            )
        children = await self.child_repo.search_children(q, self.limit)
        posts = await self.post_repo.search_posts(q, self.limit)
        logger.debug("Search %r: %s children, %s posts", q, len(children), len(posts))
        return SearchResults(children=children, posts=posts)
