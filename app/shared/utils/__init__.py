"""Shared utilities: datetime, generators, cache payload serialization."""

from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import (
    generate_child_code,
    generate_comment_code,
    generate_cuid,
    generate_post_code,
)
from app.shared.utils.serialization import to_cache_payload

__all__ = [
    "ensure_utc",
    "generate_child_code",
    "generate_comment_code",
    "generate_cuid",
    "generate_post_code",
    "to_cache_payload",
    "utc_now",
]
