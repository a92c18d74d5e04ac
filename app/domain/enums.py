"""Domain enumerations for the Sprout application.

Enums represent fixed sets of domain values (media types, actor kinds).
"""

from enum import Enum


class MediaType(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    NONE = "NONE"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid media type values as strings."""
        return [m.value for m in cls]


class ActorType(str, Enum):
    """Who performs an action: a child account or a parent account.

    Used for likes, comments and follows, which either kind of account may
    author or receive.
    """

    CHILD = "CHILD"
    PARENT = "PARENT"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid actor type values as strings."""
        return [a.value for a in cls]
