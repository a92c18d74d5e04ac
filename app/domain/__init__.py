"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ActorType, MediaType
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    SelfFollowException,
    SproutException,
    UsernameTakenException,
    ValidationException,
)

__all__ = [
    # Enums
    "ActorType",
    "MediaType",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ResourceNotFoundException",
    "SelfFollowException",
    "SproutException",
    "UsernameTakenException",
    "ValidationException",
]
