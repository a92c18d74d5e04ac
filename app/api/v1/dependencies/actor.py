"""Actor dependencies.

Authentication is handled upstream; the gateway forwards the acting
account's internal id in one of two headers (names from settings). A child
header wins when both are present.
"""

from __future__ import annotations

import re
from typing import Annotated

from fastapi import Depends, Request

from app.application.dtos.actor import Actor
from app.core.config import get_settings
from app.core.constants import ENTITY_ID_REGEX, MAX_ENTITY_ID_LENGTH
from app.domain.enums import ActorType
from app.domain.exceptions import AuthenticationException, AuthorizationException

_ACTOR_ID = re.compile(ENTITY_ID_REGEX)


def _header(request: Request, name: str) -> str | None:
    value = request.headers.get(name)
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if len(value) > MAX_ENTITY_ID_LENGTH or not _ACTOR_ID.match(value):
        raise AuthenticationException("Malformed actor id header")
    return value


def get_optional_actor(request: Request) -> Actor | None:
    """Return the forwarded actor, or None for anonymous requests."""
    settings = get_settings()
    child_id = _header(request, settings.child_actor_header)
    if child_id:
        return Actor(ActorType.CHILD, child_id)
    parent_id = _header(request, settings.parent_actor_header)
    if parent_id:
        return Actor(ActorType.PARENT, parent_id)
    return None


def get_actor(
    actor: Annotated[Actor | None, Depends(get_optional_actor)],
) -> Actor:
    """Require a child or parent actor (401 otherwise)."""
    if actor is None:
        raise AuthenticationException()
    return actor


def get_child_actor(actor: Annotated[Actor, Depends(get_actor)]) -> Actor:
    """Require a child actor (403 for parents)."""
    if not actor.is_child:
        raise AuthorizationException(message="This action requires a child account")
    return actor


def get_parent_actor(actor: Annotated[Actor, Depends(get_actor)]) -> Actor:
    """Require a parent actor (403 for children)."""
    if not actor.is_parent:
        raise AuthorizationException(message="This action requires a parent account")
    return actor
