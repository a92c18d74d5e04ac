"""Path parameter types shared by v1 endpoints."""

from typing import Annotated

from fastapi import Path

from app.core.constants import ENTITY_ID_REGEX, MAX_ENTITY_ID_LENGTH

EntityId = Annotated[
    str, Path(min_length=1, max_length=MAX_ENTITY_ID_LENGTH, pattern=ENTITY_ID_REGEX)
]
