"""Child management by parents: create child profiles, edit them, change passwords, check usernames."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable

from app.application.dtos.child import ChildCreate, ChildProfileUpdate, ChildResult
from app.application.interfaces.repositories import IChildRepository, IParentRepository
from app.core.constants import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.domain.exceptions import (
    ResourceNotFoundException,
    UsernameTakenException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Usernames appear in profile URLs and cache keys.
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


def validate_username(username: str) -> str:
    """Return the trimmed username or raise ValidationException."""
    value = (username or "").strip()
    if len(value) < MIN_USERNAME_LENGTH:
        raise ValidationException(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters",
            field="username",
        )
    if not USERNAME_PATTERN.match(value):
        raise ValidationException(
            "Username may only contain letters, digits, '.', '_' and '-'",
            field="username",
        )
    return value


def validate_password(password: str, min_length: int = 1) -> None:
    """Raise ValidationException unless password has min_length chars and fits bcrypt."""
    if not password or len(password) < min_length:
        message = (
            "Password is required"
            if min_length <= 1
            else f"Password must be at least {min_length} characters"
        )
        raise ValidationException(message, field="password")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationException(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
        )


class ChildManagementService:
    """Create and edit child profiles owned by a parent.

    Creation and profile edits invalidate the parent's dashboard cache; edits
    also drop the profile cached under the old and the new username. Password
    changes touch no cached view.
    """

    def __init__(
        self,
        child_repo: IChildRepository,
        parent_repo: IParentRepository,
        hash_password: Callable[[str], str],
        default_avatar: str | None = None,
    ) -> None:
        self.child_repo = child_repo
        self.parent_repo = parent_repo
        self.hash_password = hash_password
        self.default_avatar = default_avatar

    async def create_child(self, parent_id: str, data: ChildCreate) -> ChildResult:
        username = validate_username(data.username)
        validate_password(data.password)
        if not await self.parent_repo.exists(parent_id):
            raise ResourceNotFoundException("parent", parent_id)
        if await self.child_repo.username_exists(username):
            raise UsernameTakenException(username)

        payload = ChildCreate(
            name=data.name,
            username=username,
            password=data.password,
            age=data.age,
            birth_date=data.birth_date,
            bio=data.bio,
            gender=data.gender,
            avatar=data.avatar,
            preferred_categories=list(data.preferred_categories),
        )
        return await self.child_repo.create_child(
            parent_id,
            payload,
            password_hash=await asyncio.to_thread(self.hash_password, data.password),
            default_avatar=self.default_avatar,
        )

    async def update_child_profile(
        self, parent_id: str, child_id: str, data: ChildProfileUpdate
    ) -> ChildResult:
        username = validate_username(data.username)
        if not data.name or not data.name.strip():
            raise ValidationException("Name is required", field="name")
        if await self.child_repo.username_exists(username, exclude_child_id=child_id):
            raise UsernameTakenException(username)

        updated = await self.child_repo.update_profile(
            parent_id,
            child_id,
            ChildProfileUpdate(
                name=data.name.strip(), username=username, bio=data.bio, avatar=data.avatar
            ),
        )
        if updated is None:
            raise ResourceNotFoundException("child", child_id)
        logger.info("Child profile updated: %s (parent %s)", child_id, parent_id)
        return updated

    async def change_password(self, parent_id: str, child_id: str, new_password: str) -> None:
        """Set a new password on a child of parent_id (404 if the child is not theirs)."""
        validate_password(new_password, MIN_PASSWORD_LENGTH)
        password_hash = await asyncio.to_thread(self.hash_password, new_password)
        changed = await self.child_repo.set_password(parent_id, child_id, password_hash)
        if not changed:
            raise ResourceNotFoundException("child", child_id)
        logger.info("Child password changed: %s (parent %s)", child_id, parent_id)

    async def check_username(self, username: str) -> bool:
        """Return True if username is valid and not used by any child."""
        try:
            value = validate_username(username)
        except ValidationException:
            return False
        return not await self.child_repo.username_exists(value)
