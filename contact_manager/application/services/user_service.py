"""User application service: registration and profile updates (password hashed off-loop)."""

from __future__ import annotations

import asyncio

from contact_manager.application.dtos.user import UserResult
from contact_manager.application.interfaces.repositories import IUserRepository
from contact_manager.application.interfaces.services import IPasswordHasher
from contact_manager.domain import ValidationException


class UserService:
    """Create users and update their profile fields.

    Password changes go through Authenticator.change_password, which checks the
    old password first.
    """

    def __init__(self, user_repo: IUserRepository, password_hasher: IPasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = password_hasher

    async def create_user(
        self, username: str, email: str, mobile: str, password: str
    ) -> UserResult:
        """Hash password and store the user. Raises DuplicateKeyException on a taken username."""
        hashed = await asyncio.to_thread(self._hasher.hash_password, password)
        return await self._user_repo.create_user(
            username=username,
            email=email,
            mobile=mobile,
            hashed_password=hashed,
        )

    async def update_profile(
        self,
        user_id: int,
        username: str | None = None,
        email: str | None = None,
        mobile: str | None = None,
    ) -> UserResult:
        """Update the given fields. Raises ResourceNotFoundException if user not found."""
        values = {
            k: v
            for k, v in (("username", username), ("email", email), ("mobile", mobile))
            if v is not None
        }
        if not values:
            raise ValidationException("At least one of username, email or mobile is required")
        return await self._user_repo.update(user_id, **values)
