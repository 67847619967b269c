"""User repository. Interface methods return application DTOs; the hash never leaves via a DTO."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.dtos.user import UserResult
from contact_manager.infrastructure.persistence.models.user import User
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        username=u.username,
        email=u.email,
        mobile=u.mobile,
        created_date=ensure_utc(u.created_date),
        updated_date=ensure_utc(u.updated_date),
    )


class UserRepository(BaseRepository[User, UserResult]):
    """User repository: CRUD plus username lookup and password hash helpers."""

    resource_type = "user"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    def _to_result(self, obj: User) -> UserResult:
        return _user_to_result(obj)

    def _duplicate_details(self, values: dict[str, Any]) -> dict[str, Any]:
        return {"username": values["username"]} if "username" in values else {}

    async def create_user(
        self, username: str, email: str, mobile: str, hashed_password: str
    ) -> UserResult:
        """Create user; raise DuplicateKeyException when username is taken."""
        user = User(
            username=username,
            email=email,
            mobile=mobile,
            hashed_password=hashed_password,
        )
        return await self.create(user, username=username)

    async def get_by_username(self, username: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def get_password_hash(self, user_id: int) -> str:
        """Return stored hash; raise ResourceNotFoundException for an unknown id."""
        result = await self.db.execute(
            select(User.hashed_password).where(User.id == user_id)
        )
        hashed = result.scalar_one_or_none()
        if hashed is None:
            raise self._not_found(user_id)
        return hashed

    async def update_password(self, user_id: int, hashed_password: str) -> None:
        await self.update(user_id, hashed_password=hashed_password)
