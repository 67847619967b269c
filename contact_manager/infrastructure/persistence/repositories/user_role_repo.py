"""UserRole repository: user-role memberships and the joined views built on them."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.dtos.access import AccessResult
from contact_manager.application.dtos.role import RoleResult
from contact_manager.application.dtos.user_role import UserRoleResult
from contact_manager.domain.exceptions import NoAccessFoundException
from contact_manager.infrastructure.persistence.models import (
    Access,
    Role,
    RoleAccess,
    User,
    UserRole,
)
from contact_manager.infrastructure.persistence.repositories.access_repo import (
    access_to_result,
)
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.infrastructure.persistence.repositories.role_repo import (
    role_to_result,
)
from contact_manager.shared.utils.datetime import ensure_utc


def _user_role_to_result(ur: UserRole) -> UserRoleResult:
    return UserRoleResult(
        user_id=ur.user_id,
        role_id=ur.role_id,
        expiry_date=ensure_utc(ur.expiry_date),
        created_date=ensure_utc(ur.created_date),
        updated_date=ensure_utc(ur.updated_date),
    )


def _active_at(as_of: datetime):
    """Membership filter: no expiry, or expiry strictly after as_of."""
    return or_(UserRole.expiry_date.is_(None), UserRole.expiry_date > as_of)


class UserRoleRepository(BaseRepository[UserRole, UserRoleResult]):
    """User-role link table, keyed by (user_id, role_id).

    get_all_access is the four-way join user_roles -> roles -> access_role ->
    access, deduplicated in SQL so a user holding overlapping roles sees each
    access once.
    """

    resource_type = "user_role"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserRole)

    def _to_result(self, obj: UserRole) -> UserRoleResult:
        return _user_role_to_result(obj)

    def _duplicate_details(self, values: dict[str, Any]) -> dict[str, Any]:
        return {k: values[k] for k in ("user_id", "role_id") if k in values}

    async def assign_role(
        self, user_id: int, role_id: int, expiry_date: datetime | None = None
    ) -> UserRoleResult:
        """Create membership. NotFound for unknown user/role; DuplicateKey if already assigned."""
        await self._require_exists(User, user_id, "user")
        await self._require_exists(Role, role_id, "role")
        await self._require_absent((user_id, role_id), user_id=user_id, role_id=role_id)
        ur = UserRole(
            user_id=user_id,
            role_id=role_id,
            expiry_date=ensure_utc(expiry_date),
        )
        return await self.create(ur, user_id=user_id, role_id=role_id)

    async def update_expiry(
        self, user_id: int, role_id: int, expiry_date: datetime | None
    ) -> UserRoleResult:
        return await self.update((user_id, role_id), expiry_date=ensure_utc(expiry_date))

    async def get_roles_for_user(
        self, user_id: int, as_of: datetime | None = None
    ) -> list[RoleResult]:
        query = (
            select(Role)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
            .order_by(Role.id)
        )
        if as_of is not None:
            query = query.where(_active_at(ensure_utc(as_of)))
        result = await self.db.execute(query)
        return [role_to_result(r) for r in result.scalars().all()]

    async def get_all_access(
        self, user_id: int, as_of: datetime | None = None
    ) -> list[AccessResult]:
        """Return distinct accesses reachable through the user's roles, by access id.

        When as_of is given, memberships that expired at or before it are skipped.
        Raises NoAccessFoundException when nothing is reachable.
        """
        query = (
            select(Access)
            .join(RoleAccess, RoleAccess.access_id == Access.id)
            .join(Role, Role.id == RoleAccess.role_id)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
            .distinct()
            .order_by(Access.id)
        )
        if as_of is not None:
            query = query.where(_active_at(ensure_utc(as_of)))
        result = await self.db.execute(query)
        accesses = [access_to_result(a) for a in result.scalars().all()]
        if not accesses:
            raise NoAccessFoundException(user_id)
        return accesses
