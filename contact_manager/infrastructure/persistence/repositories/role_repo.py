"""Role repository. Read methods return RoleResult (DTO)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.dtos.role import RoleResult
from contact_manager.infrastructure.persistence.models.role import Role
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.shared.utils.datetime import ensure_utc


def role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        name=r.name,
        created_date=ensure_utc(r.created_date),
        updated_date=ensure_utc(r.updated_date),
    )


class RoleRepository(BaseRepository[Role, RoleResult]):
    """Role repository. Deleting a role cascades to user_roles and access_role."""

    resource_type = "role"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    def _to_result(self, obj: Role) -> RoleResult:
        return role_to_result(obj)

    async def create_role(self, name: str) -> RoleResult:
        """Create a role; raise DuplicateKeyException when name exists."""
        return await self.create(Role(name=name), name=name)

    async def get_by_name(self, name: str) -> RoleResult | None:
        result = await self.db.execute(select(Role).where(Role.name == name))
        row = result.scalar_one_or_none()
        return role_to_result(row) if row else None
