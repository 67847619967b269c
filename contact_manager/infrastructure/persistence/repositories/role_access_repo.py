"""RoleAccess repository: access grants per role (table access_role)."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.dtos.access import AccessResult
from contact_manager.application.dtos.user_role import RoleAccessResult
from contact_manager.infrastructure.persistence.models import Access, Role, RoleAccess
from contact_manager.infrastructure.persistence.repositories.access_repo import (
    access_to_result,
)
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.shared.utils.datetime import ensure_utc


def _role_access_to_result(ra: RoleAccess) -> RoleAccessResult:
    return RoleAccessResult(
        role_id=ra.role_id,
        access_id=ra.access_id,
        created_date=ensure_utc(ra.created_date),
        updated_date=ensure_utc(ra.updated_date),
    )


class RoleAccessRepository(BaseRepository[RoleAccess, RoleAccessResult]):
    """Role-access link table, keyed by (role_id, access_id)."""

    resource_type = "role_access"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, RoleAccess)

    def _to_result(self, obj: RoleAccess) -> RoleAccessResult:
        return _role_access_to_result(obj)

    def _duplicate_details(self, values: dict[str, Any]) -> dict[str, Any]:
        return {k: values[k] for k in ("role_id", "access_id") if k in values}

    async def grant_access(self, role_id: int, access_id: int) -> RoleAccessResult:
        """Create grant. NotFound for unknown role/access; DuplicateKey if already granted."""
        await self._require_exists(Role, role_id, "role")
        await self._require_exists(Access, access_id, "access")
        await self._require_absent((role_id, access_id), role_id=role_id, access_id=access_id)
        ra = RoleAccess(role_id=role_id, access_id=access_id)
        return await self.create(ra, role_id=role_id, access_id=access_id)

    async def get_accesses_for_role(self, role_id: int) -> list[AccessResult]:
        result = await self.db.execute(
            select(Access)
            .join(RoleAccess, RoleAccess.access_id == Access.id)
            .where(RoleAccess.role_id == role_id)
            .order_by(Access.id)
        )
        return [access_to_result(a) for a in result.scalars().all()]
