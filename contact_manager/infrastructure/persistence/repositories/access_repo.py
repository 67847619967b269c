"""Access repository. Read methods return AccessResult (DTO)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.dtos.access import AccessResult
from contact_manager.infrastructure.persistence.models.access import Access
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.shared.utils.datetime import ensure_utc


def access_to_result(a: Access) -> AccessResult:
    """Map ORM Access to application AccessResult."""
    return AccessResult(
        id=a.id,
        name=a.name,
        created_date=ensure_utc(a.created_date),
        updated_date=ensure_utc(a.updated_date),
    )


class AccessRepository(BaseRepository[Access, AccessResult]):
    """Access repository. Deleting an access cascades to access_role."""

    resource_type = "access"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Access)

    def _to_result(self, obj: Access) -> AccessResult:
        return access_to_result(obj)

    async def create_access(self, name: str) -> AccessResult:
        """Create an access; raise DuplicateKeyException when name exists."""
        return await self.create(Access(name=name), name=name)

    async def get_by_name(self, name: str) -> AccessResult | None:
        result = await self.db.execute(select(Access).where(Access.name == name))
        row = result.scalar_one_or_none()
        return access_to_result(row) if row else None
