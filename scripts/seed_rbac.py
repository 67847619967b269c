"""Seed roles, accesses and role-access grants from a role -> access-names mapping.

Usage:
    python -m scripts.seed_rbac
Idempotent: existing roles, accesses and grants are reused. Requires migrated DB.
"""

import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.interfaces import (
    IAccessRepository,
    IRoleAccessRepository,
    IRoleRepository,
)
from contact_manager.core.config import get_settings
from contact_manager.domain.exceptions import DuplicateKeyException
from contact_manager.infrastructure.persistence import database
from contact_manager.infrastructure.persistence.repositories import (
    AccessRepository,
    RoleAccessRepository,
    RoleRepository,
)

DEFAULT_ROLES: dict[str, list[str]] = {
    "Admin": ["read", "write", "delete"],
    "Viewer": ["read", "export"],
}


async def seed_roles(
    role_repo: IRoleRepository,
    access_repo: IAccessRepository,
    role_access_repo: IRoleAccessRepository,
    roles: dict[str, list[str]],
) -> dict[str, int]:
    """Create missing roles/accesses/grants; return role name -> role id."""
    access_ids: dict[str, int] = {}
    role_ids: dict[str, int] = {}
    for role_name, access_names in roles.items():
        role = await role_repo.get_by_name(role_name) or await role_repo.create_role(role_name)
        role_ids[role_name] = role.id
        for access_name in access_names:
            if access_name not in access_ids:
                access = await access_repo.get_by_name(
                    access_name
                ) or await access_repo.create_access(access_name)
                access_ids[access_name] = access.id
            granted = {a.id for a in await role_access_repo.get_accesses_for_role(role.id)}
            if access_ids[access_name] not in granted:
                await role_access_repo.grant_access(role.id, access_ids[access_name])
    return role_ids


async def seed_rbac(
    session: AsyncSession, roles: dict[str, list[str]] = DEFAULT_ROLES
) -> dict[str, int]:
    """seed_roles over SQLAlchemy repositories bound to session."""
    return await seed_roles(
        RoleRepository(session),
        AccessRepository(session),
        RoleAccessRepository(session),
        roles,
    )


async def main() -> None:
    """Seed the default roles into the configured database."""
    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            try:
                role_ids = await seed_rbac(session)
            except DuplicateKeyException as e:
                print(f"Seeding raced with another writer: {e.message}", file=sys.stderr)
                sys.exit(1)
    for name, role_id in role_ids.items():
        print(f"Role {name}: {role_id}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
