"""Integration test for the RBAC seeding script."""

import pytest

from contact_manager.infrastructure.persistence.repositories import (
    RoleAccessRepository,
    RoleRepository,
)
from scripts.seed_rbac import DEFAULT_ROLES, seed_rbac

pytestmark = pytest.mark.requires_db


async def test_seed_is_idempotent(db_session) -> None:
    first = await seed_rbac(db_session)
    second = await seed_rbac(db_session)
    assert first == second
    assert set(first) == set(DEFAULT_ROLES)

    assert len(await RoleRepository(db_session).get_all()) == len(DEFAULT_ROLES)
    grants = RoleAccessRepository(db_session)
    admin_access = await grants.get_accesses_for_role(first["Admin"])
    assert [a.name for a in admin_access] == ["read", "write", "delete"]
