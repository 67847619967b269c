"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

ICrudRepository is the shared shape of every entity and association store,
parameterized by key type (int, or a (left_id, right_id) tuple) and result DTO.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from contact_manager.application.dtos.access import AccessResult
    from contact_manager.application.dtos.role import RoleResult
    from contact_manager.application.dtos.user import UserResult
    from contact_manager.application.dtos.user_role import (
        RoleAccessResult,
        UserRoleResult,
    )


KeyT = TypeVar("KeyT")
ResultT = TypeVar("ResultT")


class ICrudRepository(Protocol[KeyT, ResultT]):
    """Create / get / update / delete / list over one table."""

    async def get(self, key: KeyT) -> ResultT:
        """Return the row for key; raise ResourceNotFoundException if absent."""

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[ResultT]:
        """Return rows in insertion (primary key) order."""

    async def update(self, key: KeyT, **values: Any) -> ResultT:
        """Update columns; raise ResourceNotFoundException if no row was affected."""

    async def delete(self, key: KeyT) -> None:
        """Delete; raise ResourceNotFoundException if no row was affected."""


class IUserRepository(ICrudRepository[int, "UserResult"], Protocol):
    """Protocol for user repository."""

    async def create_user(
        self, username: str, email: str, mobile: str, hashed_password: str
    ) -> UserResult:
        """Create user; raise DuplicateKeyException on duplicate username."""

    async def get_by_username(self, username: str) -> UserResult | None:
        """Return user by username or None."""

    async def get_password_hash(self, user_id: int) -> str:
        """Return the stored password hash; raise ResourceNotFoundException if absent."""

    async def update_password(self, user_id: int, hashed_password: str) -> None:
        """Replace the stored password hash."""


class IRoleRepository(ICrudRepository[int, "RoleResult"], Protocol):
    """Protocol for role repository."""

    async def create_role(self, name: str) -> RoleResult:
        """Create role; raise DuplicateKeyException on duplicate name."""

    async def get_by_name(self, name: str) -> RoleResult | None:
        """Return role by name or None."""


class IAccessRepository(ICrudRepository[int, "AccessResult"], Protocol):
    """Protocol for access repository."""

    async def create_access(self, name: str) -> AccessResult:
        """Create access; raise DuplicateKeyException on duplicate name."""

    async def get_by_name(self, name: str) -> AccessResult | None:
        """Return access by name or None."""


class IUserRoleRepository(
    ICrudRepository[tuple[int, int], "UserRoleResult"], Protocol
):
    """Protocol for the user-role association store."""

    async def assign_role(
        self, user_id: int, role_id: int, expiry_date: datetime | None = None
    ) -> UserRoleResult:
        """Create membership; NotFound for unknown user/role, DuplicateKey if present."""

    async def get_roles_for_user(
        self, user_id: int, as_of: datetime | None = None
    ) -> list[RoleResult]:
        """Return roles held by user; with as_of, only memberships active at that time."""

    async def get_all_access(
        self, user_id: int, as_of: datetime | None = None
    ) -> list[AccessResult]:
        """Return distinct accesses reachable by user; raise NoAccessFoundException if none."""


class IRoleAccessRepository(
    ICrudRepository[tuple[int, int], "RoleAccessResult"], Protocol
):
    """Protocol for the role-access association store."""

    async def grant_access(self, role_id: int, access_id: int) -> RoleAccessResult:
        """Create grant; NotFound for unknown role/access, DuplicateKey if present."""

    async def get_accesses_for_role(self, role_id: int) -> list[AccessResult]:
        """Return accesses granted to role."""
