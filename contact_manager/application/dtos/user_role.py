"""DTOs for the user-role and role-access associations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRoleResult:
    """User-role membership. expiry_date None means no expiry."""

    user_id: int
    role_id: int
    expiry_date: datetime | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None


@dataclass(frozen=True)
class RoleAccessResult:
    """Access granted to a role."""

    role_id: int
    access_id: int
    created_date: datetime | None = None
    updated_date: datetime | None = None
