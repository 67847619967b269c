"""SQLAlchemy repositories: one per table, all built on BaseRepository."""

from contact_manager.infrastructure.persistence.repositories.access_repo import (
    AccessRepository,
)
from contact_manager.infrastructure.persistence.repositories.base import BaseRepository
from contact_manager.infrastructure.persistence.repositories.role_access_repo import (
    RoleAccessRepository,
)
from contact_manager.infrastructure.persistence.repositories.role_repo import (
    RoleRepository,
)
from contact_manager.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
)
from contact_manager.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

__all__ = [
    "AccessRepository",
    "BaseRepository",
    "RoleAccessRepository",
    "RoleRepository",
    "UserRepository",
    "UserRoleRepository",
]
