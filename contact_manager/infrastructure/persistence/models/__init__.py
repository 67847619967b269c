"""Persistence models: ORM entities and mixins."""

from contact_manager.infrastructure.persistence.models.access import Access
from contact_manager.infrastructure.persistence.models.mixins import TimestampMixin
from contact_manager.infrastructure.persistence.models.role import Role
from contact_manager.infrastructure.persistence.models.user import User
from contact_manager.infrastructure.persistence.models.associations import (
    RoleAccess,
    UserRole,
)

__all__ = [
    "Access",
    "Role",
    "RoleAccess",
    "TimestampMixin",
    "User",
    "UserRole",
]
