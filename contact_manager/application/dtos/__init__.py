"""Application DTOs (read-models returned by repositories and services)."""

from contact_manager.application.dtos.access import AccessResult
from contact_manager.application.dtos.auth import TokenResult
from contact_manager.application.dtos.role import RoleResult
from contact_manager.application.dtos.user import UserResult
from contact_manager.application.dtos.user_role import RoleAccessResult, UserRoleResult

__all__ = [
    "AccessResult",
    "RoleAccessResult",
    "RoleResult",
    "TokenResult",
    "UserResult",
    "UserRoleResult",
]
