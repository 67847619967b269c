"""Pydantic request/response schemas for the API."""

from contact_manager.schemas.access import AccessCreateRequest, AccessResponse, AccessUpdate
from contact_manager.schemas.auth import LoginRequest, TokenClaims, TokenResponse
from contact_manager.schemas.health import HealthResponse
from contact_manager.schemas.role import RoleCreateRequest, RoleResponse, RoleUpdate
from contact_manager.schemas.user import (
    PasswordChangeRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdate,
)
from contact_manager.schemas.user_role import (
    RoleAccessGrant,
    RoleAccessResponse,
    UserRoleAssign,
    UserRoleResponse,
    UserRoleUpdate,
)

__all__ = [
    "AccessCreateRequest",
    "AccessResponse",
    "AccessUpdate",
    "HealthResponse",
    "LoginRequest",
    "PasswordChangeRequest",
    "RoleAccessGrant",
    "RoleAccessResponse",
    "RoleCreateRequest",
    "RoleResponse",
    "RoleUpdate",
    "TokenClaims",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserRoleAssign",
    "UserRoleResponse",
    "UserRoleUpdate",
    "UserUpdate",
]
