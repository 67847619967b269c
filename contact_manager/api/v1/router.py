"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes use
dependencies from contact_manager.api.v1.dependencies.
"""

from fastapi import APIRouter

from contact_manager.api.v1.endpoints import (
    access,
    auth,
    health,
    role_access,
    roles,
    user_roles,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(access.router, prefix="/access", tags=["access"])
api_router.include_router(user_roles.router, prefix="/user-roles", tags=["user-roles"])
api_router.include_router(
    role_access.router, prefix="/role-access", tags=["role-access"]
)
