"""Users API: CRUD, password change, and the user's roles and effective access."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from contact_manager.api.v1.dependencies import (
    get_access_aggregator,
    get_authenticator_for_write,
    get_user_repo,
    get_user_repo_for_write,
    get_user_role_repo,
    get_user_service,
)
from contact_manager.application.services import (
    AccessAggregator,
    Authenticator,
    UserService,
)
from contact_manager.core.config import get_settings
from contact_manager.core.limiter import limit_writes
from contact_manager.infrastructure.persistence.repositories import (
    UserRepository,
    UserRoleRepository,
)
from contact_manager.schemas.access import AccessResponse
from contact_manager.schemas.role import RoleResponse
from contact_manager.schemas.user import (
    PasswordChangeRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdate,
)
from contact_manager.shared.utils.datetime import utc_now

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Create a user; 409 when the username is taken."""
    user = await user_service.create_user(
        username=body.username,
        email=body.email,
        mobile=body.mobile,
        password=body.password,
    )
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
):
    """List users (paginated)."""
    users = await user_repo.get_all(skip=skip, limit=limit)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Get user by id."""
    return UserResponse.model_validate(await user_repo.get(user_id))


@router.put("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: int,
    body: UserUpdate,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update username, email and/or mobile."""
    user = await user_service.update_profile(
        user_id,
        username=body.username,
        email=body.email,
        mobile=body.mobile,
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=204)
@limit_writes
async def delete_user(
    request: Request,
    user_id: int,
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
):
    """Delete user; their role memberships are removed with them."""
    await user_repo.delete(user_id)


@router.put("/{user_id}/password", status_code=204)
@limit_writes
async def change_password(
    request: Request,
    user_id: int,
    body: PasswordChangeRequest,
    authenticator: Annotated[Authenticator, Depends(get_authenticator_for_write)],
):
    """Change password; 401 when old_password does not match."""
    await authenticator.change_password(user_id, body.old_password, body.new_password)


@router.get("/{user_id}/roles", response_model=list[RoleResponse])
async def list_user_roles(
    user_id: int,
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Roles currently held by the user (expired memberships hidden when expiry is enforced)."""
    await user_repo.get(user_id)
    as_of = utc_now() if get_settings().enforce_role_expiry else None
    roles = await user_role_repo.get_roles_for_user(user_id, as_of=as_of)
    return [RoleResponse.model_validate(r) for r in roles]


@router.get("/{user_id}/access", response_model=list[AccessResponse])
async def list_user_access(
    user_id: int,
    aggregator: Annotated[AccessAggregator, Depends(get_access_aggregator)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
):
    """Effective access of the user; 404 NO_ACCESS_FOUND when the set is empty."""
    await user_repo.get(user_id)
    accesses = await aggregator.get_effective_access(user_id)
    return [AccessResponse.model_validate(a) for a in accesses]
