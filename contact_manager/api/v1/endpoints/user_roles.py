"""User-role API: assign roles to users, change or clear membership expiry, revoke."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from contact_manager.api.v1.dependencies import (
    get_user_role_repo,
    get_user_role_repo_for_write,
)
from contact_manager.core.limiter import limit_writes
from contact_manager.infrastructure.persistence.repositories import UserRoleRepository
from contact_manager.schemas.user_role import (
    UserRoleAssign,
    UserRoleResponse,
    UserRoleUpdate,
)

router = APIRouter()


@router.post("", response_model=UserRoleResponse, status_code=201)
@limit_writes
async def assign_role(
    request: Request,
    body: UserRoleAssign,
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo_for_write)],
):
    """Assign a role to a user; 404 for unknown user or role, 409 if already assigned."""
    membership = await user_role_repo.assign_role(
        body.user_id, body.role_id, expiry_date=body.expiry_date
    )
    return UserRoleResponse.model_validate(membership)


@router.get("", response_model=list[UserRoleResponse])
async def list_user_roles(
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo)],
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
):
    memberships = await user_role_repo.get_all(skip=skip, limit=limit)
    return [UserRoleResponse.model_validate(m) for m in memberships]


@router.get("/{user_id}/{role_id}", response_model=UserRoleResponse)
async def get_user_role(
    user_id: int,
    role_id: int,
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo)],
):
    return UserRoleResponse.model_validate(await user_role_repo.get((user_id, role_id)))


@router.put("/{user_id}/{role_id}", response_model=UserRoleResponse)
@limit_writes
async def update_user_role(
    request: Request,
    user_id: int,
    role_id: int,
    body: UserRoleUpdate,
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo_for_write)],
):
    """Set (or clear, with null) the membership expiry."""
    membership = await user_role_repo.update_expiry(user_id, role_id, body.expiry_date)
    return UserRoleResponse.model_validate(membership)


@router.delete("/{user_id}/{role_id}", status_code=204)
@limit_writes
async def revoke_role(
    request: Request,
    user_id: int,
    role_id: int,
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo_for_write)],
):
    await user_role_repo.delete((user_id, role_id))
