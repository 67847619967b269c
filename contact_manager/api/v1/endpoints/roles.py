"""Roles API: list, get, create, update, delete, and the accesses granted to a role."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from contact_manager.api.v1.dependencies import (
    get_role_access_repo,
    get_role_repo,
    get_role_repo_for_write,
)
from contact_manager.core.limiter import limit_writes
from contact_manager.infrastructure.persistence.repositories import (
    RoleAccessRepository,
    RoleRepository,
)
from contact_manager.schemas.access import AccessResponse
from contact_manager.schemas.role import RoleCreateRequest, RoleResponse, RoleUpdate

router = APIRouter()


@router.post("", response_model=RoleResponse, status_code=201)
@limit_writes
async def create_role(
    request: Request,
    body: RoleCreateRequest,
    role_repo: Annotated[RoleRepository, Depends(get_role_repo_for_write)],
):
    """Create a role; 409 when the name is taken."""
    return RoleResponse.model_validate(await role_repo.create_role(body.name))


@router.get("", response_model=list[RoleResponse])
async def list_roles(
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
):
    roles = await role_repo.get_all(skip=skip, limit=limit)
    return [RoleResponse.model_validate(r) for r in roles]


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(
    role_id: int,
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
):
    return RoleResponse.model_validate(await role_repo.get(role_id))


@router.put("/{role_id}", response_model=RoleResponse)
@limit_writes
async def update_role(
    request: Request,
    role_id: int,
    body: RoleUpdate,
    role_repo: Annotated[RoleRepository, Depends(get_role_repo_for_write)],
):
    """Rename a role; 404 when absent, 409 when the new name is taken."""
    return RoleResponse.model_validate(await role_repo.update(role_id, name=body.name))


@router.delete("/{role_id}", status_code=204)
@limit_writes
async def delete_role(
    request: Request,
    role_id: int,
    role_repo: Annotated[RoleRepository, Depends(get_role_repo_for_write)],
):
    """Delete role; its memberships and access grants cascade."""
    await role_repo.delete(role_id)


@router.get("/{role_id}/access", response_model=list[AccessResponse])
async def list_role_access(
    role_id: int,
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
    role_access_repo: Annotated[RoleAccessRepository, Depends(get_role_access_repo)],
):
    """Accesses granted to the role (404 when the role does not exist)."""
    await role_repo.get(role_id)
    accesses = await role_access_repo.get_accesses_for_role(role_id)
    return [AccessResponse.model_validate(a) for a in accesses]
