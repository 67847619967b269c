"""Role-access API: grant accesses to roles and revoke them."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from contact_manager.api.v1.dependencies import (
    get_role_access_repo,
    get_role_access_repo_for_write,
)
from contact_manager.core.limiter import limit_writes
from contact_manager.infrastructure.persistence.repositories import RoleAccessRepository
from contact_manager.schemas.user_role import RoleAccessGrant, RoleAccessResponse

router = APIRouter()


@router.post("", response_model=RoleAccessResponse, status_code=201)
@limit_writes
async def grant_access(
    request: Request,
    body: RoleAccessGrant,
    role_access_repo: Annotated[
        RoleAccessRepository, Depends(get_role_access_repo_for_write)
    ],
):
    """Grant an access to a role; 404 for unknown role or access, 409 if already granted."""
    grant = await role_access_repo.grant_access(body.role_id, body.access_id)
    return RoleAccessResponse.model_validate(grant)


@router.get("", response_model=list[RoleAccessResponse])
async def list_grants(
    role_access_repo: Annotated[RoleAccessRepository, Depends(get_role_access_repo)],
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
):
    grants = await role_access_repo.get_all(skip=skip, limit=limit)
    return [RoleAccessResponse.model_validate(g) for g in grants]


@router.get("/{role_id}/{access_id}", response_model=RoleAccessResponse)
async def get_grant(
    role_id: int,
    access_id: int,
    role_access_repo: Annotated[RoleAccessRepository, Depends(get_role_access_repo)],
):
    return RoleAccessResponse.model_validate(
        await role_access_repo.get((role_id, access_id))
    )


@router.delete("/{role_id}/{access_id}", status_code=204)
@limit_writes
async def revoke_access(
    request: Request,
    role_id: int,
    access_id: int,
    role_access_repo: Annotated[
        RoleAccessRepository, Depends(get_role_access_repo_for_write)
    ],
):
    await role_access_repo.delete((role_id, access_id))
