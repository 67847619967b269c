"""Access API: CRUD for named permissions."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from contact_manager.api.v1.dependencies import get_access_repo, get_access_repo_for_write
from contact_manager.core.limiter import limit_writes
from contact_manager.infrastructure.persistence.repositories import AccessRepository
from contact_manager.schemas.access import (
    AccessCreateRequest,
    AccessResponse,
    AccessUpdate,
)

router = APIRouter()


@router.post("", response_model=AccessResponse, status_code=201)
@limit_writes
async def create_access(
    request: Request,
    body: AccessCreateRequest,
    access_repo: Annotated[AccessRepository, Depends(get_access_repo_for_write)],
):
    """Create an access; 409 when the name is taken."""
    return AccessResponse.model_validate(await access_repo.create_access(body.name))


@router.get("", response_model=list[AccessResponse])
async def list_access(
    access_repo: Annotated[AccessRepository, Depends(get_access_repo)],
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
):
    accesses = await access_repo.get_all(skip=skip, limit=limit)
    return [AccessResponse.model_validate(a) for a in accesses]


@router.get("/{access_id}", response_model=AccessResponse)
async def get_access(
    access_id: int,
    access_repo: Annotated[AccessRepository, Depends(get_access_repo)],
):
    return AccessResponse.model_validate(await access_repo.get(access_id))


@router.put("/{access_id}", response_model=AccessResponse)
@limit_writes
async def update_access(
    request: Request,
    access_id: int,
    body: AccessUpdate,
    access_repo: Annotated[AccessRepository, Depends(get_access_repo_for_write)],
):
    return AccessResponse.model_validate(
        await access_repo.update(access_id, name=body.name)
    )


@router.delete("/{access_id}", status_code=204)
@limit_writes
async def delete_access(
    request: Request,
    access_id: int,
    access_repo: Annotated[AccessRepository, Depends(get_access_repo_for_write)],
):
    """Delete access; grants referencing it cascade."""
    await access_repo.delete(access_id)
