"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from contact_manager.schemas.fields import NonBlankName


class RoleCreateRequest(BaseModel):
    """Request body for creating a role."""

    name: NonBlankName


class RoleUpdate(BaseModel):
    """Request body for renaming a role."""

    name: NonBlankName


class RoleResponse(BaseModel):
    """Role list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
