"""Access (permission) API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from contact_manager.schemas.fields import NonBlankName


class AccessCreateRequest(BaseModel):
    """Request body for creating an access."""

    name: NonBlankName


class AccessUpdate(BaseModel):
    """Request body for renaming an access."""

    name: NonBlankName


class AccessResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
