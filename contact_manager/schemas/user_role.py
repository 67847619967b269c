"""User-role and role-access assignment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRoleAssign(BaseModel):
    """Request body for POST /user-roles."""

    user_id: int = Field(..., ge=1)
    role_id: int = Field(..., ge=1)
    expiry_date: datetime | None = Field(
        default=None, description="Membership stops counting after this instant"
    )


class UserRoleUpdate(BaseModel):
    """Request body for PUT /user-roles/{user_id}/{role_id}; null clears the expiry."""

    expiry_date: datetime | None = None


class UserRoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    role_id: int
    expiry_date: datetime | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None


class RoleAccessGrant(BaseModel):
    """Request body for POST /role-access."""

    role_id: int = Field(..., ge=1)
    access_id: int = Field(..., ge=1)


class RoleAccessResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role_id: int
    access_id: int
    created_date: datetime | None = None
    updated_date: datetime | None = None
