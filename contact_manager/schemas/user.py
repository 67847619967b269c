"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from contact_manager.schemas.fields import NonBlankName

MOBILE_PATTERN = r"^\d{10}$"


class UserCreateRequest(BaseModel):
    """Request body for creating a user."""

    username: NonBlankName
    email: EmailStr
    mobile: str = Field(..., pattern=MOBILE_PATTERN, description="10-digit mobile number")
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserUpdate(BaseModel):
    """Request body for updating a user (partial; password has its own endpoint)."""

    username: NonBlankName | None = None
    email: EmailStr | None = None
    mobile: str | None = Field(default=None, pattern=MOBILE_PATTERN)


class PasswordChangeRequest(BaseModel):
    """Request body for PUT /users/{user_id}/password."""

    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, description="New password (min 8 characters)")


class UserResponse(BaseModel):
    """User response (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    mobile: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
