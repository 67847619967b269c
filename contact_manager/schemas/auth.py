"""Auth API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request body for login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""

    model_config = ConfigDict(from_attributes=True)

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user_id: int
    username: str
    access: list[str] = Field(default_factory=list)


class TokenClaims(BaseModel):
    """Claims carried by a session token (GET /auth/me)."""

    user_id: int
    username: str | None = None
    access: list[str] = Field(default_factory=list)
    exp: int
