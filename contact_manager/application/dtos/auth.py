"""DTOs for login (token issuance)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class TokenResult:
    """Signed session token plus the claims it was minted with."""

    access_token: str
    expires_at: datetime
    user_id: int
    username: str
    access: list[str] = field(default_factory=list)
    token_type: str = "bearer"
