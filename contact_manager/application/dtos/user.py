"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get, create, update, etc.). No password."""

    id: int
    username: str
    email: str
    mobile: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
