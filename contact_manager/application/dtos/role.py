"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RoleResult:
    """Role read-model."""

    id: int
    name: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
