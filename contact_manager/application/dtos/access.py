"""DTOs for access use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccessResult:
    """Access read-model. Equality is by all fields; dedup uses id."""

    id: int
    name: str
    created_date: datetime | None = None
    updated_date: datetime | None = None
