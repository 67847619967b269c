"""Access aggregator: a user's effective access set through the role/access join graph."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from contact_manager.application.dtos.access import AccessResult
from contact_manager.application.interfaces.repositories import IUserRoleRepository
from contact_manager.shared.utils.datetime import utc_now


class AccessAggregator:
    """Computes the distinct accesses a user reaches through their role memberships.

    user roles (non-expired when enforce_expiry) -> each role's accesses -> union,
    distinct by access id. The store does the dedup in SQL; callers always get
    each access once. An empty set raises NoAccessFoundException so "no access"
    stays distinguishable from a storage failure.
    """

    def __init__(
        self,
        user_role_repo: IUserRoleRepository,
        *,
        enforce_expiry: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._user_role_repo = user_role_repo
        self._enforce_expiry = enforce_expiry
        self._clock = clock

    async def get_effective_access(self, user_id: int) -> list[AccessResult]:
        """Return accesses ordered by id; raise NoAccessFoundException when empty."""
        as_of = self._clock() if self._enforce_expiry else None
        return await self._user_role_repo.get_all_access(user_id, as_of=as_of)

    async def get_access_names(self, user_id: int) -> list[str]:
        """Access names in stable (id) order, for embedding in a token."""
        return [a.name for a in await self.get_effective_access(user_id)]
