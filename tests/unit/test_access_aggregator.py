"""Unit tests for AccessAggregator (expiry cut-off, names, empty set)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from contact_manager.application.dtos.access import AccessResult
from contact_manager.application.services.access_aggregator import AccessAggregator
from contact_manager.domain.exceptions import NoAccessFoundException

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _access(access_id: int, name: str) -> AccessResult:
    return AccessResult(id=access_id, name=name, created_date=NOW, updated_date=NOW)


@pytest.fixture
def user_role_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_all_access.return_value = [_access(1, "read"), _access(2, "write")]
    return repo


async def test_effective_access_passes_clock_when_enforcing_expiry(user_role_repo) -> None:
    aggregator = AccessAggregator(user_role_repo, clock=lambda: NOW)
    result = await aggregator.get_effective_access(5)
    assert [a.name for a in result] == ["read", "write"]
    user_role_repo.get_all_access.assert_awaited_once_with(5, as_of=NOW)


async def test_effective_access_ignores_expiry_when_disabled(user_role_repo) -> None:
    aggregator = AccessAggregator(user_role_repo, enforce_expiry=False, clock=lambda: NOW)
    await aggregator.get_effective_access(5)
    user_role_repo.get_all_access.assert_awaited_once_with(5, as_of=None)


async def test_access_names_keep_store_order(user_role_repo) -> None:
    aggregator = AccessAggregator(user_role_repo)
    assert await aggregator.get_access_names(5) == ["read", "write"]


async def test_no_access_propagates(user_role_repo) -> None:
    """Empty set is a distinguishable signal, not an empty list."""
    user_role_repo.get_all_access.side_effect = NoAccessFoundException(5)
    aggregator = AccessAggregator(user_role_repo)
    with pytest.raises(NoAccessFoundException):
        await aggregator.get_effective_access(5)
