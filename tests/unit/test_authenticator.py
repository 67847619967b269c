"""Unit tests for Authenticator (login, change_password, decode_token) with mocked repos."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from contact_manager.application.dtos.user import UserResult
from contact_manager.application.services import authenticator as authenticator_module
from contact_manager.application.services.authenticator import Authenticator
from contact_manager.domain.exceptions import (
    AuthenticationException,
    InvalidCredentialsException,
    NoAccessFoundException,
    ResourceNotFoundException,
)
from contact_manager.shared.utils.datetime import to_unix_timestamp, utc_now

SECRET = "authenticator-test-secret"
ALICE = UserResult(id=1, username="alice", email="alice@example.com", mobile="9876543210")


class FakeHasher:
    """Deterministic hasher that records verify calls."""

    def __init__(self) -> None:
        self.verified: list[tuple[str, str]] = []

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        self.verified.append((plain_password, hashed_password))
        return hashed_password == f"hashed:{plain_password}"


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_username.return_value = ALICE
    repo.get_password_hash.return_value = "hashed:s3cret-pass"
    return repo


@pytest.fixture
def aggregator() -> AsyncMock:
    agg = AsyncMock()
    agg.get_access_names.return_value = ["read", "write", "delete", "export"]
    return agg


@pytest.fixture
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def authenticator(user_repo, aggregator, hasher) -> Authenticator:
    return Authenticator(user_repo, aggregator, hasher, SECRET)


async def test_login_returns_token_with_access(authenticator, aggregator) -> None:
    result = await authenticator.login("alice", "s3cret-pass")
    assert result.user_id == 1
    assert result.username == "alice"
    assert result.token_type == "bearer"
    assert result.access == ["read", "write", "delete", "export"]
    aggregator.get_access_names.assert_awaited_once_with(1)

    claims = authenticator.decode_token(result.access_token)
    assert claims["user_id"] == 1
    assert claims["username"] == "alice"
    assert claims["access"] == ["read", "write", "delete", "export"]
    assert claims["exp"] == to_unix_timestamp(result.expires_at)


async def test_login_expiry_is_now_plus_ttl(user_repo, aggregator, hasher) -> None:
    now = utc_now()
    auth = Authenticator(
        user_repo, aggregator, hasher, SECRET, token_ttl=timedelta(hours=24), clock=lambda: now
    )
    result = await auth.login("alice", "s3cret-pass")
    assert result.expires_at == now + timedelta(hours=24)


async def test_unknown_user_and_wrong_password_are_indistinguishable(
    authenticator, user_repo, hasher, monkeypatch
) -> None:
    monkeypatch.setattr(authenticator_module, "_dummy_hash_cache", None)

    with pytest.raises(InvalidCredentialsException) as wrong_password:
        await authenticator.login("alice", "not-the-password")

    user_repo.get_by_username.return_value = None
    with pytest.raises(InvalidCredentialsException) as unknown_user:
        await authenticator.login("mallory", "whatever-pass")

    assert wrong_password.value.message == unknown_user.value.message
    assert wrong_password.value.error_code == unknown_user.value.error_code
    # Both paths ran exactly one password verification.
    assert len(hasher.verified) == 2
    assert hasher.verified[1] == ("whatever-pass", "hashed:not-a-real-password")


async def test_unknown_user_skips_access_lookup(authenticator, user_repo, aggregator) -> None:
    user_repo.get_by_username.return_value = None
    with pytest.raises(InvalidCredentialsException):
        await authenticator.login("mallory", "whatever-pass")
    user_repo.get_password_hash.assert_not_awaited()
    aggregator.get_access_names.assert_not_awaited()


async def test_login_with_no_access_gets_empty_list(authenticator, aggregator) -> None:
    """NoAccessFound is non-fatal at login."""
    aggregator.get_access_names.side_effect = NoAccessFoundException(1)
    result = await authenticator.login("alice", "s3cret-pass")
    assert result.access == []
    assert authenticator.decode_token(result.access_token)["access"] == []


async def test_login_propagates_other_access_errors(authenticator, aggregator) -> None:
    aggregator.get_access_names.side_effect = RuntimeError("database down")
    with pytest.raises(RuntimeError):
        await authenticator.login("alice", "s3cret-pass")


async def test_change_password_success(authenticator, user_repo) -> None:
    await authenticator.change_password(1, "s3cret-pass", "n3w-password")
    user_repo.update_password.assert_awaited_once_with(1, "hashed:n3w-password")


async def test_change_password_wrong_old_password_does_not_write(authenticator, user_repo) -> None:
    with pytest.raises(InvalidCredentialsException) as exc_info:
        await authenticator.change_password(1, "bad-old-pass", "n3w-password")
    assert exc_info.value.message == "Incorrect old password"
    user_repo.update_password.assert_not_awaited()


async def test_change_password_unknown_user(authenticator, user_repo) -> None:
    user_repo.get_password_hash.side_effect = ResourceNotFoundException("user", 99)
    with pytest.raises(ResourceNotFoundException):
        await authenticator.change_password(99, "s3cret-pass", "n3w-password")
    user_repo.update_password.assert_not_awaited()


async def test_decode_token_signed_with_other_key(authenticator, user_repo, aggregator, hasher) -> None:
    other = Authenticator(user_repo, aggregator, hasher, "some-other-secret")
    token = (await other.login("alice", "s3cret-pass")).access_token
    with pytest.raises(AuthenticationException):
        authenticator.decode_token(token)


def test_empty_secret_key_rejected(user_repo, aggregator, hasher) -> None:
    with pytest.raises(ValueError):
        Authenticator(user_repo, aggregator, hasher, "")
