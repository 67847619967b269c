"""Authenticator: credential check, token issuance, and password change.

Login is two linear steps with no retries:

1. Credential check. Unknown username and wrong password raise the same
   InvalidCredentialsException; a dummy hash is verified for unknown users so
   both paths cost one bcrypt check.
2. Token issuance. The AccessAggregator supplies the access names; a user with
   no access still gets a token with an empty list. Claims are user_id,
   username, access, and exp (now + token_ttl), signed with the secret key this
   instance was built with.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from contact_manager.application.dtos.auth import TokenResult
from contact_manager.application.interfaces.repositories import IUserRepository
from contact_manager.application.interfaces.services import IPasswordHasher
from contact_manager.application.services.access_aggregator import AccessAggregator
from contact_manager.domain.exceptions import (
    InvalidCredentialsException,
    NoAccessFoundException,
)
from contact_manager.infrastructure.security.jwt import create_access_token, verify_token
from contact_manager.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=24)

# Lazy dummy hash for constant-time comparison when user is not found.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash(hasher: IPasswordHasher) -> str:
    """Return a valid hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            hasher.hash_password, "not-a-real-password"
        )
    return _dummy_hash_cache


class Authenticator:
    """Validates credentials and mints signed session tokens."""

    def __init__(
        self,
        user_repo: IUserRepository,
        access_aggregator: AccessAggregator,
        password_hasher: IPasswordHasher,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._user_repo = user_repo
        self._access_aggregator = access_aggregator
        self._hasher = password_hasher
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._token_ttl = token_ttl
        self._clock = clock

    async def _verify(self, password: str, hashed_password: str) -> bool:
        return await asyncio.to_thread(self._hasher.verify_password, password, hashed_password)

    async def login(self, username: str, password: str) -> TokenResult:
        """Authenticate username/password and return a signed token.

        Raises:
            InvalidCredentialsException: Unknown username or wrong password (same message).
        """
        user = await self._user_repo.get_by_username(username)
        if user is None:
            await self._verify(password, await _get_dummy_hash(self._hasher))
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        stored_hash = await self._user_repo.get_password_hash(user.id)
        if not await self._verify(password, stored_hash):
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        try:
            access = await self._access_aggregator.get_access_names(user.id)
        except NoAccessFoundException:
            access = []

        expires_at = self._clock() + self._token_ttl
        token = create_access_token(
            {"user_id": user.id, "username": user.username, "access": access},
            self._secret_key,
            algorithm=self._algorithm,
            expires_at=expires_at,
        )
        logger.info("Login succeeded for user_id=%s (%d access entries)", user.id, len(access))
        return TokenResult(
            access_token=token,
            expires_at=expires_at,
            user_id=user.id,
            username=user.username,
            access=access,
        )

    async def change_password(
        self, user_id: int, old_password: str, new_password: str
    ) -> None:
        """Replace the password after verifying the old one.

        Raises:
            ResourceNotFoundException: Unknown user_id.
            InvalidCredentialsException: old_password does not verify; nothing is written.
        """
        stored_hash = await self._user_repo.get_password_hash(user_id)
        if not await self._verify(old_password, stored_hash):
            logger.warning("Password change rejected for user_id=%s", user_id)
            raise InvalidCredentialsException("Incorrect old password")
        new_hash = await asyncio.to_thread(self._hasher.hash_password, new_password)
        await self._user_repo.update_password(user_id, new_hash)
        logger.info("Password changed for user_id=%s", user_id)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Verify a token issued by login and return its claims.

        Raises:
            AuthenticationException: Bad signature, expired, or missing claims.
        """
        return verify_token(token, self._secret_key, algorithm=self._algorithm)
