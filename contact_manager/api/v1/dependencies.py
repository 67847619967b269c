"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and application
services. Routes depend only on these, never build infrastructure themselves.
Read routes get a plain session (get_db); write routes get one wrapped in a
transaction (get_db_transactional) that commits on success.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.application.services import (
    AccessAggregator,
    Authenticator,
    UserService,
)
from contact_manager.core.config import get_settings
from contact_manager.domain.exceptions import AuthenticationException
from contact_manager.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from contact_manager.infrastructure.persistence.repositories import (
    AccessRepository,
    RoleAccessRepository,
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from contact_manager.infrastructure.security.password import BcryptPasswordHasher

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]


# ---- Repositories ----


async def get_user_repo(db: ReadSession) -> UserRepository:
    return UserRepository(db)


async def get_user_repo_for_write(db: WriteSession) -> UserRepository:
    return UserRepository(db)


async def get_role_repo(db: ReadSession) -> RoleRepository:
    return RoleRepository(db)


async def get_role_repo_for_write(db: WriteSession) -> RoleRepository:
    return RoleRepository(db)


async def get_access_repo(db: ReadSession) -> AccessRepository:
    return AccessRepository(db)


async def get_access_repo_for_write(db: WriteSession) -> AccessRepository:
    return AccessRepository(db)


async def get_user_role_repo(db: ReadSession) -> UserRoleRepository:
    return UserRoleRepository(db)


async def get_user_role_repo_for_write(db: WriteSession) -> UserRoleRepository:
    return UserRoleRepository(db)


async def get_role_access_repo(db: ReadSession) -> RoleAccessRepository:
    return RoleAccessRepository(db)


async def get_role_access_repo_for_write(db: WriteSession) -> RoleAccessRepository:
    return RoleAccessRepository(db)


# ---- Services ----


def get_password_hasher() -> BcryptPasswordHasher:
    """Password hasher (composition root)."""
    return BcryptPasswordHasher()


def get_access_aggregator(
    user_role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo)],
) -> AccessAggregator:
    """Access aggregator; expiry enforcement follows ENFORCE_ROLE_EXPIRY."""
    return AccessAggregator(
        user_role_repo, enforce_expiry=get_settings().enforce_role_expiry
    )


def _build_authenticator(
    user_repo: UserRepository,
    access_aggregator: AccessAggregator,
    hasher: BcryptPasswordHasher,
) -> Authenticator:
    settings = get_settings()
    return Authenticator(
        user_repo=user_repo,
        access_aggregator=access_aggregator,
        password_hasher=hasher,
        secret_key=settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
        token_ttl=timedelta(minutes=settings.access_token_expire_minutes),
    )


def get_authenticator(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    access_aggregator: Annotated[AccessAggregator, Depends(get_access_aggregator)],
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> Authenticator:
    """Authenticator for login and token decoding (read-only session)."""
    return _build_authenticator(user_repo, access_aggregator, hasher)


def get_authenticator_for_write(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    access_aggregator: Annotated[AccessAggregator, Depends(get_access_aggregator)],
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> Authenticator:
    """Authenticator for password change (transactional session)."""
    return _build_authenticator(user_repo, access_aggregator, hasher)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """User service for create/update (composition root)."""
    return UserService(user_repo=user_repo, password_hasher=hasher)


# ---- Auth (claims from bearer token) ----

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> dict[str, Any]:
    """Return verified token claims; raise AuthenticationException (401) otherwise."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    return authenticator.decode_token(credentials.credentials)
