"""Security: JWT signing/verification and password hashing."""

from contact_manager.infrastructure.security.jwt import create_access_token, verify_token
from contact_manager.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)

__all__ = [
    "BcryptPasswordHasher",
    "create_access_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
