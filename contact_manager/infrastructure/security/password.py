"""Salted password storage for the users.password column.

Each user row keeps a single bcrypt string. Login and password change only
ask two questions of it: "hash this new password" and "does this supplied
password match what is stored". Rows left over from the old unsalted digest
format simply fail to verify and need a reset through create_user.
"""

import base64
import hashlib

import bcrypt

BCRYPT_MAX_INPUT = 72


def _bcrypt_input(password: str) -> bytes:
    # Base64 of a SHA-256 digest is 44 bytes, under BCRYPT_MAX_INPUT, so every
    # character of a long password still counts.
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def get_password_hash(password: str) -> str:
    """Hash password with a fresh salt; two calls never return the same string."""
    return bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt()).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check plain_password against a stored hash.

    Anything that is not a bcrypt string (a legacy hex digest, an empty column)
    is a mismatch rather than an error.
    """
    try:
        stored = hashed_password.encode("ascii")
        return bcrypt.checkpw(_bcrypt_input(plain_password), stored)
    except (ValueError, TypeError):
        return False


class BcryptPasswordHasher:
    """IPasswordHasher injected into UserService and Authenticator."""

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)
