"""Service interfaces (ports) for the application layer.

Protocols define contracts for security helpers the services depend on (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Password hashing interface
class IPasswordHasher(Protocol):
    """Protocol for one-way password hashing (hash-in, verify against stored hash)."""

    def hash_password(self, password: str) -> str:
        """Return the stored form of password."""

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Return True if plain_password matches hashed_password."""
