"""Domain layer: business exceptions shared by every other layer."""

from contact_manager.domain.exceptions import (
    AuthenticationException,
    ContactManagerException,
    DuplicateKeyException,
    InvalidCredentialsException,
    NoAccessFoundException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "ContactManagerException",
    "DuplicateKeyException",
    "InvalidCredentialsException",
    "NoAccessFoundException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
