"""Application ports (protocols) implemented by infrastructure."""

from contact_manager.application.interfaces.repositories import (
    IAccessRepository,
    ICrudRepository,
    IRoleAccessRepository,
    IRoleRepository,
    IUserRepository,
    IUserRoleRepository,
)
from contact_manager.application.interfaces.services import IPasswordHasher

__all__ = [
    "IAccessRepository",
    "ICrudRepository",
    "IPasswordHasher",
    "IRoleAccessRepository",
    "IRoleRepository",
    "IUserRepository",
    "IUserRoleRepository",
]
