"""Application services: orchestrate repositories and security helpers."""

from contact_manager.application.services.access_aggregator import AccessAggregator
from contact_manager.application.services.authenticator import Authenticator
from contact_manager.application.services.user_service import UserService

__all__ = ["AccessAggregator", "Authenticator", "UserService"]
