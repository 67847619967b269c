"""Core: config, exception handlers, rate limiter, and application lifespan."""

from contact_manager.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
