"""HTTP middleware (raw ASGI). Applied in contact_manager.main."""

from contact_manager.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
