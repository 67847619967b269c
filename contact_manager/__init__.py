"""contact-manager: role-based access control backend (users, roles, accesses, session tokens)."""

__version__ = "1.0.0"
