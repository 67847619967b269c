"""Domain exceptions for the contact-manager RBAC backend.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ContactManagerException(Exception):
    """Base exception for all contact-manager errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ContactManagerException):
    """Raised when input validation fails (e.g. missing or malformed field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(ContactManagerException):
    """Raised when a session token is missing, malformed, or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidCredentialsException(ContactManagerException):
    """Raised when a username/password pair does not verify.

    The default message is shared by the unknown-username and wrong-password
    paths so a caller cannot tell which one failed.
    """

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message, "INVALID_CREDENTIALS")


class ResourceNotFoundException(ContactManagerException):
    """Raised when a requested resource is absent or a mutation affected no rows."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'role').
            resource_id: The key that was not found (int or composite string).
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateKeyException(ContactManagerException):
    """Raised on a unique-constraint violation (name or composite key already exists)."""

    def __init__(self, resource_type: str, details_extra: dict[str, Any] | None = None) -> None:
        """Initialize with resource type and the colliding values.

        Args:
            resource_type: Type of resource (e.g. 'role', 'user_role').
            details_extra: Optional extra keys (e.g. name, user_id, role_id).
        """
        details = dict(details_extra or {})
        details["resource_type"] = resource_type
        super().__init__(
            f"{resource_type} already exists",
            "DUPLICATE_KEY",
            details,
        )


class NoAccessFoundException(ContactManagerException):
    """Raised when a user's role/access join yields no access at all.

    A domain signal, not a system failure: callers catch it to treat
    "no access" differently from a storage error.
    """

    def __init__(self, user_id: int) -> None:
        super().__init__(
            "no access found for the user",
            "NO_ACCESS_FOUND",
            {"user_id": user_id},
        )


class SqlNotConfiguredException(ContactManagerException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
