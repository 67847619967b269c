"""Tests for domain exceptions (error_code, message, details)."""

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


def test_base_exception_default_error_code() -> None:
    """Base ContactManagerException uses class name as error_code when not provided."""
    exc = ContactManagerException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ContactManagerException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = ContactManagerException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_invalid_credentials_default_message_is_generic() -> None:
    """Same message for unknown user and wrong password."""
    exc = InvalidCredentialsException()
    assert exc.message == "Invalid username or password"
    assert exc.error_code == "INVALID_CREDENTIALS"


def test_invalid_credentials_custom_message() -> None:
    exc = InvalidCredentialsException("Incorrect old password")
    assert exc.message == "Incorrect old password"
    assert exc.error_code == "INVALID_CREDENTIALS"


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("role", 42)
    assert exc.message == "role not found: 42"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "role", "resource_id": 42}


def test_duplicate_key_includes_resource_type_and_values() -> None:
    exc = DuplicateKeyException("user_role", {"user_id": 1, "role_id": 2})
    assert exc.message == "user_role already exists"
    assert exc.error_code == "DUPLICATE_KEY"
    assert exc.details == {"user_id": 1, "role_id": 2, "resource_type": "user_role"}


def test_no_access_found() -> None:
    exc = NoAccessFoundException(7)
    assert exc.message == "no access found for the user"
    assert exc.error_code == "NO_ACCESS_FOUND"
    assert exc.details == {"user_id": 7}


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"


def test_all_subclass_base() -> None:
    for exc in (
        ValidationException("x"),
        AuthenticationException(),
        InvalidCredentialsException(),
        ResourceNotFoundException("user", 1),
        DuplicateKeyException("role"),
        NoAccessFoundException(1),
        SqlNotConfiguredException(),
    ):
        assert isinstance(exc, ContactManagerException)
