"""Unit tests for request ID sanitization."""

import uuid

from contact_manager.middleware.request_id import REQUEST_ID_MAX_LENGTH, sanitize_request_id


def test_valid_id_is_kept() -> None:
    assert sanitize_request_id("abc-123_DEF") == "abc-123_DEF"


def test_surrounding_whitespace_is_stripped() -> None:
    assert sanitize_request_id("  abc-123  ") == "abc-123"


def test_missing_id_is_generated() -> None:
    generated = sanitize_request_id(None)
    assert uuid.UUID(generated)


def test_unsafe_characters_replaced() -> None:
    generated = sanitize_request_id("abc\nInjected: log line")
    assert "\n" not in generated
    assert uuid.UUID(generated)


def test_too_long_replaced() -> None:
    generated = sanitize_request_id("a" * (REQUEST_ID_MAX_LENGTH + 1))
    assert uuid.UUID(generated)
