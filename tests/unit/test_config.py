"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from contact_manager.core.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "k")
    monkeypatch.delenv("ENFORCE_ROLE_EXPIRY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.algorithm == "HS256"
    assert settings.access_token_expire_minutes == 1440
    assert settings.enforce_role_expiry is True


def test_database_url_required(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("SECRET_KEY", "k")
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(_env_file=None)


def test_secret_key_required(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(_env_file=None)


def test_token_lifetime_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "k")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
