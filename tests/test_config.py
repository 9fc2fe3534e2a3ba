"""Settings: defaults, environment overrides, validation, caching."""

import pytest
from pydantic import ValidationError

from items_api.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "DATABASE_URL", "DATABASE_ECHO", "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///database.db"
    assert settings.database_echo is False
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///other.db")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.port == 9001
    assert settings.database_url == "sqlite+aiosqlite:///other.db"
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(clean_env):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
