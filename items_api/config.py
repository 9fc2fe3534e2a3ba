"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default; the service runs with no environment at all
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - Default database is an embedded SQLite file opened through aiosqlite
    - .env file support for local overrides
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///database.db"
    database_echo: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
