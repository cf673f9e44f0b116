"""
Test-Run Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

WHY Pydantic Settings?
======================
1. Type Safety: Base URL, credentials and timeouts are validated at startup
2. Environment Variables: CI can point the suite at any server
3. .env Support: Local runs read config/dev.env (or .env)
4. Validation: A typo in API_TARGET fails the run before any request is sent

PATTERN: Settings Singleton
===========================
get_settings() is cached with @lru_cache, so the environment is read once per
process. Components never call get_settings() themselves: the fixtures build
the settings object once and hand it to whatever needs it.

Usage:
    from bookcheck.config import get_settings

    settings = get_settings()
    print(settings.base_url)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_TARGETS = {"stub", "live"}


class Settings(BaseSettings):
    """
    Settings for one test run, loaded from environment variables.

    Variable names match the service's own dev.env file (BASE_URL,
    AUTH_USERNAME, AUTH_PASSWORD), so the same file drives both.
    """

    # -------------------------------------------------------------------------
    # Target Server
    # -------------------------------------------------------------------------
    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the Book Library service",
    )
    api_target: str = Field(
        default="stub",
        description="'stub' runs against the in-process service, 'live' against base_url",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------
    auth_username: str = Field(
        default="admin",
        description="Username of the admin account used by authenticated scenarios",
    )
    auth_password: str = Field(
        default="admin123",
        description="Password of the admin account",
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        # Later files take priority over earlier ones
        env_file=("config/dev.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_live(self) -> bool:
        """True when scenarios should hit the real server at base_url."""
        return self.api_target == "live"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("api_target")
    @classmethod
    def validate_api_target(cls, v: str) -> str:
        """Validate api_target is a known value."""
        if v.lower() not in VALID_TARGETS:
            raise ValueError(f"api_target must be one of {VALID_TARGETS}")
        return v.lower()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are always absolute ("/books"), so drop a trailing slash."""
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached test-run settings.

    First call reads the environment and the env files; later calls return the
    same instance. Tests that need different values construct Settings(...)
    directly instead of mutating the cached one.

    Returns:
        Cached Settings instance
    """
    return Settings()
