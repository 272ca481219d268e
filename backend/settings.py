"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.local_store_path)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from application.timers import REST_CHOICES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Supabase
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL; remote sync is disabled when unset",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (used for auth flows)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    @property
    def supabase_auth_key(self) -> Optional[str]:
        """Key for the auth client (anon preferred)."""
        return self.supabase_anon_key or self.supabase_service_role_key

    @property
    def remote_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    # -------------------------------------------------------------------------
    # Local Store
    # -------------------------------------------------------------------------
    local_store_path: str = Field(
        default="~/.dreamshape/store.json",
        description="JSON file holding the local key-value store",
    )

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------
    signup_invite_code: Optional[str] = Field(
        default=None,
        description="Shared invite code required to sign up (disabled when unset)",
    )
    creator_emails: str = Field(
        default="",
        description="Comma-separated emails that sign up with the creator role",
    )

    @property
    def creator_emails_list(self) -> list[str]:
        """Parse creator emails into a list."""
        return [e.strip().lower() for e in self.creator_emails.split(",") if e.strip()]

    # -------------------------------------------------------------------------
    # Workout Session
    # -------------------------------------------------------------------------
    default_rest_seconds: int = Field(
        default=90,
        gt=0,
        description="Rest countdown used when an exercise has no override",
    )
    remote_push_workers: int = Field(
        default=2,
        ge=1,
        description="Threads used for fire-and-forget remote writes",
    )

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated extra CORS origins",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("default_rest_seconds")
    @classmethod
    def validate_default_rest(cls, v: int) -> int:
        """Rest countdowns are limited to the choices offered in a session."""
        if v not in REST_CHOICES:
            raise ValueError(f"Invalid default_rest_seconds {v}. Must be one of: {REST_CHOICES}")
        return v

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
