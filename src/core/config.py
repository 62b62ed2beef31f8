"""Application configuration management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Supabase credentials are only required when the Supabase storage
    backend is selected.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="profile-directory", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    # Storage
    storage_backend: Literal["memory", "supabase"] = Field(
        default="memory",
        description="Profile store backend (memory or supabase)",
    )
    seed_sample_profiles: bool = Field(
        default=True,
        description="Insert the sample profiles at startup when the store is empty",
    )

    # Supabase
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_secret_key: str = Field(default="", description="Supabase secret key for backend operations")

    # Requests
    max_request_body_size: int = Field(
        default=1024 * 1024,
        description="Maximum accepted request body size in bytes",
    )

    @model_validator(mode="after")
    def require_supabase_credentials(self) -> "Settings":
        """Reject a Supabase backend without a URL and secret key."""
        if self.storage_backend == "supabase":
            missing = [
                name
                for name in ("supabase_url", "supabase_secret_key")
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(
                    f"storage_backend=supabase requires {', '.join(missing)}"
                )
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
