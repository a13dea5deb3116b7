"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")
    service_name: str = Field(default="User Service", alias="SERVICE_NAME")
    port: int = Field(default=8082, alias="PORT", ge=1, le=65535)

    # Database
    database_url: str = Field(default="sqlite:///./users.db", alias="DATABASE_URL")

    # Admin panel (disabled unless all three are set)
    session_secret_key: str | None = Field(default=None, alias="SESSION_SECRET_KEY")
    admin_username: str | None = Field(default=None, alias="ADMIN_USERNAME")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def admin_enabled(self) -> bool:
        """Whether the SQLAdmin panel should be mounted."""
        return bool(
            self.session_secret_key and self.admin_username and self.admin_password
        )

    @computed_field
    @property
    def health_message(self) -> str:
        """Plain-text body returned by the service health endpoint."""
        return f"{self.service_name} is running on port {self.port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
