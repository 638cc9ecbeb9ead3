"""
Application settings loaded from environment variables.
Uses pydantic-settings for type-safe configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with defaults for development."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./crud_api.db"
    database_echo: bool = False  # Log every SQL statement (development only)

    # HTTP
    api_prefix: str = "/api"
    rest_api_port: int = 8000
    # Comma-separated list of allowed origins (empty uses default localhost list)
    allowed_origins: str = ""

    # Startup behaviour
    auto_create_tables: bool = True
    seed_on_startup: bool = False

    # Environment
    environment: str = "development"
    debug: bool = True

    def validate_production_settings(self) -> list[str]:
        """
        Validate that the configuration is safe for production.
        Returns a list of validation errors. Empty list means all checks pass.
        """
        errors = []

        if self.environment == "production":
            if self.debug:
                errors.append("DEBUG must be False in production")

            if not self.allowed_origins:
                errors.append(
                    "ALLOWED_ORIGINS must be set in production (comma-separated list of allowed domains)"
                )

            if self.database_url.startswith("sqlite"):
                errors.append("DATABASE_URL must point to a server database in production")

        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience exports
settings = get_settings()

DATABASE_URL = settings.database_url
