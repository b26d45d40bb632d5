"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

PATTERN: Settings Singleton
===========================
We create a single Settings instance that's cached using @lru_cache.
This ensures:
- Configuration is loaded once at startup
- All parts of the app use the same configuration
- No repeated file I/O for .env loading

Usage:
    from library_api.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from library_api.seed import SEED_DATASETS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Library GraphQL API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=4000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # GraphQL Settings
    # -------------------------------------------------------------------------
    graphql_ide: Optional[str] = Field(
        default="graphiql",
        description="In-browser IDE served at /graphql: graphiql, apollo-sandbox or none"
    )
    seed_dataset: str = Field(
        default="default",
        description="Seed dataset loaded at startup and restored by resetData"
    )
    default_page_size: int = Field(
        default=2,
        ge=0,
        description="Page size used by booksPaginated when `first` is omitted"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()

    @field_validator("graphql_ide")
    @classmethod
    def validate_graphql_ide(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the IDE choice; "none" disables the playground."""
        if v is None or v.lower() in {"", "none"}:
            return None
        valid_ides = {"graphiql", "apollo-sandbox"}
        if v.lower() not in valid_ides:
            raise ValueError(f"graphql_ide must be one of {valid_ides} or 'none'")
        return v.lower()

    @field_validator("seed_dataset")
    @classmethod
    def validate_seed_dataset(cls, v: str) -> str:
        """Validate the seed dataset name against the known datasets."""
        if v.lower() not in SEED_DATASETS:
            raise ValueError(f"seed_dataset must be one of {set(SEED_DATASETS)}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    First call creates the Settings instance and loads .env; subsequent
    calls return the cached instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
