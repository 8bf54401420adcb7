"""
Application configuration.

Settings are read from environment variables (and an optional ``.env``
file) so that deployments can point the service at a different database
or tune logging without code changes.
"""

from functools import lru_cache
from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Back-office service settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Restaurant Back Office"

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Database Configuration
    database_url: str = "sqlite:///./backoffice.db"
    sql_echo: bool = False
    create_tables_on_startup: bool = True

    # API
    cors_origins: Union[List[str], str] = ["http://localhost:3000"]
    default_page_size: int = 20
    max_page_size: int = 100

    # Floor plan editor
    editor_session_limit: int = 50

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_environments = ["development", "testing", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"environment must be one of {valid_environments}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()
