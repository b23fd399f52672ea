"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Supports SQLite (default) and PostgreSQL databases.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "RESTful CRUD API"
    DEBUG: bool = False

    # Logging Config
    # Overrides the level derived from DEBUG for the application loggers
    LOG_LEVEL: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = None
    # Level for SQLAlchemy engine logs (statements are logged at INFO)
    SQL_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Database Config
    # Supports "sqlite" or "postgresql"
    DATABASE_TYPE: Literal["sqlite", "postgresql"] = "sqlite"
    # SQLite default database path, PostgreSQL requires full connection string
    DATABASE_URL: str = "sqlite+aiosqlite:///./restful_crud.db"

    # API Versioning Config
    # Comma-separated list of versions accepted in the /api/{entity}/v{version} path
    API_VERSIONS: str = "1"

    # Paged Search Config
    # Page size used when the requested page size is not positive
    DEFAULT_PAGE_SIZE: int = 10

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:3000,https://example.com"
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def log_level(self) -> str:
        """Effective application log level"""
        return self.LOG_LEVEL or ("DEBUG" if self.DEBUG else "INFO")

    @property
    def supported_api_versions(self) -> list[str]:
        """Parsed API_VERSIONS"""
        return [v.strip() for v in self.API_VERSIONS.split(",") if v.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
