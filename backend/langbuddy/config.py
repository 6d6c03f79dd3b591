"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), one instance per process
    - The store port is fixed (DB_PORT); only host, user, password and name are configurable

Design Decisions:
    - Variable names match the existing deployment: PORT, DB_HOST, DB_USER, DB_PASS, DB_NAME
    - DATABASE_URL, when set, wins over the assembled URL (hosted Postgres, test SQLite)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DB_PORT = 5432


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # HTTP
    port: int = 3000

    # Database
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_pass: str = ""
    db_name: str = "langbuddy"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def store_url(self) -> str:
        """Connection URL for the relational store."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_pass}"
            f"@{self.db_host}:{DB_PORT}/{self.db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
