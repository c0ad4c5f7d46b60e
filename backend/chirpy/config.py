"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All deployment-specific values come from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process
    - Admin reset is only enabled when platform == "dev"

Design Decisions:
    - DB_URL accepted as an alias of DATABASE_URL: existing .env files use DB_URL
    - Defaults provided for everything: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_PLATFORM = "dev"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str = Field(
        "postgresql+asyncpg://chirpy:chirpy@db:5432/chirpy",
        validation_alias=AliasChoices("database_url", "db_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Deployment
    platform: str = "production"

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080
    # idle keep-alive connections only; requests themselves are not time-limited
    keep_alive_timeout_seconds: int = 30
    filepath_root: str = "."

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_dev(self) -> bool:
        return self.platform.lower() == DEV_PLATFORM


@lru_cache
def get_settings() -> Settings:
    return Settings()
