"""Catalog Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from the environment; the default targets docker-compose
    - 1 <= default_page_limit <= max_page_limit, checked at startup
    - log_format is "json" or "text"
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - service_name and version feed both the OpenAPI metadata and the liveness check
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Artist catalog settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://catalog:catalog@db:5432/catalog"
    )
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Listing
    default_page_limit: int = 10
    max_page_limit: int = 100

    @model_validator(mode="after")
    def check_page_limits(self):
        if not 1 <= self.default_page_limit <= self.max_page_limit:
            raise ValueError(
                "default_page_limit must be between 1 and max_page_limit "
                f"({self.default_page_limit} > {self.max_page_limit})"
            )
        return self

    # Service identity
    service_name: str = "Artist Catalog API"
    version: str = "1.0.0"

    # HTTP
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
