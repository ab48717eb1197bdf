"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the server starts with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - In-memory store by default: the durable store is opt-in via STORE_BACKEND=json
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ogiri.core.domain_types import StoreBackend

API_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    store_backend: StoreBackend = StoreBackend.MEMORY
    data_file: str = "data/ogiri.json"

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]
    static_dir: str = "static"

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Leading/trailing slashes normalized: api/ and /api/ become /api; empty stays empty."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
