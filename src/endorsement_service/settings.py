"""
endorsement_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, auth, persistence and paging layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All values can be overridden with `ENDORSE_*` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="ENDORSE_", case_sensitive=False)

    # dev/test create tables on startup and expose the dev token route.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "endorsement-service"
    log_level: str = "INFO"
    # JSON lines for log shipping; set false for console output while developing.
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "maritime-identity"
    jwt_audience: str = "endorsement-api"
    jwt_secret: str = Field(default="dev-only-endorsement-secret-change-me", repr=False)
    org_claim: str = "org"
    site_admin_role: str = "site_admin"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./endorsements.db"

    # Paging
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=1000, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()
