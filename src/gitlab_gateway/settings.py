"""
gitlab_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, logging and GitLab client layers.
- Hide secrets from repr/logging (the GitLab administrator token).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GITLAB_GATEWAY_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "gitlab-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # GitLab
    gitlab_url: str = "http://localhost"
    gitlab_admin_token: str = Field(default="", repr=False)
    gitlab_ssl_verify: bool = True
    gitlab_timeout: float = 30.0

    # Project conventions
    default_branch: str = "develop"
    source_branch: str = "master"

    # Status used for every named gateway error.
    error_status_code: int = Field(default=500, ge=400, le=599)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The admin token is the only credential the gateway holds; callers are
# impersonated per request (see `gitlab_clients.factory`).
