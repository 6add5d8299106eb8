# hopp/cli/core/config.py
"""
Central configuration for the CLI core.

Environment variables override defaults, so the workspace server and the
access-token route can be pointed at a self-hosted instance without code
changes.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # Workspace server used when a resource is fetched with an access token
    hopp_server_url: str = Field(
        default="https://api.hoppscotch.io",
        description="Base URL of the Hoppscotch backend",
    )
    hopp_access_tokens_path: str = Field(
        default="v1/access-tokens",
        description="Route prefix of the access-token resource endpoints",
    )
    http_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Template resolution
    env_expand_limit: int = Field(
        default=10,
        description="Maximum nested template expansion passes",
    )

    # Reporting
    duration_precision: int = 3


settings = Settings()
