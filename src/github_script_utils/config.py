"""Configuration for scripts using the helpers.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Inside a GitHub Actions run the standard `GITHUB_*` runner variables are picked
up directly. A dedicated `GITHUB_SCRIPT_UTILS_TOKEN` takes precedence over the
workflow's `GITHUB_TOKEN` so a script can act with a different identity.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the REST client and logging.

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `Settings(_env_file=path_to_env)`.
    """

    github_token: str = Field(
        default="",
        validation_alias=AliasChoices("GITHUB_SCRIPT_UTILS_TOKEN", "GITHUB_TOKEN"),
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_API_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="GITHUB_REQUEST_TIMEOUT",
        description="Per-request timeout in seconds",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    def require_token(self) -> str:
        if not self.github_token.strip():
            raise ValueError("GITHUB_SCRIPT_UTILS_TOKEN or GITHUB_TOKEN is required")
        return self.github_token


class ActionsSettings(BaseSettings):
    """GitHub Actions runner variables describing the current workflow run."""

    event_name: str = Field(default="", validation_alias="GITHUB_EVENT_NAME")
    ref: str = Field(default="", validation_alias="GITHUB_REF")
    sha: str = Field(default="", validation_alias="GITHUB_SHA")
    repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")
    server_url: str = Field(default="https://github.com", validation_alias="GITHUB_SERVER_URL")
    api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")
    event_path: Path | None = Field(default=None, validation_alias="GITHUB_EVENT_PATH")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )
