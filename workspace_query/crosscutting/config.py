"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults for the workspaces API transport and logging

Collaborators:
  - container.py: reads settings to build the API client
  - crosscutting/logger.py: reads log level and format

Constraints:
  - No business logic — pure configuration
  - Query semantics (page size, predicates) are NOT configurable here

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        workspaces_api_base_url: Base URL of the workspaces REST API
        access_token: Bearer token (acquired outside this tool)
        http_timeout_seconds: Per-request timeout (default: 60)
        app_env: Application environment (development/production)
        log_level: Logging level name (default: INFO)
        log_json: Emit JSON logs (default: True)
    """

    workspaces_api_base_url: str = "https://api.powerbi.com/v1.0/myorg"
    access_token: str = ""
    http_timeout_seconds: float = 60.0

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("workspaces_api_base_url")
    @classmethod
    def base_url_must_be_http(cls, v: str) -> str:
        url = (v or "").strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError("workspaces_api_base_url must be an http(s) URL")
        return url

    @field_validator("http_timeout_seconds")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    @model_validator(mode="after")
    def validate_production_transport(self):
        if not self.is_production():
            return self
        if not self.workspaces_api_base_url.startswith("https://"):
            raise ValueError(
                "WORKSPACES_API_BASE_URL must use https in production"
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        ValidationError: If environment variables are invalid
    """
    return Settings()
