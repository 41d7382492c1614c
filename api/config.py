"""
Configuration and settings for the CI/CD demo service.

The settings are loaded from environment variables using pydantic-settings.
Aliases keep the variable names the deployment platform already exports
(``NODE_ENV``, ``PORT``), so existing pipeline configuration keeps working.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    # Raw NODE_ENV value; ``None`` when the variable is unset.
    node_env: Optional[str] = Field(default=None, alias="NODE_ENV")

    # Listener configuration
    port: int = Field(default=3000, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="HOST")
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    # Descriptive labels echoed by the informational endpoints
    service_name: str = Field(default="CI/CD Demo App", alias="SERVICE_NAME")
    api_name: str = Field(default="CI/CD Demo API", alias="API_NAME")
    version: str = Field(default="1.0.0", alias="APP_VERSION")
    deployment: str = Field(default="Railway", alias="DEPLOYMENT_LABEL")

    # CORS settings (comma-separated list)
    allowed_headers: str = Field(
        default="Origin, X-Requested-With, Content-Type, Accept",
        alias="CORS_ALLOW_HEADERS",
    )

    # Simulated work for the /performance endpoint
    performance_delay_ms: int = Field(default=100, alias="PERFORMANCE_DELAY_MS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",         # ignore unknown env vars instead of erroring
        populate_by_name=True,  # allow using field names as well as aliases
    )

    @property
    def environment(self) -> str:
        """Effective environment name, falling back to ``development``."""
        return self.node_env or "development"

    @property
    def allowed_header_list(self) -> List[str]:
        return [h.strip() for h in self.allowed_headers.split(",") if h.strip()]


settings = Settings()
