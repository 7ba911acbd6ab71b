"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """Hoots backend configuration."""

    # Backend origin, without the resource prefix
    host: str = "localhost"
    port: int = 3000
    protocol: Literal["http", "https"] = "http"

    # Request timeout in seconds, applied to every call
    timeout: float = 30.0

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct the backend base URL.

        In development: http://localhost:3000
        In production: https://api.hoots.app (standard ports)
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            return f"{self.protocol}://{self.host}"


class SessionSettings(BaseModel):
    """Persisted session configuration."""

    # Where the signed-in user's token is kept between runs
    token_path: Path | None = Path.home() / ".hoots" / "token"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override:

    Development (default):
        ENVIRONMENT=development
        API__HOST=localhost
        API__PORT=3000
        -> Backend: http://localhost:3000

    Production:
        ENVIRONMENT=production
        API__HOST=api.hoots.app
        -> Backend: https://api.hoots.app
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__HOST syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    api: ApiSettings = ApiSettings()
    session: SessionSettings = SessionSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def enforce_https_outside_development(self) -> "Settings":
        """Force https for every environment except test and development."""
        if self.environment not in ("test", "development"):
            self.api = self.api.model_copy(update={"protocol": "https"})
        return self
