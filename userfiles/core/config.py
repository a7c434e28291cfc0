"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        user_files_path: Directory holding one ``<user_id>.json`` per user.
        host: Interface the HTTP listener binds to.
        port: TCP port the HTTP listener binds to. 0 picks a free port.
        shutdown_grace_seconds: How long in-flight requests may run after
            a stop is requested.
        rate_limit_enabled: Toggle the limiter on rate-limited endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "userfiles"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    user_files_path: Path = Path("/user_files")

    host: str = "0.0.0.0"
    port: int = 80
    shutdown_grace_seconds: float = 5.0

    rate_limit_enabled: bool = True


settings = Settings()
