"""
Package configuration.

Loads settings from environment variables and .env file.
Values here are defaults for install_http_exceptions and the demo app;
explicit arguments passed at install time always win.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment.

    Attributes:
        project_name: Display name for the demo API.
        version: Current version string.
        debug: Enable debug mode (docs endpoints). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        package_log_level: Level for the package's own loggers; defaults to log_level.
        log_unhandled: Log exceptions the recovery middleware does not recognize.
        host: Interface the demo server binds to.
        port: Port the demo server binds to.
        rate_limit_default: Default rate limit for demo endpoints.
        rate_limit_heavy: Rate limit for the demo's throttled endpoint.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "fastapi-http-exceptions demo"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    package_log_level: str | None = None
    log_unhandled: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "5/minute"


settings = Settings()
