"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagerduty_api.client import DEFAULT_BASE_URL, DEFAULT_EVENTS_URL, TIMEOUT


class Settings(BaseSettings):
    """Settings from environment variables (``PAGERDUTY_*``) or a .env file."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGERDUTY_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # PagerDuty API
    subdomain: str = Field(
        default="",
        description="PagerDuty account subdomain, e.g. 'acme' for acme.pagerduty.com",
    )
    api_key: str = Field(default="", description="PagerDuty API key")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API base URL template, '{subdomain}' is replaced",
    )
    events_url: str = Field(
        default=DEFAULT_EVENTS_URL,
        description="Events API base URL",
    )
    timeout: float = Field(
        default=TIMEOUT,
        description="API request timeout in seconds",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(
        default=True,
        description=(
            "Use JSON logging format (False for human-readable logs in development)"
        ),
    )
    log_exclude_loggers: str = Field(
        default="httpx,httpcore",
        description=(
            "Comma-separated list of logger names to exclude from DEBUG logging"
        ),
    )
