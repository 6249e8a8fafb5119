"""Configuration module for wp-abilities-mcp using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wp_abilities_mcp.errors import ConfigurationError

REQUIRED_ENV_VARS = (
    "WORDPRESS_URL",
    "WORDPRESS_USERNAME",
    "WORDPRESS_APP_PASSWORD",
)


class WordPressMcpSettings(BaseSettings):
    """Main configuration settings for wp-abilities-mcp.

    All settings can be overridden via environment variables with the
    WORDPRESS_ prefix. For example, WORDPRESS_URL sets the url setting.
    The site URL and both credentials have no default and must be provided.
    """

    # WordPress site
    url: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    app_password: str = Field(..., min_length=1)

    # Abilities API
    cache_ttl_seconds: float = 60.0
    per_page: int = 100
    request_timeout_seconds: float = 30.0
    exact_tool_names: bool = False

    # Transport
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="WORDPRESS_")

    @property
    def base_url(self) -> str:
        """Get the site URL without a trailing slash."""
        return self.url.rstrip("/")

    @property
    def abilities_api_base(self) -> str:
        """Get the base URL of the wp-abilities/v1 REST namespace."""
        return f"{self.base_url}/wp-json/wp-abilities/v1"


def load_settings(**overrides) -> WordPressMcpSettings:
    """Load settings from the environment, applying explicit overrides.

    Raises:
        ConfigurationError: If a required setting is missing or invalid.
    """
    try:
        return WordPressMcpSettings(**overrides)
    except ValidationError as e:
        missing = [
            f"WORDPRESS_{'.'.join(str(part) for part in error['loc']).upper()}"
            for error in e.errors()
        ]
        raise ConfigurationError(
            "Missing or invalid configuration: "
            + ", ".join(missing)
            + f" (required: {', '.join(REQUIRED_ENV_VARS)})"
        ) from e


@lru_cache
def get_settings() -> WordPressMcpSettings:
    """Get the cached application settings instance."""
    return load_settings()
