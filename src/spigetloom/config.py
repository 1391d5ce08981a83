# spigetloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, SPIGET_API_BASE_URL


class SpigetSettings(BaseSettings):
    """
    Manages user-configurable settings for the spigetloom client.

    The client never reads the environment by itself: it uses the instance it
    is given, or pure defaults. Applications that want environment-driven
    configuration call `get_settings()`, which loads variables prefixed with
    'SPIGET_' or entries from .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),  # Look in both .env and secrets.env
        env_file_encoding="utf-8",
        # Environment variables should be prefixed, e.g., SPIGET_USER_AGENT
        env_prefix="SPIGET_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,
    )

    base_url: str = Field(
        default=SPIGET_API_BASE_URL,
        description="Base URL of the API, including the versioned path prefix",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Timeout in seconds for the HTTP client created by SpigetClient",
    )


def default_settings() -> SpigetSettings:
    """Returns settings holding only the field defaults, without reading the environment."""
    return SpigetSettings.model_construct()


# Create a single, cached instance of settings
@lru_cache
def get_settings() -> SpigetSettings:
    """
    Provides access to the application settings.

    Settings are loaded from environment variables (prefixed with 'SPIGET_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        SpigetSettings: The application settings instance.
    """
    return SpigetSettings()
