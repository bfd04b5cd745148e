# nordigen/config.py
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEZONE, DEFAULT_USER_AGENT, NORDIGEN_API_BASE_URL
from .exceptions import ConfigurationError


class NordigenSettings(BaseSettings):
    """
    Manages user-configurable settings for the nordigen client, loaded from
    environment variables (prefixed with 'NORDIGEN_') or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="NORDIGEN_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=NORDIGEN_API_BASE_URL,
        description="Versioned base URL of the Nordigen API",
    )
    secret_id: str | None = Field(
        default=None, description="Secret ID issued in the Nordigen user portal"
    )
    secret_key: str | None = Field(
        default=None, description="Secret key issued in the Nordigen user portal"
    )

    request_timeout: float = Field(
        default=30.0, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA time zone used for date-times the API sends without an offset",
    )

    def zone(self) -> ZoneInfo:
        """Resolves the configured time zone name."""
        return resolve_zone(self.timezone)


def resolve_zone(name: str) -> ZoneInfo:
    """Looks up an IANA time zone by name.

    Raises:
        ConfigurationError: If no time zone with that name is available.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown time zone: {name!r}") from e


@lru_cache
def get_settings() -> NordigenSettings:
    """
    Provides access to the nordigen settings.

    Settings are loaded from environment variables or .env/secrets.env files.
    The instance is cached for performance.

    Returns:
        NordigenSettings: The settings instance.
    """
    return NordigenSettings()
