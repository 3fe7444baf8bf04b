"""Dependency injection container for the Fornost CLI.

Manages settings loading and object wiring across the CLI layers.

Design principles:
- Singleton instances for infrastructure (settings, transport, client)
- Lazy initialization: the token is only required once a client is needed
- Easy to mock for testing

Factory functions:
- get_settings(): Load and cache settings
- get_transport(): Create and cache HTTP transport
- get_client(): Create and cache the resource client
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fornost_cli.client import HetznerClient
from fornost_cli.transport.http import HttpTransport

TOKEN_ENV_VAR = "HETZNER_API_TOKEN"


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""

    pass


def dotenv_path() -> Path:
    """Return the dotenv file to read.

    ``~/.dotfiles/.env`` when it exists, otherwise ``.env`` in the current
    working directory.
    """
    dotfile = Path.home() / ".dotfiles" / ".env"
    if dotfile.is_file():
        return dotfile
    return Path(".env")


class Settings(BaseSettings):
    """Fornost CLI settings.

    Precedence (highest to lowest):
    1. Environment variables
    2. Dotenv file (see ``dotenv_path``)
    3. Defaults

    Environment variables:
    - HETZNER_API_TOKEN (or FORNOST_API_TOKEN): API token
    - FORNOST_LOG_LEVEL: Log level (default: WARNING)
    - FORNOST_LOG_FORMAT: Log renderer, console or json (default: console)

    Attributes:
        api_token: Hetzner Cloud API token
        log_level: Log level name
        log_format: Log renderer
    """

    api_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(TOKEN_ENV_VAR, "FORNOST_API_TOKEN"),
    )
    log_level: str = Field(default="WARNING")
    log_format: Literal["console", "json"] = Field(default="console")

    model_config = SettingsConfigDict(
        env_prefix="FORNOST_",
        case_sensitive=False,
        extra="ignore",
    )


# Global container state for testing/mocking
_overrides: dict[str, Any] = {}


def set_override(key: str, value: Any) -> None:
    """Override a container dependency for testing.

    Args:
        key: Dependency key ("settings", "transport" or "client")
        value: Mock or test implementation

    Example:
        >>> set_override("client", Mock(spec=HetznerClient))
        >>> client = get_client()  # Returns mock
        >>> reset_container()
    """
    _overrides[key] = value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from the environment and dotenv file."""
    if "settings" in _overrides:
        return _overrides["settings"]

    return Settings(_env_file=dotenv_path())  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_transport() -> HttpTransport:
    """Create and cache the authenticated HTTP transport.

    Raises:
        ConfigurationError: If no API token is configured
    """
    if "transport" in _overrides:
        return _overrides["transport"]

    settings = get_settings()
    if not settings.api_token:
        raise ConfigurationError(
            f"{TOKEN_ENV_VAR} must be set in ~/.dotfiles/.env or .env"
        )
    return HttpTransport(settings.api_token)


@lru_cache(maxsize=1)
def get_client() -> HetznerClient:
    """Create and cache the resource client.

    Raises:
        ConfigurationError: If no API token is configured
    """
    if "client" in _overrides:
        return _overrides["client"]

    return HetznerClient(get_transport())


def reset_container() -> None:
    """Clear all caches and overrides. Call in test teardown."""
    _overrides.clear()
    get_settings.cache_clear()
    get_transport.cache_clear()
    get_client.cache_clear()


def close_transport() -> None:
    """Close the cached HTTP transport if one was created.

    Overridden transports belong to the caller and are left open.
    """
    if "transport" in _overrides or get_transport.cache_info().currsize == 0:
        return
    get_transport().close()
    get_transport.cache_clear()
    get_client.cache_clear()
