"""
Configuration management for esimqa.

This module provides configuration loading from environment variables
and an optional TOML file, with type-safe settings classes. Credentials
are only ever read from here; test modules never hard-code them.
"""

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError

SANDBOX_API_URL = "https://sandbox-partners-api.airalo.com/v2/"
STOREFRONT_URL = "https://www.airalo.com"


class ApiSettings(BaseSettings):
    """Partner API configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="ESIMQA_API_",
        extra="ignore",
    )

    base_url: str = Field(
        default=SANDBOX_API_URL, description="Partner API base URL"
    )
    client_id: Optional[str] = Field(None, description="OAuth client id")
    client_secret: Optional[SecretStr] = Field(
        None, description="OAuth client secret"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the URL scheme and make sure paths can be appended."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v if v.endswith("/") else v + "/"

    @property
    def has_credentials(self) -> bool:
        """True when both halves of the client credentials are set."""
        return bool(self.client_id) and self.client_secret is not None \
            and bool(self.client_secret.get_secret_value())


class WebSettings(BaseSettings):
    """Storefront and browser configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="ESIMQA_WEB_",
        extra="ignore",
    )

    base_url: str = Field(default=STOREFRONT_URL, description="Storefront URL")
    country: str = Field(default="Japan", description="Country to search for")
    browser: str = Field(default="chromium", description="Browser engine")
    headless: bool = Field(default=True, description="Run the browser headless")
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay in ms")
    timeout: int = Field(
        default=30000, gt=0, description="Default action timeout in ms"
    )
    viewport_width: int = Field(default=1280, gt=0)
    viewport_height: int = Field(default=720, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the storefront URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("browser")
    @classmethod
    def validate_browser(cls, v: str) -> str:
        """Validate the browser engine name."""
        valid = ["chromium", "firefox", "webkit"]
        v_lower = v.lower()
        if v_lower not in valid:
            raise ValueError(f"Browser must be one of: {', '.join(valid)}")
        return v_lower


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="ESIMQA_LOG_",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ESIMQA_",
        extra="ignore",
    )

    live: bool = Field(
        default=False, description="Run tests against the live sites"
    )

    # Sub-settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    web: WebSettings = Field(default_factory=WebSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError(str(path))

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="config_file",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            ) from e

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        Create settings from a dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            Settings instance.
        """
        settings_kwargs: dict[str, Any] = {}

        if "suite" in data:
            settings_kwargs.update(data["suite"])

        if "api" in data:
            settings_kwargs["api"] = ApiSettings(**data["api"])

        if "web" in data:
            settings_kwargs["web"] = WebSettings(**data["web"])

        if "logging" in data:
            settings_kwargs["logging"] = LoggingSettings(**data["logging"])

        return cls(**settings_kwargs)

    def validate_api_credentials(self) -> None:
        """
        Validate that the client credentials are present.

        Raises:
            MissingConfigError: If the client id or secret is missing.
        """
        if not self.api.client_id:
            raise MissingConfigError("ESIMQA_API_CLIENT_ID")
        if not self.api.has_credentials:
            raise MissingConfigError("ESIMQA_API_CLIENT_SECRET")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings.

    Settings come from ESIMQA_CONFIG_FILE when it points to an existing
    TOML file, otherwise from the environment.

    Returns:
        Settings instance.
    """
    config_file = os.getenv("ESIMQA_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        settings = Settings.from_toml(config_file)
    else:
        settings = Settings()

    return settings


def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings instance.
    """
    get_settings.cache_clear()
    return get_settings()
