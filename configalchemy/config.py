# -*- coding: utf-8 -*-
"""Location: ./configalchemy/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

ConfigAlchemy Configuration.
This module defines configuration settings for ConfigAlchemy using Pydantic.
It loads configuration from environment variables with sensible defaults.

Environment variables:
- APP_NAME: Service name (default: "ConfigAlchemy")
- HOST: Host to bind to (default: "127.0.0.1")
- PORT: Port to listen on (default: 8787)
- LOG_LEVEL: Logging level (default: "INFO")
- LOG_FORMAT: "json" or "text" (default: "json")
- MAX_CONTENT_BYTES: Size ceiling for submitted content (default: 1048576)
- API_KEY: When set, POST /convert requires this value in API_KEY_HEADER (default: unset)
- API_KEY_HEADER: Header carrying the API key (default: "X-API-Key")
- CORS_ENABLED: Add CORS middleware (default: False)
- ALLOWED_ORIGINS: JSON array or comma-separated origins for CORS

Examples:
    >>> from configalchemy.config import Settings
    >>> s = Settings(log_level="debug")
    >>> s.log_level
    'DEBUG'
    >>> s.max_content_bytes
    1048576
    >>> s.auth_enabled
    False
    >>> Settings(api_key="k").auth_enabled
    True
"""

# Standard
from functools import lru_cache
import logging
import sys
from typing import Annotated, Any, Literal, Optional, Set

# Third-Party
import orjson
from pydantic import Field, field_validator, PositiveInt, SecretStr
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

# Fixed ceiling for submitted content
DEFAULT_MAX_CONTENT_BYTES = 1024 * 1024


class Settings(BaseSettings):
    """
    ConfigAlchemy configuration settings.

    Examples:
        >>> s = Settings()
        >>> s.app_name
        'ConfigAlchemy'
        >>> s.port
        8787
        >>> s.api_key_header
        'X-API-Key'
        >>> isinstance(s.allowed_origins, set)
        True
    """

    # Basic Settings
    app_name: str = "ConfigAlchemy"
    host: str = "127.0.0.1"
    port: PositiveInt = Field(default=8787, ge=1, le=65535)
    app_root_path: str = ""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text"] = "json"  # json or text

    # Conversion
    max_content_bytes: PositiveInt = Field(default=DEFAULT_MAX_CONTENT_BYTES, description="Largest accepted content, measured in UTF-8 bytes")

    # Caller identity (normally enforced by an API gateway in front of the service)
    api_key: Optional[SecretStr] = Field(default=None, description="Shared secret required on POST /convert when set")
    api_key_header: str = Field(default="X-API-Key", description="Header carrying the API key")

    # CORS
    cors_enabled: bool = False
    # Tell pydantic *not* to touch this env var - our validator will.
    allowed_origins: Annotated[Set[str], NoDecode] = {
        "http://localhost",
        "http://localhost:8787",
    }

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level value.

        The value is uppercased before validation so that "debug", "Debug",
        etc. are all accepted as "DEBUG".

        Args:
            v (str): The log level string provided via configuration or environment.

        Returns:
            str: The validated and normalized (uppercase) log level.

        Raises:
            ValueError: If the provided value is not one of
                {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}.

        Examples:
            >>> Settings.validate_log_level("warning")
            'WARNING'
            >>> try:
            ...     Settings.validate_log_level("loud")
            ... except ValueError as e:
            ...     print(e)
            Invalid log_level: loud
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_up = v.upper()
        if v_up not in allowed:
            raise ValueError(f"Invalid log_level: {v}")
        return v_up

    @field_validator("api_key", mode="before")
    @classmethod
    def _empty_api_key_is_unset(cls, v: Any) -> Any:
        """Treat an empty API_KEY as not configured.

        Args:
            v: Raw value.

        Returns:
            Any: ``None`` for blank strings, otherwise ``v``.

        Examples:
            >>> Settings._empty_api_key_is_unset("  ") is None
            True
            >>> Settings._empty_api_key_is_unset("abc")
            'abc'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_allowed_origins(cls, v: Any) -> Set[str]:
        """Parse allowed origins from environment variable or config value.

        Handles a JSON array string, a comma-separated string or an already
        parsed set/list. Strips whitespace and one pair of outer quotes.

        Args:
            v: The input value to parse.

        Returns:
            Set[str]: A set of allowed origin strings.

        Examples:
            >>> sorted(Settings._parse_allowed_origins('["https://a.com", "https://b.com"]'))
            ['https://a.com', 'https://b.com']
            >>> sorted(Settings._parse_allowed_origins("https://x.com , https://y.com"))
            ['https://x.com', 'https://y.com']
            >>> Settings._parse_allowed_origins('""')
            set()
            >>> Settings._parse_allowed_origins({'http://existing.com'})
            {'http://existing.com'}
        """
        if isinstance(v, str):
            v = v.strip()
            if v[:1] in "\"'" and v[-1:] == v[:1]:  # strip 1 outer quote pair
                v = v[1:-1]
            try:
                parsed = set(orjson.loads(v))
            except orjson.JSONDecodeError:
                parsed = {s.strip() for s in v.split(",") if s.strip()}
            return parsed
        return set(v)

    @property
    def auth_enabled(self) -> bool:
        """Whether POST /convert requires an API key.

        Returns:
            bool: True when ``api_key`` is configured.
        """
        return self.api_key is not None

    def log_summary(self) -> None:
        """
        Log a summary of the application settings.

        The API key is excluded so the secret never reaches the logs.
        """
        summary = self.model_dump(exclude={"api_key"})
        logger.info(f"Application settings summary: {summary}")


@lru_cache()
def get_settings(**kwargs: Any) -> Settings:
    """Get cached settings instance.

    Args:
        **kwargs: Keyword arguments to pass to the Settings setup.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> settings is get_settings()
        True
    """
    return Settings(**kwargs)


def generate_settings_schema() -> dict[str, Any]:
    """
    Return the JSON Schema describing the Settings model.

    Returns:
        dict: A dictionary representing the JSON Schema of the Settings model.
    """
    return Settings.model_json_schema(mode="validation")


# Lazy "instance" of settings
class LazySettingsWrapper:
    """Lazily initialize settings singleton on getattr"""

    def __getattr__(self, key: str) -> Any:
        """Get the real settings object and forward to it

        Args:
            key: The key to fetch from settings

        Returns:
            Any: The value of the attribute on the settings
        """
        return getattr(get_settings(), key)


settings = LazySettingsWrapper()


if __name__ == "__main__":
    if "--schema" in sys.argv:
        schema = generate_settings_schema()
        print(orjson.dumps(schema, option=orjson.OPT_INDENT_2).decode())
        sys.exit(0)
    settings.log_summary()
