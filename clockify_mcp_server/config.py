"""
Configuration for the Clockify MCP server.

The configuration is read once at startup and passed to the API client,
so request code never touches the process environment.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from clockify_mcp_server.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"
JSON_INDENT_SPACES = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ClockifyConfig(BaseModel):
    """Connection settings for the Clockify API."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    api_key: str = Field(..., min_length=1, description="Clockify API key sent as X-Api-Key")
    base_url: str = Field(DEFAULT_BASE_URL, description="Base URL of the Clockify REST API")
    log_level: str = Field("INFO", description="Logging level for the server's stderr log")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClockifyConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            ClockifyConfig: The loaded configuration

        Raises:
            ConfigurationError: If CLOCKIFY_API_KEY is missing or a setting is invalid
        """
        if environ is None:
            environ = os.environ

        api_key = (environ.get("CLOCKIFY_API_KEY") or "").strip()
        if not api_key:
            raise ConfigurationError("CLOCKIFY_API_KEY environment variable is required")

        try:
            return cls(
                api_key=api_key,
                base_url=environ.get("CLOCKIFY_API_BASE_URL") or DEFAULT_BASE_URL,
                log_level=environ.get("CLOCKIFY_LOG_LEVEL") or "INFO",
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Clockify configuration: {e}") from e
