"""
Configuration Settings

This module defines client configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- The API key is optional here; the client refuses to start without one
- Timeouts belong to the HTTP transport, so they are configured here and
  passed to the httpx client rather than enforced by the client itself
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["API_VERSION", "DEFAULT_API_URL", "Settings", "settings"]

API_VERSION = "v1"
DEFAULT_API_URL = f"https://www.googleapis.com/urlshortener/{API_VERSION}/url"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    SHORTENER_API_KEY: Optional[str] = Field(
        default=None,
        description="API key sent with shorten requests"
    )
    SHORTENER_API_URL: str = Field(
        default=DEFAULT_API_URL,
        description="Base endpoint of the URL shortener API"
    )

    # Transport Configuration
    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for each HTTP request"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )


settings = Settings()
