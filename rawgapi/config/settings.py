"""Pydantic Settings for the RAWG client and demo app.

All environment variables use the RAWG_ prefix.
Example: RAWG_API_KEY=abc123, RAWG_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class RawgSettings(BaseSettings):
    """Client and demo configuration validated from environment variables."""

    # API
    api_key: str = Field(..., min_length=1)
    base_url: str = "https://api.rawg.io"

    # Connection pool
    max_connections: int = Field(default=100, ge=1)
    max_keepalive_connections: int = Field(default=20, ge=0)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Demo app
    port: int = 8000
    greeting_name: str = "Android"
    fetch_on_startup: bool = True  # Log the first page of games at startup

    model_config = {"env_prefix": "RAWG_"}
