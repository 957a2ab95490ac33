"""Pydantic Settings for api_kit initialization.

All environment variables use the API_KIT_ prefix.
Example: API_KIT_BASE_URL=https://api.example.com, API_KIT_MAX_REDIRECTS=5
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ApiKitSettings(BaseSettings):
    """Transport configuration validated from environment variables."""

    # Transport
    base_url: str  # e.g. "https://api.example.com/v1"
    headers: dict[str, str] = {}  # JSON-encoded in the environment

    # Timeouts (seconds); None disables the limit
    connect_timeout_seconds: float = Field(default=30.0, gt=0)
    receive_timeout_seconds: float = Field(default=30.0, gt=0)
    send_timeout_seconds: float | None = Field(default=None, gt=0)

    # Redirects
    follow_redirects: bool = True
    max_redirects: int = Field(default=20, ge=0)

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "API_KIT_"}
