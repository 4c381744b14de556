"""Pydantic Settings for the Kitsu client.

All environment variables use the KITSU_ prefix.
Example: KITSU_TIMEOUT_SECONDS=5, KITSU_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://kitsu.io/"
DEFAULT_API_VERSION = "api/edge/"
DEFAULT_MEDIA_TYPE = "application/vnd.api+json"


class KitsuSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # API location
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION

    # Transport
    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="kitsu-python/0.1", min_length=1)

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "KITSU_"}

    @property
    def api_url(self) -> str:
        """Base URL with the API version prefix, always ending in a slash."""
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        version = self.api_version.strip("/")
        return f"{base}{version}/" if version else base
