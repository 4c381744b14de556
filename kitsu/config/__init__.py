"""Configuration module: client settings and API constants."""

from kitsu.config.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_MEDIA_TYPE,
    KitsuSettings,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_MEDIA_TYPE",
    "KitsuSettings",
]
