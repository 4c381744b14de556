"""Per-resource service facades over the shared Client."""

from kitsu.services.anime import AnimeService
from kitsu.services.user import UserService

__all__ = [
    "AnimeService",
    "UserService",
]
