"""Public models for the Kitsu client."""

from kitsu.models.documents import (
    APIError,
    CollectionDocument,
    ErrorDocument,
    Links,
    ResourceObject,
    SingleDocument,
)
from kitsu.models.resource import Anime, LibraryEntry, Link, Resource, User
from kitsu.models.responses import Response

__all__ = [
    "APIError",
    "Anime",
    "CollectionDocument",
    "ErrorDocument",
    "LibraryEntry",
    "Link",
    "Links",
    "Resource",
    "ResourceObject",
    "Response",
    "SingleDocument",
    "User",
]
